"""tasker - In-memory task list with a console menu."""

__version__ = "0.1.0"
