"""CLI interface for tasker."""

from __future__ import annotations

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tasker import __version__
from tasker.config import CONFIG_FILE, TaskerConfig

console = Console()

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tasker")
@click.pass_context
def main(ctx: click.Context) -> None:
    """tasker - In-memory task list with a console menu.

    Tasks live only as long as the session; every operation is logged.

    \b
    Usage:
      tasker                 # Start the menu
      tasker run --no-resources
      tasker init            # Write default config to .tasker/config.json
      tasker status          # Show effective settings
    """
    ctx.ensure_object(dict)
    # init replaces the config file, so it never reads it
    if ctx.invoked_subcommand != "init":
        ctx.obj["config"] = TaskerConfig.load()

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@main.command()
@click.option(
    "--log-format", type=click.Choice(["text", "json"]), help="Log file format"
)
@click.option(
    "--log-level",
    type=click.Choice(LEVELS, case_sensitive=False),
    help="Minimum level written to the log file",
)
@click.option("--no-resources", is_flag=True, help="Hide the memory/CPU header")
@click.option("--no-console-log", is_flag=True, help="Only log to file")
@click.pass_context
def run(
    ctx: click.Context,
    log_format: str | None,
    log_level: str | None,
    no_resources: bool,
    no_console_log: bool,
) -> None:
    """Start the interactive task menu."""
    from tasker.logging_setup import setup_logging, shutdown_logging
    from tasker.menu import TaskMenu
    from tasker.store import TaskStore

    config: TaskerConfig = ctx.obj["config"]

    logging_updates: dict[str, object] = {}
    if log_format:
        logging_updates["format"] = log_format
    if log_level:
        logging_updates["level"] = log_level.upper()
    if no_console_log:
        logging_updates["console"] = False

    display_updates: dict[str, object] = {}
    if no_resources:
        display_updates["show_resources"] = False

    logging_config = config.logging.model_copy(update=logging_updates)
    display_config = config.display.model_copy(update=display_updates)

    logger = setup_logging(logging_config)
    try:
        TaskMenu(TaskStore(), logger, display_config, console=console).run()
    finally:
        shutdown_logging(logger)


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
def init(force: bool) -> None:
    """Write the default configuration file."""
    if CONFIG_FILE.exists() and not force:
        console.print(
            "[yellow]Config already exists.[/yellow] Use --force to overwrite."
        )
        return

    TaskerConfig().save()

    console.print(
        Panel.fit(
            "[green]Configuration saved![/green]\n\n"
            f"Config: [cyan]{CONFIG_FILE}[/cyan]\n\n"
            "Next steps:\n"
            "  1. Review config: [cyan]cat .tasker/config.json[/cyan]\n"
            "  2. Start the menu: [cyan]tasker[/cyan]",
            title="tasker",
        )
    )


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show the effective logging and display settings."""
    config: TaskerConfig = ctx.obj["config"]

    source = str(CONFIG_FILE) if CONFIG_FILE.exists() else "defaults"
    console.print(f"[dim]Config:[/dim] {source}")
    console.print()

    logging_table = Table(title="Logging", show_header=True)
    logging_table.add_column("Setting", style="cyan")
    logging_table.add_column("Value", style="white")
    console_icon = "[green]✓[/green]" if config.logging.console else "[dim]✗[/dim]"
    logging_table.add_row("Level", config.logging.level)
    logging_table.add_row("Console", console_icon)
    logging_table.add_row("Console level", config.logging.console_level)
    logging_table.add_row("Format", config.logging.format)
    logging_table.add_row("File", str(config.logging.file_path))
    logging_table.add_row("Backups kept", str(config.logging.backup_count))

    console.print(logging_table)
    console.print()

    display_table = Table(title="Display", show_header=True)
    display_table.add_column("Setting", style="cyan")
    display_table.add_column("Value", style="white")
    resources_icon = "[green]✓[/green]" if config.display.show_resources else "[dim]✗[/dim]"
    clear_icon = "[green]✓[/green]" if config.display.clear_screen else "[dim]✗[/dim]"
    pause_icon = "[green]✓[/green]" if config.display.pause_after_action else "[dim]✗[/dim]"
    display_table.add_row("Resource header", resources_icon)
    display_table.add_row("CPU sample", f"{config.display.cpu_sample_seconds} s")
    display_table.add_row("Clear screen", clear_icon)
    display_table.add_row("Pause after action", pause_icon)

    console.print(display_table)
