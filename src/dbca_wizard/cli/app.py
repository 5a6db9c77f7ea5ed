"""
Main Typer application for the dbca-wizard CLI.

Running ``dbca-wizard`` with no subcommand launches the interactive wizard;
the subcommands cover non-interactive rendering and settings management.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from dbca_wizard import __version__
from dbca_wizard.cli.commands import config, render
from dbca_wizard.cli.output import print_command, print_error, print_info, print_success, print_warning
from dbca_wizard.cli.scripts import write_script
from dbca_wizard.config import ConfigurationError, Settings, build_initial_config, load_settings
from dbca_wizard.generator import generate_command
from dbca_wizard.storage.paths import ensure_directory, get_log_path

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Create the main Typer app
app = typer.Typer(
    name="dbca-wizard",
    help="Interactive wizard that builds Oracle DBCA silent-mode commands.",
    no_args_is_help=False,  # Allow running without args to launch the wizard
    invoke_without_command=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"dbca-wizard version [green]{__version__}[/green]")
        raise typer.Exit()


def setup_logging(settings: Settings, verbose: bool = False) -> None:
    """Send log records to the log file; the terminal belongs to the TUI."""
    log_file = settings.logging.file or get_log_path()
    ensure_directory(log_file.parent)
    level = logging.DEBUG if verbose else getattr(logging, settings.logging.level)
    logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)


# noinspection PyUnusedLocal
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Extra settings file applied over ~/.dbca-wizard/config.yaml.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Write debug records to the log file.",
        ),
    ] = False,
    show_passwords: Annotated[
        bool,
        typer.Option(
            "--show-passwords",
            help="Put real passwords in the generated command.",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Also write the generated command to this shell script.",
        ),
    ] = None,
) -> None:
    """
    [bold blue]dbca-wizard[/bold blue] - Oracle DBCA command builder

    Walks through the Database Configuration Assistant options one screen at a
    time and prints the matching [bold]dbca -silent[/bold] command.

    Run [bold]dbca-wizard[/bold] without arguments to launch the wizard.
    """
    try:
        settings = load_settings(config_file=config_file)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if show_passwords:
        settings.output.show_passwords = True

    setup_logging(settings, verbose)
    ctx.obj = settings

    # If no subcommand is invoked, launch the wizard
    if ctx.invoked_subcommand is None:
        _launch_wizard(settings, output)


# Register command groups
app.add_typer(config.app, name="config")
app.command(name="render")(render.render)


def _launch_wizard(settings: Settings, output: Path | None) -> None:
    """Run the TUI and emit the command if the session asked for it."""
    from dbca_wizard.tui import run_wizard

    try:
        initial = build_initial_config(settings)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    logger.info("Starting wizard")
    outcome = run_wizard(initial, settings)
    logger.info(f"Wizard finished: completed={outcome.completed} print={outcome.print_requested}")

    if outcome.cancelled or not (outcome.completed or outcome.print_requested):
        print_warning("Wizard cancelled, no command generated")
        return

    command = generate_command(
        outcome.config,
        show_passwords=settings.output.show_passwords,
        continuation=settings.output.continuation,
    )
    if outcome.print_requested or settings.output.print_on_complete:
        print_command(command)

    if output is not None:
        path = write_script(command, output)
        print_success(f"Command written to {path}")


if __name__ == "__main__":
    app()
