"""
dbca-wizard render - Build the command from a saved answers file.

Usage:
    dbca-wizard render answers.yaml
    dbca-wizard render answers.yaml --summary
    dbca-wizard render answers.yaml --output create_db.sh
"""

from pathlib import Path
from typing import Annotated

import typer

from dbca_wizard.cli.output import console, print_command, print_error, print_success
from dbca_wizard.cli.scripts import write_script
from dbca_wizard.config import ConfigurationError, Settings, load_answers
from dbca_wizard.generator import generate_command, generate_summary


def render(
    ctx: typer.Context,
    answers: Annotated[
        Path,
        typer.Argument(
            help="YAML file with DBConfig field values.",
        ),
    ],
    summary: Annotated[
        bool,
        typer.Option(
            "--summary",
            "-s",
            help="Print the configuration summary before the command.",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Also write the command to this shell script.",
        ),
    ] = None,
) -> None:
    """Render the DBCA command for an answers file without the wizard."""
    settings = ctx.obj if isinstance(ctx.obj, Settings) else Settings()

    try:
        config = load_answers(answers)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if summary:
        console.print(generate_summary(config), markup=False, highlight=False)

    command = generate_command(
        config,
        show_passwords=settings.output.show_passwords,
        continuation=settings.output.continuation,
    )
    print_command(command)

    if output is not None:
        path = write_script(command, output)
        print_success(f"Command written to {path}")
