"""
dbca-wizard config - Settings management commands.

Usage:
    dbca-wizard config show
    dbca-wizard config show output
    dbca-wizard config set output.show_passwords true
    dbca-wizard config path
    dbca-wizard config init
"""

import json
from typing import Annotated, Any

import typer
import yaml
from pydantic import ValidationError

from dbca_wizard.cli.output import console, print_error, print_info, print_success, print_yaml
from dbca_wizard.config import (
    ConfigurationError,
    Settings,
    get_nested_value,
    load_yaml_file,
    save_yaml_file,
    set_nested_value,
)
from dbca_wizard.storage.paths import get_global_config_path

app = typer.Typer(
    name="config",
    help="Settings management.",
)


def _parse_value(value: str) -> Any:
    """
    Parse a string value to the appropriate Python type.

    Args:
        value: String value to parse.

    Returns:
        Parsed value (bool, int, dict or string).
    """
    # Boolean
    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    # Integer
    try:
        return int(value)
    except ValueError:
        pass

    # JSON objects, for the ``defaults`` mappings
    if value.startswith("{"):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    # String
    return value


@app.command()
def show(
    ctx: typer.Context,
    section: Annotated[
        str | None,
        typer.Argument(
            help="Section or dotted key to show (e.g., 'output', 'ui.theme').",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show the effective (merged) settings."""
    settings = ctx.obj if isinstance(ctx.obj, Settings) else Settings()
    data: Any = settings.model_dump(mode="json")

    if section:
        data = get_nested_value(data, section)
        if data is None:
            print_error(f"Section '{section}' not found in settings.")
            raise typer.Exit(1)

    if json_output:
        console.print_json(json.dumps(data, default=str))
        return

    output = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    print_yaml(output, title=section)


@app.command("set")
def set_value(
    key: Annotated[
        str,
        typer.Argument(
            help="Settings key (e.g., 'ui.theme').",
        ),
    ],
    value: Annotated[
        str,
        typer.Argument(
            help="Value to set.",
        ),
    ],
) -> None:
    """Set a value in the global settings file."""
    config_path = get_global_config_path()

    try:
        config_dict = load_yaml_file(config_path)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    # DBConfig validation types the defaults; "1234" may be a SID
    parsed_value = value if key.startswith("defaults.") else _parse_value(value)
    config_dict = set_nested_value(config_dict, key, parsed_value)

    try:
        Settings.model_validate(config_dict)
    except ValidationError as e:
        print_error(f"Invalid value for {key}: {e}")
        raise typer.Exit(1)

    try:
        save_yaml_file(config_path, config_dict)
    except ConfigurationError as e:
        print_error(f"Failed to save settings: {e}")
        raise typer.Exit(1)

    print_success(f"Set {key} = {parsed_value!r}")
    console.print(f"[dim]File: {config_path}[/dim]")


@app.command()
def path() -> None:
    """Show the path of the global settings file."""
    config_path = get_global_config_path()
    console.print(str(config_path), markup=False, highlight=False)
    if not config_path.exists():
        print_info("File does not exist yet; run 'dbca-wizard config init'")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Write a settings file with every default spelled out."""
    config_path = get_global_config_path()

    if config_path.exists() and not force:
        print_error(f"Settings file already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(1)

    try:
        save_yaml_file(config_path, Settings().model_dump(mode="json"))
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Created {config_path}")
