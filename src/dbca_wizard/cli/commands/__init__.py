"""CLI command groups."""

from dbca_wizard.cli.commands import config, render

__all__ = ["config", "render"]
