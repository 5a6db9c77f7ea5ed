"""Command line interface for dbca-wizard."""

from dbca_wizard.cli.app import app

__all__ = ["app"]
