"""Allow ``python -m dbca_wizard``."""

from dbca_wizard.cli.app import app

if __name__ == "__main__":
    app()
