"""
DBCA wizard TUI (Terminal User Interface).

Built with the Textual framework.
"""

from dbca_wizard.tui.app import DBCAWizardApp, WizardOutcome, create_app, run_wizard

__all__ = ["DBCAWizardApp", "WizardOutcome", "create_app", "run_wizard"]
