"""TUI screens."""

from dbca_wizard.tui.screens.wizard import StepView, WizardScreen

__all__ = ["StepView", "WizardScreen"]
