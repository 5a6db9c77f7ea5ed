"""
Main DBCA wizard TUI application.

Built with Textual; the wizard logic itself lives in ``dbca_wizard.wizard``.
"""

from dataclasses import dataclass

from textual.app import App
from textual.binding import Binding

from dbca_wizard.config.schema import Settings
from dbca_wizard.config.theme import Theme
from dbca_wizard.steps import build_steps
from dbca_wizard.tui.screens.wizard import WizardScreen
from dbca_wizard.wizard import DBConfig, Wizard


@dataclass
class WizardOutcome:
    """How a wizard session ended."""

    completed: bool
    print_requested: bool
    config: DBConfig
    cancelled: bool = False


class DBCAWizardApp(App[WizardOutcome]):
    """Main DBCA wizard TUI application."""

    TITLE = "Oracle DBCA Wizard"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "cancel", "Quit", priority=True, show=False),
    ]

    def __init__(self, wizard: Wizard, theme: Theme, settings: Settings):
        """Initialize TUI application.

        Args:
            wizard: Sequencer to drive
            theme: Styles for steps and chrome
            settings: Loaded settings
        """
        super().__init__()
        self.wizard = wizard
        self.wizard_theme = theme
        self.settings = settings

    def on_mount(self) -> None:
        self.push_screen(WizardScreen(self.wizard, self.wizard_theme, self.settings))

    def outcome(self, cancelled: bool = False) -> WizardOutcome:
        return WizardOutcome(
            completed=self.wizard.is_completed(),
            print_requested=self.wizard.should_print(),
            config=self.wizard.current_config(),
            cancelled=cancelled,
        )

    def action_cancel(self) -> None:
        """Leave immediately; nothing is printed, even after completion."""
        self.exit(self.outcome(cancelled=True))


def create_app(config: DBConfig | None = None, settings: Settings | None = None) -> DBCAWizardApp:
    """Build the application with a fresh set of steps."""
    settings = settings or Settings()
    theme = Theme.named(settings.ui.theme)
    steps = build_steps(theme, show_passwords=settings.output.show_passwords)
    return DBCAWizardApp(Wizard(steps, config), theme, settings)


def run_wizard(config: DBConfig | None = None, settings: Settings | None = None) -> WizardOutcome:
    """Run the wizard in TUI mode.

    Args:
        config: Initial configuration to seed the steps with
        settings: Loaded settings

    Returns:
        How the session ended, with the configuration as applied
    """
    app = create_app(config, settings)
    outcome = app.run()
    if outcome is None:
        return app.outcome()
    return outcome
