"""
Wizard screen for the DBCA TUI.

Hosts a ``Wizard``: forwards key presses to it, redraws the current step and
runs the cursor blink timer the steps ask for.
"""

import logging

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Label, Static

from dbca_wizard.config.schema import Settings
from dbca_wizard.config.theme import Theme
from dbca_wizard.generator import generate_command, generate_summary
from dbca_wizard.wizard import CursorBlink, DeferredAction, Event, KeyEvent, Wizard

logger = logging.getLogger(__name__)

BLINK_INTERVAL = 0.5  # seconds

STEP_HELP = "↑/↓: navigate • tab: next field • enter: select • esc: back • ctrl+c: quit"
DONE_HELP = "enter/q: exit"


class StepView(Static, can_focus=True):
    """Body of the wizard; the only focusable widget, so it receives every key."""

    DEFAULT_CSS = """
    StepView {
        width: 100%;
        height: auto;
        padding: 1 2;
    }
    """

    def on_key(self, event: events.Key) -> None:
        """Translate the key and hand it to the screen."""
        event.stop()
        event.prevent_default()
        character = event.character if event.is_printable else None
        self.screen.handle_wizard_event(KeyEvent(event.key, character))


class WizardScreen(Screen):
    """Drives a ``Wizard`` until it completes or the user quits."""

    CSS = """
    WizardScreen {
        align: center top;
    }

    #wizard-container {
        width: 100%;
        max-width: 100;
        height: auto;
        border: round $primary;
        background: $surface;
    }

    #wizard-header {
        width: 100%;
        padding: 0 2;
    }

    #wizard-help {
        width: 100%;
        padding: 0 2;
        margin-top: 1;
    }
    """

    def __init__(self, wizard: Wizard, theme: Theme, settings: Settings):
        """Initialize the wizard screen.

        Args:
            wizard: Sequencer over the concrete steps
            theme: Styles used for the header and help line
            settings: UI and output settings
        """
        super().__init__()
        self.wizard = wizard
        self.wizard_theme = theme
        self.settings = settings
        self.blink_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        """Compose the wizard layout."""
        with Container(id="wizard-container"):
            yield Label(id="wizard-header")
            yield StepView(id="wizard-body")
            yield Label(id="wizard-help")

    def on_mount(self) -> None:
        """Start the wizard on the first visible step."""
        self.query_one(StepView).focus()
        self.schedule(self.wizard.start())
        self.refresh_view()

    # ------------------------------------------------------------------
    # Event routing
    # ------------------------------------------------------------------

    def handle_wizard_event(self, event: Event) -> None:
        """Dispatch one event and react to what the wizard did with it."""
        if self.wizard.is_completed():
            if isinstance(event, KeyEvent) and (event.key == "enter" or event.is_char("q")):
                self.app.exit(self.app.outcome())
            return

        actions = self.wizard.dispatch(event)

        if self.wizard.is_quitting:
            self.app.exit(self.app.outcome())
            return

        self.schedule(actions)
        self.refresh_view()

    def schedule(self, actions: list[DeferredAction]) -> None:
        if DeferredAction.BLINK in actions and self.blink_timer is None:
            self.blink_timer = self.set_timer(BLINK_INTERVAL, self._blink)

    def _blink(self) -> None:
        self.blink_timer = None
        self.handle_wizard_event(CursorBlink())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def refresh_view(self) -> None:
        self.query_one("#wizard-header", Label).update(self.render_header())
        self.query_one(StepView).update(self.render_body())

        help_line = DONE_HELP if self.wizard.is_completed() else STEP_HELP
        show_help = self.settings.ui.show_help or self.wizard.is_completed()
        self.query_one("#wizard-help", Label).update(
            Text(help_line if show_help else "", style=self.wizard_theme["help"])
        )

    def render_header(self) -> Text:
        text = Text("Oracle DBCA Wizard", style=self.wizard_theme["title"])
        step = self.wizard.current_step
        if step is None:
            text.append("  Complete", style=self.wizard_theme["success"])
            return text

        text.append(f"  {step.title()}", style=self.wizard_theme["label"])
        if self.settings.ui.show_progress:
            position, total = self.wizard.progress()
            text.append(f"  Step {position} of {total}", style=self.wizard_theme["step-indicator"])
        return text

    def render_body(self) -> Text:
        step = self.wizard.current_step
        if step is not None:
            return step.render()

        config = self.wizard.current_config()
        text = Text("Configuration complete!\n\n", style=self.wizard_theme["success"])
        text.append(generate_summary(config), style=self.wizard_theme["value"])
        text.append("\nGenerated command:\n\n", style=self.wizard_theme["label"])
        command = generate_command(
            config,
            show_passwords=self.settings.output.show_passwords,
            continuation=self.settings.output.continuation,
        )
        text.append(command, style=self.wizard_theme["code"])
        return text
