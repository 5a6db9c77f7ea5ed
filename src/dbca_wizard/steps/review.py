"""Final step: summary and command preview."""

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.generator import generate_command, generate_summary
from dbca_wizard.steps.base import BaseStep, StepOutcome
from dbca_wizard.widgets import render
from dbca_wizard.wizard.events import ENTER, ESCAPE, Event, KeyEvent
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction, StepResult


class ReviewStep(BaseStep):
    """Shows what will be generated. Never skipped; it commits nothing."""

    TITLE = "Review"

    def __init__(self, theme: Theme = DEFAULT_THEME, show_passwords: bool = False):
        super().__init__(theme)
        self.show_passwords = show_passwords
        self.reveal = show_passwords

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.reveal = self.show_passwords
        return None

    def handle_event(self, event: Event) -> StepOutcome:
        if not isinstance(event, KeyEvent):
            return self.stay()

        if event.key == ESCAPE:
            return self.go(StepResult.BACK)
        if event.key == ENTER:
            return self.go(StepResult.CONTINUE)
        if event.is_char("p"):
            return self.go(StepResult.PRINT_AND_QUIT)
        if event.is_char("q"):
            return self.go(StepResult.QUIT)
        if event.is_char("r"):
            self.reveal = not self.reveal
        return self.stay()

    def render(self) -> Text:
        text = Text(generate_summary(self.config), style=self.theme["value"])
        text.append("\n")
        text.append_text(render.separator(self.theme))
        text.append("Generated command:\n\n", style=self.theme["label"])
        text.append(generate_command(self.config, show_passwords=self.reveal), style=self.theme["code"])
        text.append("\n\n")
        reveal = "hide" if self.reveal else "reveal"
        text.append(
            f"Enter: finish   p: print and quit   r: {reveal} passwords   Esc: back   q: quit",
            style=self.theme["help"],
        )
        return text

    def apply(self, config: DBConfig) -> None:
        pass
