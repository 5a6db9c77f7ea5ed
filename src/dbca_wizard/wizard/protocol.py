"""
Step protocol - the contract between a wizard step and the sequencer.

The sequencer only ever talks to steps through this interface; it never
looks at which concrete step it is holding.
"""

from abc import ABC, abstractmethod
from enum import Enum

from rich.text import Text

from dbca_wizard.wizard.events import Event
from dbca_wizard.wizard.models import DBConfig


class StepResult(str, Enum):
    """Outcome of a step handling one event."""

    CONTINUE = "continue"  # local work done; apply and advance
    BACK = "back"  # discard local edits and retreat
    QUIT = "quit"  # terminate without applying
    STAY = "stay"  # remain on this step
    PRINT_AND_QUIT = "print_and_quit"  # terminate and emit the command


class DeferredAction(str, Enum):
    """Work handed back to the host event loop."""

    BLINK = "blink"  # schedule a CursorBlink tick


class Step(ABC):
    """A single question group in the wizard."""

    @abstractmethod
    def initialize(self, config: DBConfig) -> DeferredAction | None:
        """Reset the local draft and seed it from ``config``.

        Must not modify ``config``. Calling it twice in a row with the same
        configuration leaves the step in the same state.
        """

    @abstractmethod
    def handle_event(self, event: Event) -> tuple["Step", StepResult, DeferredAction | None]:
        """Handle one input event.

        Returns the step instance to keep, the transition signal and an
        optional deferred action.
        """

    @abstractmethod
    def render(self) -> Text:
        """Render the step body from local state."""

    @abstractmethod
    def title(self) -> str:
        """Title shown in the wizard header."""

    @abstractmethod
    def apply(self, config: DBConfig) -> None:
        """Merge the confirmed draft into ``config``.

        Only called after the step returned ``StepResult.CONTINUE``.
        """

    def should_skip(self, config: DBConfig) -> bool:
        """Whether the step is hidden for ``config``. Shown by default."""
        return False
