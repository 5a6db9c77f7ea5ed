"""
Input events delivered to the wizard.

Key names follow Textual's naming (``enter``, ``escape``, ``shift+tab`` ...),
so the host can forward its key events without a translation table.
"""

from dataclasses import dataclass

ENTER = "enter"
ESCAPE = "escape"
SPACE = "space"
TAB = "tab"
SHIFT_TAB = "shift+tab"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
HOME = "home"
END = "end"
BACKSPACE = "backspace"
DELETE = "delete"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press."""

    key: str
    character: str | None = None

    @classmethod
    def char(cls, character: str) -> "KeyEvent":
        """Build the event for a printable character."""
        key = "space" if character == " " else character
        return cls(key=key, character=character)

    @property
    def is_printable(self) -> bool:
        return self.character is not None and len(self.character) == 1 and self.character.isprintable()

    def is_char(self, character: str) -> bool:
        """True if this key typed ``character`` (case-insensitive)."""
        return self.character is not None and self.character.lower() == character.lower()


@dataclass(frozen=True)
class CursorBlink:
    """Timer tick that toggles the text cursor of the focused input."""


Event = KeyEvent | CursorBlink
