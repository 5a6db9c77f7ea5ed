"""
Color themes for the wizard.

A ``Theme`` is built once from the settings and handed to every step and
widget, which look styles up by name.
"""

from rich.style import Style

THEME_STYLES = {
    # Header
    "header": "bold #ff6b35 on #1a1a1a",
    "title": "bold #ff6b35",
    "step-indicator": "bold #4a90d9",
    # Body
    "subtitle": "#888888",
    "label": "bold #4a90d9",
    "value": "#fafafa",
    "item": "#fafafa",
    "item-selected": "bold #00d4aa",
    "cursor": "bold #00d4aa",
    "input": "#fafafa",
    "input-focused": "bold #00d4aa",
    "placeholder": "italic #666666",
    "checkbox-on": "#00d4aa",
    "checkbox-off": "#888888",
    "separator": "#888888",
    # Messages
    "error": "bold #ff5555",
    "warning": "bold #ff5555",
    "success": "bold #55ff55",
    "help": "#888888",
    "code": "#e0e0e0 on #1a1a1a",
}

MONO_STYLES = {
    "header": "bold reverse",
    "title": "bold",
    "step-indicator": "bold",
    "subtitle": "dim",
    "label": "bold",
    "value": "",
    "item": "",
    "item-selected": "bold reverse",
    "cursor": "bold",
    "input": "",
    "input-focused": "bold underline",
    "placeholder": "dim italic",
    "checkbox-on": "bold",
    "checkbox-off": "dim",
    "separator": "dim",
    "error": "bold",
    "warning": "bold",
    "success": "bold",
    "help": "dim",
    "code": "",
}

THEMES = {
    "default": THEME_STYLES,
    "mono": MONO_STYLES,
}


class Theme:
    """Named rich styles used when rendering steps."""

    def __init__(self, styles: dict[str, str] | None = None):
        self._styles = {
            name: Style.parse(definition) if definition else Style.null()
            for name, definition in (styles or THEME_STYLES).items()
        }

    @classmethod
    def named(cls, name: str) -> "Theme":
        """Build one of the bundled themes; unknown names fall back to default."""
        return cls(THEMES.get(name, THEME_STYLES))

    def style(self, name: str) -> Style:
        return self._styles.get(name, Style.null())

    def __getitem__(self, name: str) -> Style:
        return self.style(name)


DEFAULT_THEME = Theme()
