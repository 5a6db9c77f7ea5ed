"""Small rendering helpers shared by the steps."""

from rich.text import Text

from dbca_wizard.config.theme import Theme
from dbca_wizard.widgets.text_input import TextInput


def subtitle(message: str, theme: Theme) -> Text:
    return Text(f"{message}\n\n", style=theme["subtitle"])


def hint(message: str, theme: Theme) -> Text:
    return Text(f"    {message}\n", style=theme["subtitle"])


def field(label: str, input_: TextInput, theme: Theme) -> Text:
    """Label on one line, the input below it."""
    text = Text(f"{label}\n", style=theme["label"])
    text.append_text(input_.render())
    text.append("\n")
    return text


def checkbox(label: str, checked: bool, focused: bool, theme: Theme) -> Text:
    if checked:
        text = Text("[x]", style=theme["checkbox-on"])
    else:
        text = Text("[ ]", style=theme["checkbox-off"])
    text.append(" ")
    text.append(label, style=theme["item-selected"] if focused else theme["item"])
    text.append("\n")
    return text


def error(message: str, theme: Theme) -> Text:
    """Validation message block; empty when there is no message."""
    if not message:
        return Text()
    return Text(f"\n{message}\n", style=theme["error"])


def separator(theme: Theme, width: int = 41) -> Text:
    return Text("─" * width + "\n\n", style=theme["separator"])
