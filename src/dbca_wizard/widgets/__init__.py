"""Form widgets used by the wizard steps."""

from dbca_wizard.widgets.select_list import SelectItem, SelectList
from dbca_wizard.widgets.text_input import TextInput

__all__ = ["SelectItem", "SelectList", "TextInput"]
