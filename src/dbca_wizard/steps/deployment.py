"""Step 3: deployment type, plus the cluster node list for RAC."""

from enum import IntEnum

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import BaseStep, StepOutcome
from dbca_wizard.widgets import render
from dbca_wizard.widgets.select_list import SelectItem, SelectList
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.events import ENTER, ESCAPE, SPACE, Event, KeyEvent
from dbca_wizard.wizard.models import DBConfig, DeploymentType
from dbca_wizard.wizard.protocol import DeferredAction, StepResult

ITEMS = [
    SelectItem(
        "Oracle Single Instance Database",
        DeploymentType.SINGLE_INSTANCE.value,
        "A single database instance running on one server",
    ),
    SelectItem(
        "Oracle RAC Database",
        DeploymentType.RAC.value,
        "A clustered database with multiple instances across multiple nodes",
    ),
    SelectItem(
        "Oracle RAC One Node Database",
        DeploymentType.RAC_ONE_NODE.value,
        "A single instance on one node with failover capability to other cluster nodes",
    ),
]


class Phase(IntEnum):
    SELECT = 0
    NODES = 1


def split_nodes(value: str) -> list[str]:
    return [node.strip() for node in value.split(",") if node.strip()]


class DeploymentStep(BaseStep):
    TITLE = "Deployment Type"

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.list = SelectList(list(ITEMS), theme)
        self.nodes = TextInput(placeholder="node1,node2", char_limit=512, theme=theme)
        self.phase = Phase.SELECT

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.phase = Phase.SELECT
        self.error = ""
        self.list.reset()
        self.list.move_to(config.deployment_type.value)
        self.nodes.set_value(config.node_list)
        self.nodes.blur()
        return None

    def handle_event(self, event: Event) -> StepOutcome:
        if isinstance(event, KeyEvent) and event.key == ESCAPE:
            if self.phase == Phase.NODES:
                self.phase = Phase.SELECT
                self.error = ""
                self.list.reset()
                self.nodes.blur()
                return self.stay()
            return self.go(StepResult.BACK)

        if self.phase == Phase.SELECT:
            return self._update_selection(event)
        return self._update_nodes(event)

    def _update_selection(self, event: Event) -> StepOutcome:
        if not isinstance(event, KeyEvent):
            return self.stay()

        self.list.handle(event)
        if event.key in (ENTER, SPACE) and self.list.is_selected:
            if self._selected_type() == DeploymentType.SINGLE_INSTANCE:
                return self.go(StepResult.CONTINUE)
            self.phase = Phase.NODES
            return self.stay(self.nodes.focus())
        return self.stay()

    def _update_nodes(self, event: Event) -> StepOutcome:
        if isinstance(event, KeyEvent) and event.key == ENTER:
            if not split_nodes(self.nodes.value):
                self.error = "At least one cluster node is required"
                return self.stay()
            self.error = ""
            return self.go(StepResult.CONTINUE)
        return self.stay(self.nodes.handle(event))

    def _selected_type(self) -> DeploymentType:
        return DeploymentType(self.list.selected_value)

    def render(self) -> Text:
        if self.phase == Phase.SELECT:
            text = render.subtitle("Select the database deployment type:", self.theme)
            text.append_text(self.list.render())
            return text

        item = self.list.selected_item
        text = render.subtitle(item.title if item else "", self.theme)
        text.append_text(render.field("Cluster Nodes", self.nodes, self.theme))
        text.append_text(render.hint("Comma-separated host names, e.g. racnode1,racnode2", self.theme))
        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue, Esc to go back", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.deployment_type = self._selected_type()
        if config.deployment_type == DeploymentType.SINGLE_INSTANCE:
            config.node_list = ""
        else:
            config.node_list = ",".join(split_nodes(self.nodes.value))

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create()
