"""Step 4: database template."""

from dbca_wizard.steps.base import ListStep
from dbca_wizard.widgets.select_list import SelectItem
from dbca_wizard.wizard.models import DatabaseTemplate, DatabaseType, DBConfig

# Workload type implied by each template
TEMPLATE_DATABASE_TYPES = {
    DatabaseTemplate.GENERAL_PURPOSE: DatabaseType.MULTIPURPOSE,
    DatabaseTemplate.DATA_WAREHOUSE: DatabaseType.DATA_WAREHOUSE,
}


class TemplateStep(ListStep):
    TITLE = "Database Template"
    PROMPT = "Select a database template:"
    FIELD = "template_name"
    ITEMS = [
        SelectItem(
            "General Purpose / Transaction Processing",
            DatabaseTemplate.GENERAL_PURPOSE.value,
            "A pre-configured database template optimized for general purpose or OLTP workloads",
        ),
        SelectItem(
            "Data Warehouse",
            DatabaseTemplate.DATA_WAREHOUSE.value,
            "A pre-configured database template optimized for data warehousing workloads",
        ),
        SelectItem(
            "Custom Database",
            DatabaseTemplate.CUSTOM.value,
            "Create a database with custom configuration (no template)",
        ),
    ]

    def apply(self, config: DBConfig) -> None:
        template = DatabaseTemplate(self.list.selected_value)
        config.template_name = template
        config.database_type = TEMPLATE_DATABASE_TYPES.get(template, DatabaseType.MULTIPURPOSE)

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create()
