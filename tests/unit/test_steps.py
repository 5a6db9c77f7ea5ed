"""
Unit tests for the concrete wizard steps.
"""

import pytest

from dbca_wizard.config.theme import DEFAULT_THEME
from dbca_wizard.steps import (
    ConfigOptionsStep,
    CredentialsStep,
    DataVaultStep,
    DeleteStep,
    DeploymentStep,
    IdentificationStep,
    ManagementStep,
    NetworkStep,
    OperationStep,
    RecoveryStep,
    ReviewStep,
    StorageStep,
    TemplateStep,
    build_steps,
)
from dbca_wizard.steps.base import FormStep
from dbca_wizard.wizard import DBConfig, DeferredAction, KeyEvent, StepResult
from dbca_wizard.wizard.models import (
    CreationMode,
    DatabaseTemplate,
    DatabaseType,
    DeploymentType,
    EMConfiguration,
    Operation,
    StorageType,
)


def key(name: str) -> KeyEvent:
    return KeyEvent.char(name) if len(name) == 1 else KeyEvent(name)


def send(step, *names: str):
    """Press keys on a step; return the (step, result, action) of the last one."""
    outcome = None
    for name in names:
        outcome = step.handle_event(key(name))
    return outcome


def result_of(step, *names: str) -> StepResult:
    return send(step, *names)[1]


def type_into(step, text: str) -> None:
    for character in text:
        step.handle_event(KeyEvent.char(character))


def clear(step, count: int = 80) -> None:
    for _ in range(count):
        step.handle_event(key("backspace"))


def started(step_class, config: DBConfig | None = None):
    step = step_class(DEFAULT_THEME)
    step.initialize(config or DBConfig())
    return step


ADVANCED = DBConfig(creation_mode=CreationMode.ADVANCED)


# =============================================================================
# Visibility
# =============================================================================


class TestVisibility:
    """Which steps are shown for each kind of session."""

    def visible(self, config: DBConfig) -> list[str]:
        return [step.title() for step in build_steps(DEFAULT_THEME) if not step.should_skip(config)]

    def test_typical_create(self):
        assert self.visible(DBConfig()) == [
            "Select Operation",
            "Database Creation Mode",
            "Deployment Type",
            "Database Template",
            "Database Identification",
            "Storage Configuration",
            "Recovery & Archive Log",
            "Configuration Options",
            "Database Credentials",
            "Review",
        ]

    def test_advanced_create_adds_optional_steps(self):
        visible = self.visible(ADVANCED)
        assert "Network Configuration" in visible
        assert "Data Vault Configuration" in visible
        assert "Management Options" in visible
        assert "Delete Database" not in visible
        assert len(visible) == 13

    def test_delete(self):
        config = DBConfig(operation=Operation.DELETE, creation_mode=CreationMode.ADVANCED)
        assert self.visible(config) == ["Select Operation", "Delete Database", "Review"]


# =============================================================================
# List steps
# =============================================================================


class TestOperationStep:
    """Tests for the first step."""

    def test_escape_quits(self):
        assert result_of(started(OperationStep), "escape") == StepResult.QUIT

    def test_q_quits(self):
        assert result_of(started(OperationStep), "q") == StepResult.QUIT

    def test_select_delete(self):
        step = started(OperationStep)
        assert result_of(step, "down", "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.operation == Operation.DELETE

    def test_cursor_seeded_from_config(self):
        step = started(OperationStep, DBConfig(operation=Operation.DELETE))
        assert step.list.current_item.value == "delete"

    def test_vim_keys_move_cursor(self):
        step = started(OperationStep)
        send(step, "j")
        assert step.list.cursor == 1
        send(step, "k")
        assert step.list.cursor == 0


class TestTemplateStep:
    """Tests for template selection."""

    def test_data_warehouse_sets_database_type(self):
        step = started(TemplateStep)
        assert result_of(step, "down", "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.template_name == DatabaseTemplate.DATA_WAREHOUSE
        assert config.database_type == DatabaseType.DATA_WAREHOUSE

    def test_custom_is_multipurpose(self):
        step = started(TemplateStep)
        send(step, "down", "down", "space")

        config = DBConfig(database_type=DatabaseType.OLTP)
        step.apply(config)
        assert config.template_name == DatabaseTemplate.CUSTOM
        assert config.database_type == DatabaseType.MULTIPURPOSE

    def test_escape_goes_back(self):
        assert result_of(started(TemplateStep), "escape") == StepResult.BACK


# =============================================================================
# Deployment
# =============================================================================


class TestDeploymentStep:
    """Tests for deployment type and the RAC node list."""

    def test_single_instance_continues(self):
        step = started(DeploymentStep, DBConfig(node_list="old"))
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig(node_list="old")
        step.apply(config)
        assert config.deployment_type == DeploymentType.SINGLE_INSTANCE
        assert config.node_list == ""

    def test_rac_asks_for_nodes(self):
        step = started(DeploymentStep)
        _, result, action = send(step, "down", "enter")
        assert result == StepResult.STAY
        assert action == DeferredAction.BLINK
        assert "Cluster Nodes" in step.render().plain

    def test_rac_requires_a_node(self):
        step = started(DeploymentStep)
        send(step, "down", "enter")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "At least one cluster node is required"

    def test_rac_node_list_is_normalized(self):
        step = started(DeploymentStep)
        send(step, "down", "enter")
        type_into(step, "rac1, rac2,")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.deployment_type == DeploymentType.RAC
        assert config.node_list == "rac1,rac2"

    def test_escape_unwinds_node_phase_first(self):
        step = started(DeploymentStep)
        send(step, "down", "down", "enter")
        assert result_of(step, "escape") == StepResult.STAY
        assert "Select the database deployment type" in step.render().plain
        assert result_of(step, "escape") == StepResult.BACK


# =============================================================================
# Identification
# =============================================================================


class TestIdentificationStep:
    """Tests for names and container settings."""

    def test_defaults_are_valid(self):
        step = started(IdentificationStep)
        assert result_of(step, "enter") == StepResult.CONTINUE

    def test_initialize_focuses_first_field(self):
        step = IdentificationStep(DEFAULT_THEME)
        assert step.initialize(DBConfig()) == DeferredAction.BLINK
        assert step.focus == "global_name"

    def test_global_name_required(self):
        step = started(IdentificationStep)
        clear(step)
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Global Database Name is required"
        assert "Global Database Name is required" in step.render().plain

    def test_sid_input_is_limited(self):
        step = started(IdentificationStep)
        send(step, "tab")
        clear(step)
        type_into(step, "abcdefghijklmnop")
        assert step.value("sid") == "abcdefghijkl"

    def test_toggle_cdb_off(self):
        step = started(IdentificationStep)
        send(step, "tab", "tab")
        assert step.focus == "cdb"
        send(step, "c")
        assert step.create_cdb is False
        assert step.focus_order() == ["global_name", "sid", "cdb"]
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.create_as_container_db is False
        assert config.number_of_pdbs == 0
        assert config.pdb_name == ""

    def test_toggle_key_ignored_in_text_field(self):
        step = started(IdentificationStep)
        send(step, "c")
        assert step.create_cdb is True
        assert step.value("global_name") == "orclc"

    def test_pdb_count_range(self):
        step = started(IdentificationStep)
        send(step, "shift+tab", "shift+tab")
        assert step.focus == "pdbs"
        clear(step)
        type_into(step, "253")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Number of PDBs must be between 0 and 252"

    def test_pdb_name_required_with_pdbs(self):
        step = started(IdentificationStep)
        send(step, "shift+tab")
        assert step.focus == "pdb_name"
        clear(step)
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "PDB Name/Prefix is required when creating PDBs"

    def test_apply_sets_pdb_prefix(self):
        step = started(IdentificationStep)
        send(step, "enter")
        config = DBConfig()
        step.apply(config)
        assert config.pdb_prefix == "orclpdb"


# =============================================================================
# Storage
# =============================================================================


class TestStorageStep:
    """Tests for storage type and locations."""

    def test_file_system_redo_defaults_to_datafile(self):
        step = started(StorageStep)
        send(step, "enter")
        assert step.focus == "datafile"
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.storage_type == StorageType.FS
        assert config.redo_log_destination == config.datafile_destination

    def test_asm_requires_disk_group(self):
        step = started(StorageStep)
        send(step, "down", "enter")
        assert step.focus == "disk_group"
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "ASM Disk Group is required"

        type_into(step, "+DATA")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.storage_type == StorageType.ASM
        assert config.asm_disk_group == "+DATA"
        assert config.datafile_destination == "+DATA"

    def test_omf_toggle(self):
        step = started(StorageStep)
        send(step, "enter", "tab", "tab")
        assert step.focus == "omf"
        send(step, "o")
        assert step.use_omf is False

    def test_escape_unwinds_paths_phase(self):
        step = started(StorageStep)
        send(step, "enter")
        assert result_of(step, "escape") == StepResult.STAY
        assert "Select storage type" in step.render().plain
        assert result_of(step, "escape") == StepResult.BACK


# =============================================================================
# Recovery
# =============================================================================


class TestRecoveryStep:
    """Tests for FRA and archive log settings."""

    def test_toggles_then_confirm(self):
        step = started(RecoveryStep)
        send(step, "a", "tab", "f")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.enable_archive_log is True
        assert config.enable_fra is False

    def test_enabling_fra_focuses_location(self):
        step = started(RecoveryStep, DBConfig(enable_fra=False))
        send(step, "tab")
        _, _, action = send(step, "space")
        assert step.enable_fra is True
        assert step.focus == "fra_dest"
        assert action == DeferredAction.BLINK

    def test_fra_size_minimum(self):
        step = started(RecoveryStep)
        send(step, "tab", "tab", "tab")
        assert step.focus == "fra_size"
        clear(step)
        type_into(step, "100")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "FRA size must be at least 1024 MB"

    def test_fra_location_required(self):
        step = started(RecoveryStep)
        send(step, "tab", "tab")
        clear(step)
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Fast Recovery Area location is required"


# =============================================================================
# Network and Data Vault
# =============================================================================


class TestNetworkStep:
    """Tests for listener settings."""

    def test_port_range(self):
        step = started(NetworkStep, ADVANCED)
        send(step, "tab")
        clear(step)
        type_into(step, "0")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Port must be between 1 and 65535"

    def test_listener_required(self):
        step = started(NetworkStep, ADVANCED)
        clear(step)
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Listener name is required"

    def test_create_listener(self):
        step = started(NetworkStep, ADVANCED)
        send(step, "tab")
        clear(step)
        type_into(step, "1522")
        send(step, "tab", "c")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.listener_port == 1522
        assert config.create_new_listener is True


class TestDataVaultStep:
    """Tests for Data Vault settings."""

    def test_disabled_by_default_continues(self):
        step = started(DataVaultStep, ADVANCED)
        assert result_of(step, "enter") == StepResult.CONTINUE

    def test_enabled_requires_accounts(self):
        step = started(DataVaultStep, ADVANCED)
        send(step, "d")
        assert step.focus == "owner"
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Data Vault Owner is required"

        type_into(step, "C##DVO")
        send(step, "tab")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Data Vault Account Manager is required"

        type_into(step, "C##DVM")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.enable_data_vault is True
        assert config.data_vault_owner == "C##DVO"
        assert config.data_vault_account_manager == "C##DVM"


# =============================================================================
# Configuration options
# =============================================================================


class TestConfigOptionsStep:
    """Tests for the memory / charset / connection sub-screens."""

    def test_typical_finishes_on_charset(self):
        step = started(ConfigOptionsStep, DBConfig(enable_sample_schemas=True))
        assert result_of(step, "enter") == StepResult.STAY
        assert result_of(step, "enter") == StepResult.STAY
        assert result_of(step, "down", "enter") == StepResult.CONTINUE

        config = DBConfig(enable_sample_schemas=True, connection_mode="SHARED")
        step.apply(config)
        assert config.character_set == "UTF8"
        assert config.national_character_set == "AL16UTF16"
        assert config.connection_mode == "DEDICATED"
        assert config.enable_sample_schemas is False

    def test_advanced_asks_for_connection_mode(self):
        step = started(ConfigOptionsStep, ADVANCED)
        send(step, "enter", "enter", "enter")
        assert "Select connection mode" in step.render().plain

        send(step, "s")
        assert result_of(step, "down", "enter") == StepResult.CONTINUE

        config = DBConfig(creation_mode=CreationMode.ADVANCED)
        step.apply(config)
        assert config.connection_mode == "SHARED"
        assert config.enable_sample_schemas is True

    def test_memory_minimum(self):
        step = started(ConfigOptionsStep)
        send(step, "down", "enter")
        clear(step)
        type_into(step, "128")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Memory size must be at least 256 MB"

    def test_escape_unwinds_one_phase_at_a_time(self):
        step = started(ConfigOptionsStep, ADVANCED)
        send(step, "enter", "enter", "enter")

        assert result_of(step, "escape") == StepResult.STAY
        assert "Select database character set" in step.render().plain
        assert result_of(step, "escape") == StepResult.STAY
        assert "Total Memory" in step.render().plain
        assert result_of(step, "escape") == StepResult.STAY
        assert "Select memory management mode" in step.render().plain
        assert result_of(step, "escape") == StepResult.BACK

    def test_apply_memory_settings(self):
        step = started(ConfigOptionsStep)
        send(step, "down", "down", "enter")
        clear(step)
        type_into(step, "4096")
        send(step, "enter", "enter")

        config = DBConfig()
        step.apply(config)
        assert config.memory_management == "MANUAL"
        assert config.total_memory == 4096


# =============================================================================
# Management
# =============================================================================


class TestManagementStep:
    """Tests for Enterprise Manager settings."""

    def test_none_continues_directly(self):
        step = started(ManagementStep, ADVANCED)
        assert result_of(step, "enter") == StepResult.CONTINUE

    def test_db_express_port(self):
        step = started(ManagementStep, ADVANCED)
        send(step, "down", "enter")
        assert step.focus == "port"
        clear(step)
        type_into(step, "70000")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Port must be between 1 and 65535"

        clear(step)
        type_into(step, "5501")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.em_configuration == EMConfiguration.DB_EXPRESS
        assert config.em_port == 5501

    def test_cloud_control_requires_agent(self):
        step = started(ManagementStep, ADVANCED)
        send(step, "down", "down", "enter")
        assert step.focus == "agent"
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Cloud Control agent URL is required"

        type_into(step, "oms.example.com:3872")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.cloud_control_agent == "oms.example.com:3872"

    def test_escape_returns_to_selection(self):
        step = started(ManagementStep, ADVANCED)
        send(step, "down", "enter")
        assert result_of(step, "escape") == StepResult.STAY
        assert result_of(step, "escape") == StepResult.BACK

    def test_space_on_port_is_not_a_toggle(self):
        step = started(ManagementStep, ADVANCED)
        send(step, "down", "enter")
        assert step.toggle("port") is None
        assert result_of(step, "space") == StepResult.STAY
        assert step.error == ""


class TestFormStep:
    """Tests for the form step base class."""

    def test_focus_order_and_validate_are_required(self):
        class Incomplete(FormStep):
            def initialize(self, config):
                return None

            def render(self):
                return ""

            def apply(self, config):
                pass

            def should_skip(self, config):
                return False

        with pytest.raises(TypeError):
            Incomplete(DEFAULT_THEME)


# =============================================================================
# Credentials and Delete
# =============================================================================


class TestCredentialsStep:
    """Tests for password entry."""

    def test_common_password_minimum_length(self):
        step = started(CredentialsStep)
        send(step, "tab")
        type_into(step, "short")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Password must be at least 8 characters"

    def test_common_password_applies_to_every_account(self):
        step = started(CredentialsStep)
        send(step, "tab")
        type_into(step, "Welcome_123")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.sys_password == "Welcome_123"
        assert config.system_password == "Welcome_123"
        assert config.pdb_admin_password == "Welcome_123"

    def test_password_is_masked(self):
        step = started(CredentialsStep)
        send(step, "tab")
        type_into(step, "Welcome_123")
        assert "Welcome_123" not in step.render().plain
        assert "***********" in step.render().plain

    def test_separate_passwords(self):
        step = started(CredentialsStep)
        send(step, "c")
        assert step.use_common_password is False
        assert step.focus == "sys"

        type_into(step, "Sys_pass1")
        send(step, "tab")
        type_into(step, "System1")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "PDB Admin password is required"

        send(step, "tab")
        type_into(step, "Pdb_admin1")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig()
        step.apply(config)
        assert config.use_common_password is False
        assert config.sys_password == "Sys_pass1"
        assert config.system_password == "System1"
        assert config.pdb_admin_password == "Pdb_admin1"

    def test_no_pdb_admin_without_cdb(self):
        step = started(CredentialsStep, DBConfig(create_as_container_db=False))
        send(step, "c")
        assert step.focus_order() == ["common_toggle", "sys", "system"]


class TestDeleteStep:
    """Tests for the delete operation."""

    def test_requires_sid_and_password(self):
        step = started(DeleteStep, DBConfig(operation=Operation.DELETE))
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "Database SID is required"

        type_into(step, "orcl")
        assert result_of(step, "enter") == StepResult.STAY
        assert step.error == "SYS password is required for deletion"

    def test_force_toggle_then_confirm(self):
        step = started(DeleteStep, DBConfig(operation=Operation.DELETE))
        type_into(step, "orcl")
        send(step, "tab")
        type_into(step, "secret")
        send(step, "tab", "f")
        assert result_of(step, "enter") == StepResult.CONTINUE

        config = DBConfig(operation=Operation.DELETE)
        step.apply(config)
        assert config.delete_sid == "orcl"
        assert config.sys_password == "secret"
        assert config.delete_force is True

    def test_shows_warning(self):
        step = started(DeleteStep, DBConfig(operation=Operation.DELETE))
        assert "WARNING" in step.render().plain


# =============================================================================
# Review
# =============================================================================


class TestReviewStep:
    """Tests for the final summary screen."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("enter", StepResult.CONTINUE),
            ("escape", StepResult.BACK),
            ("p", StepResult.PRINT_AND_QUIT),
            ("q", StepResult.QUIT),
            ("x", StepResult.STAY),
        ],
    )
    def test_keys(self, name, expected):
        assert result_of(started(ReviewStep), name) == expected

    def test_reveal_passwords(self):
        step = started(ReviewStep, DBConfig(sys_password="Secret_123"))
        assert "Secret_123" not in step.render().plain
        assert "<PASSWORD>" in step.render().plain

        send(step, "r")
        assert "Secret_123" in step.render().plain

    def test_apply_is_noop(self):
        config = DBConfig()
        started(ReviewStep).apply(config)
        assert config == DBConfig()


# =============================================================================
# Full sessions
# =============================================================================


class TestFullSession:
    """Whole wizard runs over the real steps."""

    def test_typical_create(self, driver):
        driver.press("enter", "enter", "enter", "enter")
        assert driver.title == "Database Identification"

        driver.press("enter")
        assert driver.title == "Storage Configuration"
        driver.press("enter", "enter")
        assert driver.title == "Recovery & Archive Log"
        driver.press("enter")
        assert driver.title == "Configuration Options"
        driver.press("enter", "enter", "enter")
        assert driver.title == "Database Credentials"

        driver.press("tab").type("Welcome_123").press("enter")
        assert driver.title == "Review"
        driver.press("enter")

        assert driver.wizard.is_completed()
        config = driver.config
        assert config.operation == Operation.CREATE
        assert config.sys_password == "Welcome_123"
        assert config.redo_log_destination == config.datafile_destination

    def test_delete(self, driver):
        driver.press("down", "enter")
        assert driver.title == "Delete Database"

        driver.type("orcl").press("tab").type("secret").press("enter")
        assert driver.title == "Review"

        driver.press("p")
        assert driver.wizard.is_quitting
        assert driver.wizard.should_print()
        assert driver.config.delete_sid == "orcl"

    def test_back_from_delete_returns_to_operation(self, driver):
        driver.press("down", "enter", "escape")
        assert driver.title == "Select Operation"

    def test_advanced_shows_network(self, driver):
        driver.press("enter", "down", "enter")
        driver.press("enter", "enter", "enter", "enter", "enter", "enter")
        assert driver.title == "Network Configuration"
        driver.press("enter")
        assert driver.title == "Data Vault Configuration"

    def test_escape_on_first_step_quits(self, driver):
        driver.press("escape")
        assert driver.wizard.is_quitting
        assert not driver.wizard.should_print()
