"""
Data models for the DBCA wizard.

``DBConfig`` is the single record the wizard fills in. Every step reads it
to seed its form and writes it back once the form is confirmed.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Operation(str, Enum):
    """DBCA operation."""

    CREATE = "create"
    DELETE = "delete"


class CreationMode(str, Enum):
    """How much of the configuration the user wants to control."""

    TYPICAL = "typical"
    ADVANCED = "advanced"


class DeploymentType(str, Enum):
    """Database deployment type."""

    SINGLE_INSTANCE = "SI"
    RAC = "RAC"
    RAC_ONE_NODE = "RACONENODE"


class DatabaseTemplate(str, Enum):
    """Template the database is created from."""

    GENERAL_PURPOSE = "General_Purpose.dbt"
    DATA_WAREHOUSE = "Data_Warehouse.dbt"
    CUSTOM = "Custom"


class DatabaseType(str, Enum):
    """Workload type passed as ``-databaseType``."""

    MULTIPURPOSE = "MULTIPURPOSE"
    DATA_WAREHOUSE = "DATA_WAREHOUSING"
    OLTP = "OLTP"


class StorageType(str, Enum):
    """Storage used for database files."""

    FS = "FS"
    ASM = "ASM"


class EMConfiguration(str, Enum):
    """Enterprise Manager configuration."""

    NONE = "NONE"
    DB_EXPRESS = "DBEXPRESS"
    CENTRAL = "CENTRAL"


class DBConfig(BaseModel):
    """All DBCA options collected by the wizard.

    Field defaults are the values a step shows the first time it is visited,
    and the values left in place for every step that gets skipped.
    """

    model_config = ConfigDict(extra="forbid")

    # Operation
    operation: Operation = Operation.CREATE

    # Creation mode
    creation_mode: CreationMode = CreationMode.TYPICAL

    # Deployment
    deployment_type: DeploymentType = DeploymentType.SINGLE_INSTANCE
    node_list: str = ""  # comma separated, RAC only

    # Template
    template_name: DatabaseTemplate = DatabaseTemplate.GENERAL_PURPOSE
    database_type: DatabaseType = DatabaseType.MULTIPURPOSE

    # Identification
    global_db_name: str = "orcl"
    sid: str = "orcl"
    create_as_container_db: bool = True
    number_of_pdbs: int = 1
    pdb_name: str = "orclpdb"
    pdb_prefix: str = ""

    # Storage
    storage_type: StorageType = StorageType.FS
    datafile_destination: str = "/u01/app/oracle/oradata"
    redo_log_destination: str = ""
    asm_disk_group: str = ""
    use_omf: bool = True

    # Fast Recovery Area
    enable_fra: bool = True
    fra_destination: str = "/u01/app/oracle/fast_recovery_area"
    fra_size: int = 10240  # MB
    enable_archive_log: bool = False

    # Network
    listener_name: str = "LISTENER"
    listener_port: int = 1521
    create_new_listener: bool = False

    # Data Vault (advanced only)
    enable_data_vault: bool = False
    data_vault_owner: str = ""
    data_vault_account_manager: str = ""

    # Configuration options
    memory_management: str = "AUTO"  # AUTO, AUTO_SGA, MANUAL
    total_memory: int = 2048  # MB
    sga_size: int = 0  # MB
    pga_size: int = 0  # MB
    character_set: str = "AL32UTF8"
    national_character_set: str = "AL16UTF16"
    connection_mode: str = "DEDICATED"  # DEDICATED, SHARED
    enable_sample_schemas: bool = False

    # Management
    em_configuration: EMConfiguration = EMConfiguration.NONE
    em_port: int = 5500
    cloud_control_agent: str = ""

    # Credentials
    use_common_password: bool = True
    common_password: str = ""
    sys_password: str = ""
    system_password: str = ""
    pdb_admin_password: str = ""

    # Additional options
    redo_log_file_size: int = 50  # MB
    ignore_prereqs: bool = False
    init_params: dict[str, str] = Field(default_factory=dict)

    # Delete operation
    delete_sid: str = ""
    delete_force: bool = False

    def is_create(self) -> bool:
        return self.operation == Operation.CREATE

    def is_advanced(self) -> bool:
        return self.creation_mode == CreationMode.ADVANCED

    def is_rac(self) -> bool:
        return self.deployment_type in (DeploymentType.RAC, DeploymentType.RAC_ONE_NODE)
