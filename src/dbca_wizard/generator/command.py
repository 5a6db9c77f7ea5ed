"""
Render a finished ``DBConfig`` as a DBCA silent-mode command line.

The command is built as a list of argument groups (``-flag value``) and
joined with a shell line continuation so it can be pasted into a terminal
or written to a script as is.
"""

import logging

from dbca_wizard.wizard.models import (
    DBConfig,
    DatabaseTemplate,
    DeploymentType,
    EMConfiguration,
    StorageType,
)

logger = logging.getLogger(__name__)

PASSWORD_MASK = "<PASSWORD>"
DEFAULT_CONTINUATION = " \\\n  "
DEFAULT_LISTENER = "LISTENER"

MEMORY_MGMT_TYPES = {
    "AUTO": "AUTO",
    "AUTO_SGA": "AUTO_SGA",
    "MANUAL": "CUSTOM",
}


def quote(value: str) -> str:
    """Single-quote a value for a POSIX shell."""
    return "'" + value.replace("'", "'\"'\"'") + "'"


def secret(value: str, show_passwords: bool) -> str:
    return quote(value) if show_passwords else quote(PASSWORD_MASK)


def generate_command(
    config: DBConfig,
    show_passwords: bool = False,
    continuation: str = DEFAULT_CONTINUATION,
) -> str:
    """Generate the ``dbca -silent`` command for the configured operation.

    Args:
        config: Completed wizard configuration.
        show_passwords: Emit real passwords instead of ``<PASSWORD>``.
        continuation: Separator placed between argument groups.

    Returns:
        The command as a single string.
    """
    if config.is_create():
        args = _create_args(config, show_passwords)
    else:
        args = _delete_args(config, show_passwords)

    logger.debug(f"Generated {config.operation.value} command with {len(args)} argument groups")
    return continuation.join(args)


def _create_args(config: DBConfig, show_passwords: bool) -> list[str]:
    args = ["dbca", "-silent", "-createDatabase"]

    if config.template_name != DatabaseTemplate.CUSTOM:
        args.append(f"-templateName {config.template_name.value}")

    args.append(f"-gdbname {config.global_db_name}")
    args.append(f"-sid {config.sid}")

    if config.create_as_container_db:
        args.append("-createAsContainerDatabase true")
        if config.number_of_pdbs > 0:
            args.append(f"-numberOfPDBs {config.number_of_pdbs}")
            args.append(f"-pdbName {config.pdb_name}")
            args.append(f"-pdbAdminPassword {secret(config.pdb_admin_password, show_passwords)}")
    else:
        args.append("-createAsContainerDatabase false")

    args.append(f"-sysPassword {secret(config.sys_password, show_passwords)}")
    args.append(f"-systemPassword {secret(config.system_password, show_passwords)}")

    args.append(f"-characterSet {config.character_set}")
    args.append(f"-nationalCharacterSet {config.national_character_set}")

    args.append(f"-totalMemory {config.total_memory}")
    args.append(f"-memoryMgmtType {MEMORY_MGMT_TYPES.get(config.memory_management, 'CUSTOM')}")

    args.append(f"-databaseType {config.database_type.value}")

    args.append(f"-storageType {config.storage_type.value}")
    if config.storage_type == StorageType.ASM:
        args.append(f"-diskGroupName {config.asm_disk_group}")
    else:
        args.append(f"-datafileDestination {quote(config.datafile_destination)}")
        if config.redo_log_destination and config.redo_log_destination != config.datafile_destination:
            args.append(f"-redoLogFileDestination {quote(config.redo_log_destination)}")

    if config.use_omf:
        args.append("-useOMF true")

    if config.enable_fra:
        args.append(f"-recoveryAreaDestination {quote(config.fra_destination)}")
        args.append(f"-recoveryAreaSize {config.fra_size}")

    if config.redo_log_file_size > 0:
        args.append(f"-redoLogFileSize {config.redo_log_file_size}")

    if config.create_new_listener:
        args.append(f"-createListener {config.listener_name}:{config.listener_port}")
    elif config.listener_name and config.listener_name != DEFAULT_LISTENER:
        args.append(f"-listeners {config.listener_name}")

    args.append(f"-emConfiguration {config.em_configuration.value}")
    if config.em_configuration == EMConfiguration.DB_EXPRESS:
        args.append(f"-dbExpressPort {config.em_port}")
    elif config.em_configuration == EMConfiguration.CENTRAL:
        host = config.cloud_control_agent.split(":", 1)[0]
        args.append(f"-omsHost {host}")
        args.append(f"-omsPort {config.em_port}")

    if config.enable_sample_schemas:
        args.append("-sampleSchema true")

    if config.enable_archive_log:
        args.append("-archiveLogMode true")

    if config.enable_data_vault:
        args.append("-enableDV true")
        args.append(f"-dvOwnerName {config.data_vault_owner}")
        args.append(f"-dvAccountManagerName {config.data_vault_account_manager}")

    if config.init_params:
        params = ",".join(f"{key}={value}" for key, value in config.init_params.items())
        args.append(f"-initParams {params}")

    args.append(f"-databaseConfigType {config.deployment_type.value}")
    if config.is_rac() and config.node_list:
        args.append(f"-nodelist {config.node_list}")

    if config.ignore_prereqs:
        args.append("-ignorePreReqs")

    return args


def _delete_args(config: DBConfig, show_passwords: bool) -> list[str]:
    args = [
        "dbca",
        "-silent",
        "-deleteDatabase",
        f"-sourceDB {config.delete_sid}",
        "-sysDBAUserName sys",
        f"-sysDBAPassword {secret(config.sys_password, show_passwords)}",
    ]
    if config.delete_force:
        args.append("-forceArchiveLogDeletion")
    return args


DEPLOYMENT_LABELS = {
    DeploymentType.SINGLE_INSTANCE: "Single Instance",
    DeploymentType.RAC: "RAC",
    DeploymentType.RAC_ONE_NODE: "RAC One Node",
}


def generate_summary(config: DBConfig) -> str:
    """Human-readable summary of what the command will do."""
    if not config.is_create():
        lines = [
            "Database Deletion Summary",
            "=========================",
            "",
            f"SID: {config.delete_sid}",
            f"Force Delete: {'Yes' if config.delete_force else 'No'}",
        ]
        return "\n".join(lines) + "\n"

    lines = [
        "Database Configuration Summary",
        "==============================",
        "",
        f"Creation Mode: {config.creation_mode.value.capitalize()}",
        f"Deployment: {DEPLOYMENT_LABELS[config.deployment_type]}",
    ]
    if config.is_rac() and config.node_list:
        lines.append(f"Cluster Nodes: {config.node_list}")
    lines.append(f"Template: {config.template_name.value}")
    lines.append("")

    lines.append(f"Global Database Name: {config.global_db_name}")
    lines.append(f"SID: {config.sid}")
    if config.create_as_container_db:
        lines.append("Container Database: Yes")
        lines.append(f"Number of PDBs: {config.number_of_pdbs}")
        if config.number_of_pdbs > 0:
            lines.append(f"PDB Name: {config.pdb_name}")
    else:
        lines.append("Container Database: No")
    lines.append("")

    if config.storage_type == StorageType.ASM:
        lines.append(f"Storage Type: ASM ({config.asm_disk_group})")
    else:
        lines.append("Storage Type: File System")
        lines.append(f"Data Files: {config.datafile_destination}")
    if config.enable_fra:
        lines.append(f"Fast Recovery Area: {config.fra_destination} ({config.fra_size} MB)")
    lines.append(f"Archive Log Mode: {'Enabled' if config.enable_archive_log else 'Disabled'}")
    lines.append("")

    lines.append(f"Total Memory: {config.total_memory} MB")
    lines.append(f"Character Set: {config.character_set}")
    if config.is_advanced():
        lines.append(f"Connection Mode: {config.connection_mode}")
        lines.append(f"Listener: {config.listener_name}:{config.listener_port}")
    if config.enable_data_vault:
        lines.append(f"Data Vault: {config.data_vault_owner} / {config.data_vault_account_manager}")
    if config.em_configuration != EMConfiguration.NONE:
        lines.append(f"Enterprise Manager: {config.em_configuration.value}")

    return "\n".join(lines) + "\n"
