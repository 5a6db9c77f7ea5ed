"""Storage utilities for dbca-wizard."""

from dbca_wizard.storage.paths import (
    ensure_directory,
    expand_path,
    get_global_config_path,
    get_log_path,
    get_wizard_home,
)

__all__ = [
    "ensure_directory",
    "expand_path",
    "get_global_config_path",
    "get_log_path",
    "get_wizard_home",
]
