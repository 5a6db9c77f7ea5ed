"""
Path utilities for dbca-wizard.

Provides consistent path resolution for the settings file and the log file.
"""

import os
from pathlib import Path


def get_wizard_home() -> Path:
    """
    Get the dbca-wizard home directory.

    Resolution order:
    1. DBCA_WIZARD_HOME environment variable
    2. Default: ~/.dbca-wizard

    Returns:
        Path to the dbca-wizard home directory.
    """
    env_home = os.environ.get("DBCA_WIZARD_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".dbca-wizard"


def get_global_config_path() -> Path:
    """
    Get the path to the global settings file.

    Returns:
        Path to ~/.dbca-wizard/config.yaml
    """
    return get_wizard_home() / "config.yaml"


def get_log_path() -> Path:
    """
    Get the default log file path.

    The TUI owns the terminal while it runs, so log records go to a file.

    Returns:
        Path to ~/.dbca-wizard/wizard.log
    """
    return get_wizard_home() / "wizard.log"


def expand_path(path: str | Path) -> Path:
    """
    Expand a path string, handling ~ and environment variables.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded and resolved Path.
    """
    if isinstance(path, str):
        path = os.path.expandvars(path)
        path = os.path.expanduser(path)
    return Path(path).resolve()


def ensure_directory(path: Path, mode: int = 0o755) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.
        mode: Permission bits for newly created directories.

    Returns:
        The directory path.
    """
    path.mkdir(parents=True, exist_ok=True, mode=mode)
    return path
