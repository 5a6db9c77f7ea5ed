"""Writing generated commands to shell scripts."""

import logging
from pathlib import Path

from dbca_wizard.storage.paths import ensure_directory, expand_path

logger = logging.getLogger(__name__)

SCRIPT_HEADER = "#!/bin/sh\n# Generated by dbca-wizard\n\n"


def write_script(command: str, path: Path) -> Path:
    """Write ``command`` to an executable shell script.

    Args:
        command: Generated DBCA command.
        path: Destination file; parent directories are created.

    Returns:
        The resolved script path.
    """
    target = expand_path(path)
    ensure_directory(target.parent)
    target.write_text(SCRIPT_HEADER + command + "\n", encoding="utf-8")
    target.chmod(0o700)
    logger.debug(f"Wrote command script to {target}")
    return target
