"""
dbca-wizard - Terminal wizard for Oracle DBCA silent-mode commands

Walks through the Database Configuration Assistant options step by step and
renders the collected answers into a ready-to-run ``dbca -silent`` command.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dbca-wizard")
except PackageNotFoundError:
    __version__ = "0.3.0"

__all__ = [
    "__version__",
]
