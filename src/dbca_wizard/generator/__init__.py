"""DBCA command generation."""

from dbca_wizard.generator.command import (
    PASSWORD_MASK,
    generate_command,
    generate_summary,
)

__all__ = [
    "PASSWORD_MASK",
    "generate_command",
    "generate_summary",
]
