"""
Pydantic settings schema for dbca-wizard.

Settings control how the wizard looks and what happens with the generated
command. The ``defaults`` section pre-fills the answers the wizard starts with.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class UISettings(BaseModel):
    """Terminal UI settings."""

    model_config = ConfigDict(extra="forbid")

    theme: Literal["default", "mono"] = "default"
    show_progress: bool = True
    show_help: bool = True


class OutputSettings(BaseModel):
    """What to do with the generated command."""

    model_config = ConfigDict(extra="forbid")

    # Print the command when the wizard completes, not only on explicit request
    print_on_complete: bool = True
    show_passwords: bool = False
    continuation: str = " \\\n  "


class LoggingSettings(BaseModel):
    """Log file settings."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: Path | None = None  # None: ~/.dbca-wizard/wizard.log


class Settings(BaseModel):
    """Root settings model."""

    model_config = ConfigDict(extra="forbid")

    ui: UISettings = Field(default_factory=UISettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # DBConfig field overrides, validated when the wizard is built
    defaults: dict[str, Any] = Field(default_factory=dict)
