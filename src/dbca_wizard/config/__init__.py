"""Settings management for dbca-wizard."""

from dbca_wizard.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    build_initial_config,
    load_answers,
    load_settings,
    load_yaml_file,
    save_yaml_file,
)
from dbca_wizard.config.merger import deep_merge, get_nested_value, set_nested_value
from dbca_wizard.config.schema import LoggingSettings, OutputSettings, Settings, UISettings
from dbca_wizard.config.theme import DEFAULT_THEME, Theme

__all__ = [
    "ConfigurationError",
    "DEFAULT_THEME",
    "LoggingSettings",
    "OutputSettings",
    "Settings",
    "Theme",
    "UISettings",
    "apply_env_overrides",
    "build_initial_config",
    "deep_merge",
    "get_nested_value",
    "load_answers",
    "load_settings",
    "load_yaml_file",
    "save_yaml_file",
    "set_nested_value",
]
