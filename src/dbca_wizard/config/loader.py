"""
Settings loader for dbca-wizard.

Loads and merges settings from multiple sources:
1. Default values
2. Global settings (~/.dbca-wizard/config.yaml)
3. An explicit settings file (``--config``)
4. Environment variables (DBCA_WIZARD_*)
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dbca_wizard.config.merger import deep_merge, set_nested_value
from dbca_wizard.config.schema import Settings
from dbca_wizard.storage.paths import get_global_config_path
from dbca_wizard.wizard.models import DBConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "DBCA_WIZARD_"

# Top-level sections an environment variable may target
_ENV_SECTIONS = ("ui", "output", "logging", "defaults")


class ConfigurationError(Exception):
    """Raised when settings loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML settings file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed dictionary; empty if the file does not exist or is empty.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return content


def save_yaml_file(path: Path, data: dict[str, Any]) -> None:
    """
    Save a dictionary to a YAML file.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except OSError as e:
        raise ConfigurationError(f"Cannot write {path}: {e}") from e


def apply_env_overrides(config: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Apply environment variable overrides.

    Variables follow the pattern ``DBCA_WIZARD_<SECTION>_<KEY>=<value>``.
    The section is the first word after the prefix; the rest is the key, so
    ``DBCA_WIZARD_OUTPUT_SHOW_PASSWORDS=true`` sets ``output.show_passwords``
    and ``DBCA_WIZARD_DEFAULTS_LISTENER_PORT=1522`` sets
    ``defaults.listener_port``. Values under ``defaults`` stay strings;
    ``DBConfig`` validation converts them to each field's type.

    Args:
        config: Settings dictionary to modify.
        environ: Environment to read; defaults to ``os.environ``.

    Returns:
        Settings with overrides applied.
    """
    environ = os.environ if environ is None else environ

    for name, value in environ.items():
        if not name.startswith(ENV_PREFIX) or name == "DBCA_WIZARD_HOME":
            continue

        section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if section not in _ENV_SECTIONS or not key:
            logger.debug(f"Ignoring environment variable {name}")
            continue

        parsed = value if section == "defaults" else _parse_env_value(value)
        config = set_nested_value(config, f"{section}.{key}", parsed)

    return config


def _parse_env_value(value: str) -> Any:
    """Parse an environment variable value to bool, int or string."""
    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False
    if re.match(r"^-?\d+$", value):
        return int(value)
    return value


def load_settings(
    config_file: Path | None = None,
    skip_global: bool = False,
    skip_env: bool = False,
) -> Settings:
    """
    Load and merge settings from all sources.

    Args:
        config_file: Extra settings file applied over the global one.
        skip_global: Do not read ~/.dbca-wizard/config.yaml.
        skip_env: Skip environment variable overrides.

    Returns:
        Validated Settings.

    Raises:
        ConfigurationError: If a file is unreadable or the result is invalid.
    """
    data = Settings().model_dump()

    if not skip_global:
        global_path = get_global_config_path()
        if global_path.exists():
            logger.debug(f"Loading settings from {global_path}")
            data = deep_merge(data, load_yaml_file(global_path))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Settings file not found: {config_file}")
        logger.debug(f"Loading settings from {config_file}")
        data = deep_merge(data, load_yaml_file(config_file))

    if not skip_env:
        data = apply_env_overrides(data)

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Settings validation failed: {e}") from e


def _text_fields_as_str(data: dict[str, Any]) -> dict[str, Any]:
    """Turn YAML numbers given for text fields (``sid: 1234``) back into strings."""
    result = dict(data)
    for name, value in data.items():
        field = DBConfig.model_fields.get(name)
        if field is None or field.annotation is not str or isinstance(value, bool):
            continue
        if isinstance(value, (int, float)):
            result[name] = str(value)
    return result


def build_initial_config(settings: Settings) -> DBConfig:
    """
    Build the configuration the wizard starts from.

    Args:
        settings: Loaded settings; ``settings.defaults`` overrides DBConfig
            field defaults.

    Raises:
        ConfigurationError: If ``defaults`` names unknown fields or bad values.
    """
    try:
        return DBConfig.model_validate(_text_fields_as_str(settings.defaults))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid wizard defaults: {e}") from e


def load_answers(path: Path) -> DBConfig:
    """
    Load a complete set of answers from YAML, for non-interactive rendering.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    if not path.exists():
        raise ConfigurationError(f"Answers file not found: {path}")

    try:
        return DBConfig.model_validate(_text_fields_as_str(load_yaml_file(path)))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid answers in {path}: {e}") from e
