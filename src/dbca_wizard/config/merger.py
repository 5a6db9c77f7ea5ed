"""
Settings merger for dbca-wizard.

Later sources override earlier ones key by key; nested sections merge.
"""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Merge rules:
    - Scalars and lists: override replaces base
    - Dicts: recursive deep merge
    - null/None value: remove key from result

    Args:
        base: Base settings dictionary.
        override: Override settings dictionary.

    Returns:
        Merged dictionary. Neither input is modified.

    Examples:
        >>> deep_merge({"ui": {"theme": "default", "show_help": True}}, {"ui": {"theme": "mono"}})
        {'ui': {'theme': 'mono', 'show_help': True}}
    """
    result = base.copy()

    for key, value in override.items():
        if value is None:
            result.pop(key, None)
        elif isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def get_nested_value(config: dict[str, Any], key_path: str) -> Any:
    """
    Get a value by dot-separated path (e.g. ``"output.show_passwords"``).

    Returns:
        The value, or None if any part of the path is missing.
    """
    current: Any = config
    for key in key_path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def set_nested_value(config: dict[str, Any], key_path: str, value: Any) -> dict[str, Any]:
    """
    Set a value by dot-separated path, creating intermediate sections.

    Returns:
        The modified dictionary.
    """
    keys = key_path.split(".")
    current = config

    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
    return config
