"""Resolve the formatter settings from every place they can be given.

Each source overrides the ones listed before it:

* built-in defaults
* the user file ``~/.mdfmt/config.yaml``
* the nearest ``mdfmt.yaml`` in the working directory or one of its parents
* ``MDFMT_*`` environment variables
* options passed on the command line
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from mdfmt.config.defaults import get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".mdfmt" / "config.yaml"
_PROJECT_CONFIG_NAME = "mdfmt.yaml"

# Environment variable -> setting name
_ENV_MAP: dict[str, str] = {
    "MDFMT_WIDTH": "width",
    "MDFMT_STRICT": "strict",
    "MDFMT_CODE_FENCES": "code_fences",
    "MDFMT_ALIGN_CONTENT": "align_content",
    "MDFMT_ENCODING": "encoding",
    "MDFMT_LOG_LEVEL": "log_level",
}

# Settings read from the environment as booleans
_BOOL_KEYS = frozenset({"strict", "code_fences", "align_content"})

# Spellings of "on"; anything else means off
_TRUTHY = {"1", "true", "yes", "on"}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Return the settings dict after applying every source in order.

    Keyword arguments left as None (an option the user did not pass) do not
    override anything.
    """
    settings = get_defaults()

    user_settings = _load_yaml_config(_GLOBAL_CONFIG_PATH)
    if user_settings:
        settings.update(user_settings)

    project_file = _find_project_config()
    if project_file:
        project_settings = _load_yaml_config(project_file)
        if project_settings:
            logger.debug("Using project config %s", project_file)
            settings.update(project_settings)

    settings.update(_load_env_vars())

    settings.update({key: value for key, value in runtime_overrides.items() if value is not None})
    return settings


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Read a settings file; None when it is missing, unreadable or not a mapping."""
    if not path.is_file():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Skipping unreadable config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Skipping config %s: top level must be a mapping", path)
        return None
    return data


def _find_project_config() -> Path | None:
    """Closest mdfmt.yaml, looking in the working directory first."""
    here = Path.cwd()
    for directory in (here, *here.parents):
        candidate = directory / _PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Settings given through MDFMT_* variables that are set."""
    return {
        key: _coerce_env_value(key, os.environ[name])
        for name, key in _ENV_MAP.items()
        if name in os.environ
    }


def _coerce_env_value(key: str, value: str) -> Any:
    """Turn switch settings into bools; everything else stays a string."""
    if key in _BOOL_KEYS:
        return value.strip().lower() in _TRUTHY
    return value
