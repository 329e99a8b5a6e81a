"""User defaults for non-interactive runs.

Defaults live in ``config.yaml`` inside the esyt home directory::

    defaults:
      framework: NextJS
      language: TypeScript
      git_init: false

Only the ``defaults`` section is read. Keys that are not listed in
``DEFAULT_KEYS`` are rejected so typos do not go unnoticed.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

from esyt_cli.core.constants import (
    CONFIG_FILENAME,
    DEFAULT_PROJECT_NAME,
    ESYT_HOME_ENV,
    IDE,
    Framework,
    Language,
)
from esyt_cli.flags import validate_flags

logger = logging.getLogger(__name__)

NON_INTERACTIVE_DEFAULTS: dict[str, Any] = {
    "framework": Framework.VITE,
    "language": Language.JAVASCRIPT,
    "project_name": DEFAULT_PROJECT_NAME,
    "git_init": True,
    "install_deps": True,
    "selected_ide": IDE.NONE,
    "run_dev_server": True,
}

DEFAULT_KEYS = frozenset(NON_INTERACTIVE_DEFAULTS)
_BOOLEAN_KEYS = frozenset({"git_init", "install_deps", "run_dev_server"})
_ENUM_KEYS = {"framework": Framework, "language": Language, "selected_ide": IDE}


class ConfigError(RuntimeError):
    """Raised when the user defaults file cannot be parsed or validated."""


def _is_windows() -> bool:
    return os.name == "nt"


def get_esyt_home() -> Path:
    """Return the user-global esyt directory.

    Resolution order:
    1. ESYT_HOME environment variable (all platforms)
    2. ~/.esyt/ on macOS/Linux
    3. %LOCALAPPDATA%\\esyt\\ on Windows (via platformdirs)
    """
    if env_home := os.environ.get(ESYT_HOME_ENV):
        return Path(env_home)

    if _is_windows():
        from platformdirs import user_data_dir

        return Path(user_data_dir("esyt"))

    return Path.home() / ".esyt"


def _coerce(key: str, value: Any) -> Any:
    if key in _BOOLEAN_KEYS:
        if not isinstance(value, bool):
            raise ConfigError(f"defaults.{key} must be true or false, got {value!r}")
        return value
    enum_type = _ENUM_KEYS.get(key)
    if enum_type is None:
        return value
    try:
        return enum_type(value)
    except ValueError:
        # Left as-is so validate_flags reports it.
        return value


def load_defaults(home: Path | None = None) -> dict[str, Any]:
    """Load non-interactive defaults, overlaying the user file on the built-ins."""
    config_file = (home or get_esyt_home()) / CONFIG_FILENAME
    defaults = dict(NON_INTERACTIVE_DEFAULTS)

    if not config_file.exists():
        logger.debug("No user defaults at %s", config_file)
        return defaults

    yaml = YAML(typ="safe")
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.load(f) or {}
    except Exception as exc:
        logger.error("Failed to load defaults: %s", exc)
        raise ConfigError(f"Invalid YAML in {config_file}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    section = data.get("defaults") or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid defaults section in {config_file}: expected a mapping")

    unknown = sorted(str(key) for key in section if key not in DEFAULT_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in {config_file}: {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(DEFAULT_KEYS))}"
        )

    for key, value in section.items():
        defaults[key] = _coerce(key, value)

    invalid = validate_flags(defaults)
    if invalid:
        details = ", ".join(f"{key} ({reason})" for key, reason in sorted(invalid.items()))
        raise ConfigError(f"Invalid default value(s) in {config_file}: {details}")

    logger.info("Loaded user defaults from %s", config_file)
    return defaults


__all__ = [
    "ConfigError",
    "DEFAULT_KEYS",
    "NON_INTERACTIVE_DEFAULTS",
    "get_esyt_home",
    "load_defaults",
]
