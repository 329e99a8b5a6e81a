"""Turn raw tokens into the record the scaffolding steps consume.

The interpreter itself never fails; this layer applies the driver rules on top
of it: fields rejected by validation are cleared back to absent, ``--yes``
fills whatever is still absent from the defaults, and anything left absent is
reported as a pending prompt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from esyt_cli.core.config import NON_INTERACTIVE_DEFAULTS
from esyt_cli.flags import FlagConfig, parse_flags, validate_flags

logger = logging.getLogger(__name__)

# Order in which an interactive driver asks for missing values.
PROMPT_ORDER: tuple[str, ...] = (
    "framework",
    "language",
    "project_name",
    "packages",
    "git_init",
    "install_deps",
    "selected_ide",
    "run_dev_server",
)


@dataclass
class Resolution:
    """Outcome of :func:`resolve_flags`."""

    config: FlagConfig
    invalid: dict[str, str] = field(default_factory=dict)
    pending: list[str] = field(default_factory=list)

    @property
    def ready(self) -> bool:
        return not self.pending


def clear_invalid(config: FlagConfig, invalid: Mapping[str, str]) -> None:
    """Reset every field named in *invalid* to absent."""
    for name, reason in invalid.items():
        logger.warning("Ignoring %s=%r (%s)", name, getattr(config, name, None), reason)
        setattr(config, name, None)


def apply_non_interactive_defaults(
    config: FlagConfig, defaults: Mapping[str, Any] | None = None
) -> None:
    """Fill absent fields from *defaults* when ``--yes`` was given.

    Explicit values, including ``False`` set by a negation, are kept.
    """
    if not config.yes:
        return
    for name, value in (defaults or NON_INTERACTIVE_DEFAULTS).items():
        if getattr(config, name) is None:
            logger.debug("Defaulting %s to %r", name, value)
            setattr(config, name, value)


def pending_prompts(config: FlagConfig) -> list[str]:
    """Return the fields an interactive driver still has to ask for."""
    pending = []
    for name in PROMPT_ORDER:
        if name == "packages":
            if not config.npm_packages and not config.yes:
                pending.append(name)
        elif name == "run_dev_server":
            # The dev server question is only asked when dependencies get installed.
            if config.run_dev_server is None and config.install_deps is not False:
                pending.append(name)
        elif getattr(config, name) is None:
            pending.append(name)
    return pending


def resolve_config(
    config: FlagConfig, defaults: Mapping[str, Any] | None = None
) -> Resolution:
    """Drop invalid values from *config* and apply non-interactive defaults."""
    invalid = validate_flags(config)
    clear_invalid(config, invalid)
    apply_non_interactive_defaults(config, defaults)
    return Resolution(config=config, invalid=invalid, pending=pending_prompts(config))


def resolve_flags(
    argv: Iterable[str] | None, defaults: Mapping[str, Any] | None = None
) -> Resolution:
    return resolve_config(parse_flags(argv), defaults)


__all__ = [
    "PROMPT_ORDER",
    "Resolution",
    "apply_non_interactive_defaults",
    "clear_invalid",
    "pending_prompts",
    "resolve_config",
    "resolve_flags",
]
