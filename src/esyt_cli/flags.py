"""Order-independent command-line flag interpreter.

``parse_flags`` scans the tokens left to right and hands each one to the first
matching rule in ``FLAG_RULES``. Nothing in this module raises for malformed
input: a value that cannot be used is simply left absent so the caller can ask
for it interactively.

``validate_flags`` re-checks a record that may have been populated from some
other source (user defaults, a driver filling gaps) and reports every field
that has to be collected again.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field, fields
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from esyt_cli.core.constants import IDE, Framework, Language

_WHITESPACE = re.compile(r"\s")
_NEGATION_PREFIX = re.compile(r"^--?no-")

# Keys accepted after ``--no-`` / ``-no-`` and the field value they force.
NEGATIONS: Mapping[str, tuple[str, Any]] = MappingProxyType(
    {
        "git": ("git_init", False),
        "install": ("install_deps", False),
        "i": ("install_deps", False),
        "dev": ("run_dev_server", False),
        "editor": ("selected_ide", IDE.NONE),
        "ide": ("selected_ide", IDE.NONE),
    }
)

# camelCase names used by records built outside Python (JSON, JS drivers).
FIELD_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "projectName": "project_name",
        "npmPackages": "npm_packages",
        "gitInit": "git_init",
        "installDeps": "install_deps",
        "selectedIDE": "selected_ide",
        "runDevServer": "run_dev_server",
        "dryRun": "dry_run",
    }
)


@dataclass
class FlagConfig:
    """Configuration record produced by :func:`parse_flags`.

    ``None`` means "unspecified, ask interactively" and is distinct from
    ``False``. ``packages`` keeps the raw tokens while ``npm_packages`` holds
    the same entries with their dash prefix removed, position for position.
    """

    framework: Framework | None = None
    language: Language | None = None
    project_name: str | None = None
    packages: list[str] = field(default_factory=list)
    npm_packages: list[str] = field(default_factory=list)
    git_init: bool | None = None
    install_deps: bool | None = None
    selected_ide: IDE | None = None
    run_dev_server: bool | None = None
    help: bool = False
    version: bool = False
    yes: bool | None = None
    dry_run: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FlagConfig":
        """Build a record from a plain mapping.

        Both the attribute names and their camelCase aliases are accepted.
        Unknown keys are ignored and values are stored as given, so a bad value
        is still visible to :func:`validate_flags`.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = FIELD_ALIASES.get(key, key)
            if name not in known:
                continue
            if name in ("packages", "npm_packages"):
                if value is None:
                    value = []
                elif isinstance(value, (list, tuple)):
                    value = list(value)
            elif name in ("help", "version"):
                value = bool(value)
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FlagRule:
    """One entry of the dispatch table: a token predicate and its effect."""

    name: str
    matches: Callable[[str], bool]
    apply: Callable[[FlagConfig, str], None]


def strip_dashes(token: str) -> str:
    """Remove one leading ``--`` (or, failing that, one ``-``) from *token*."""
    if token.startswith("--"):
        return token[2:]
    if token.startswith("-"):
        return token[1:]
    return token


def _exact(*tokens: str) -> Callable[[str], bool]:
    accepted = frozenset(tokens)
    return lambda token: token in accepted


def _assign(attribute: str, value: Any) -> Callable[[FlagConfig, str], None]:
    def apply(config: FlagConfig, _token: str) -> None:
        setattr(config, attribute, value)

    return apply


def _ignore(_config: FlagConfig, _token: str) -> None:
    return None


def _is_negation(token: str) -> bool:
    return _NEGATION_PREFIX.match(token) is not None


def _apply_negation(config: FlagConfig, token: str) -> None:
    key = _NEGATION_PREFIX.sub("", token, count=1)
    target = NEGATIONS.get(key)
    if target is None:
        return
    attribute, value = target
    setattr(config, attribute, value)


def _is_package_token(token: str) -> bool:
    return token.startswith("--") or (token.startswith("-") and len(token) > 2)


def _add_package(config: FlagConfig, token: str) -> None:
    config.packages.append(token)
    config.npm_packages.append(strip_dashes(token))


def _apply_fallback(config: FlagConfig, token: str) -> None:
    if config.project_name is None:
        # Names with whitespace are dropped so the driver re-prompts.
        if not _WHITESPACE.search(token):
            config.project_name = token
        return
    _add_package(config, token)


def _language_tokens(*names: str) -> tuple[str, ...]:
    return tuple(f"{prefix}{name}" for name in names for prefix in ("-", "--", ""))


FLAG_RULES: tuple[FlagRule, ...] = (
    # Must precede the generic negation rule: it is not "--no-" + "interactive".
    FlagRule("non-interactive", _exact("--no-interactive"), _assign("yes", True)),
    FlagRule("negation", _is_negation, _apply_negation),
    FlagRule("help", _exact("-h", "--help", "help"), _assign("help", True)),
    FlagRule("version", _exact("-v", "--version", "version"), _assign("version", True)),
    FlagRule("yes", _exact("--yes", "-y"), _assign("yes", True)),
    FlagRule("dry-run", _exact("--dry-run", "-d"), _assign("dry_run", True)),
    FlagRule("vite", _exact("-vite", "--vite", "vite"), _assign("framework", Framework.VITE)),
    FlagRule("next", _exact("-next", "--next", "next"), _assign("framework", Framework.NEXTJS)),
    FlagRule(
        "javascript",
        _exact(*_language_tokens("js", "javascript")),
        _assign("language", Language.JAVASCRIPT),
    ),
    FlagRule(
        "typescript",
        _exact(*_language_tokens("ts", "typescript")),
        _assign("language", Language.TYPESCRIPT),
    ),
    FlagRule("git", _exact("-git"), _assign("git_init", True)),
    FlagRule("placeholder", _exact("-"), _ignore),
    FlagRule("install", _exact("-i", "-install", "--install"), _assign("install_deps", True)),
    FlagRule("zed", _exact("-zed"), _assign("selected_ide", IDE.ZED)),
    FlagRule("vscode", _exact("-code"), _assign("selected_ide", IDE.VSCODE)),
    FlagRule("cursor", _exact("-cursor"), _assign("selected_ide", IDE.CURSOR)),
    FlagRule("trae", _exact("-trae"), _assign("selected_ide", IDE.TRAE)),
    FlagRule("dev", _exact("-dev"), _assign("run_dev_server", True)),
    FlagRule("package", _is_package_token, _add_package),
    FlagRule("fallback", lambda _token: True, _apply_fallback),
)


def match_rule(token: str) -> FlagRule:
    """Return the rule that would consume *token*."""
    return next(rule for rule in FLAG_RULES if rule.matches(token))


def parse_flags(argv: Iterable[str] | None) -> FlagConfig:
    """Interpret command-line tokens (program name already removed)."""
    config = FlagConfig()
    for token in argv or ():
        if not token:
            continue
        match_rule(token).apply(config, token)
    return config


def _one_of(value: Any, allowed: type[StrEnum]) -> bool:
    return isinstance(value, str) and value in {member.value for member in allowed}


def validate_flags(flags: FlagConfig | Mapping[str, Any]) -> dict[str, str]:
    """Return ``{field: reason}`` for every present field holding a bad value.

    Absent fields are never reported. Keys are the attribute names for a
    :class:`FlagConfig` and the caller's own keys (aliases included) for a
    mapping, so the caller can clear exactly what was reported.
    The input is not modified.
    """
    if isinstance(flags, FlagConfig):
        config = flags
        caller_keys: dict[str, str] = {}
    else:
        config = FlagConfig.from_mapping(flags)
        caller_keys = {FIELD_ALIASES.get(key, key): key for key in flags}
    invalid: dict[str, str] = {}

    if config.framework is not None and not _one_of(config.framework, Framework):
        invalid["framework"] = "unsupported"

    if config.language is not None and not _one_of(config.language, Language):
        invalid["language"] = "unsupported"

    name = config.project_name
    if name is not None:
        if not isinstance(name, str) or not name or _WHITESPACE.search(name):
            invalid["project_name"] = "invalid"

    if config.selected_ide is not None and not _one_of(config.selected_ide, IDE):
        invalid["selected_ide"] = "invalid"

    return {caller_keys.get(field_name, field_name): reason for field_name, reason in invalid.items()}


__all__ = [
    "FIELD_ALIASES",
    "FLAG_RULES",
    "NEGATIONS",
    "FlagConfig",
    "FlagRule",
    "Framework",
    "IDE",
    "Language",
    "match_rule",
    "parse_flags",
    "strip_dashes",
    "validate_flags",
]
