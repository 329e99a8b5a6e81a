"""Shared choice enums and defaults for the esyt CLI."""

from __future__ import annotations

from enum import StrEnum


class Framework(StrEnum):
    """Frameworks a project can be scaffolded with."""

    VITE = "Vite"
    NEXTJS = "NextJS"

    @property
    def label(self) -> str:
        return "Next.js" if self is Framework.NEXTJS else self.value


class Language(StrEnum):
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"


class IDE(StrEnum):
    """Editors the project can be opened with after setup."""

    ZED = "Zed"
    VSCODE = "VSCode"
    CURSOR = "Cursor"
    TRAE = "Trae"
    NONE = "None"


DEFAULT_PROJECT_NAME = "esyt-app"

ESYT_HOME_ENV = "ESYT_HOME"
LOG_LEVEL_ENV = "ESYT_LOG_LEVEL"
CONFIG_FILENAME = "config.yaml"

__all__ = [
    "Framework",
    "Language",
    "IDE",
    "DEFAULT_PROJECT_NAME",
    "ESYT_HOME_ENV",
    "LOG_LEVEL_ENV",
    "CONFIG_FILENAME",
]
