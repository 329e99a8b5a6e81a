"""Core constants shared across the esyt CLI."""

from .constants import (
    DEFAULT_PROJECT_NAME,
    IDE,
    Framework,
    Language,
)

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "IDE",
    "Framework",
    "Language",
]
