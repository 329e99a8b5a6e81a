"""CLI helpers exposed for other modules."""

from .help_text import USAGE

__all__ = ["USAGE"]
