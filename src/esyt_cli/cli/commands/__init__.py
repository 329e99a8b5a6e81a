"""CLI command modules for esyt."""

from .create import register_create_command

__all__ = ["register_create_command"]
