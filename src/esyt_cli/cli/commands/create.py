"""The ``esyt`` project command.

Typer does not parse the tokens itself: they are forwarded untouched to the
flag interpreter so that single-dash long forms (``-vite``, ``-tailwindcss``)
and bare keywords (``next``, ``help``) keep working in any order.
"""

from __future__ import annotations

from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from esyt_cli.cli.help_text import USAGE
from esyt_cli.core.config import ConfigError, load_defaults
from esyt_cli.flags import FlagConfig, parse_flags
from esyt_cli.packages import package_choices, resolve_package_selection
from esyt_cli.resolve import Resolution, resolve_config

FIELD_LABELS = {
    "framework": "Framework",
    "language": "Language",
    "project_name": "Project name",
    "packages": "Packages",
    "git_init": "Git init",
    "install_deps": "Install dependencies",
    "selected_ide": "Editor",
    "run_dev_server": "Dev server",
}


def _format_value(value: object) -> str:
    if value is None:
        return "[dim]ask[/dim]"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return escape(str(getattr(value, "label", value)))


def build_plan_table(config: FlagConfig) -> Table:
    """Summarize the resolved configuration as a Rich table."""
    table = Table(title="Project Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for name in ("framework", "language", "project_name"):
        table.add_row(FIELD_LABELS[name], _format_value(getattr(config, name)))

    if config.npm_packages:
        table.add_row(FIELD_LABELS["packages"], escape(", ".join(resolve_package_selection(config.npm_packages))))
    elif config.yes:
        table.add_row(FIELD_LABELS["packages"], "none")
    else:
        offered = package_choices(config.framework)
        hint = f" [dim](choices: {', '.join(offered)})[/dim]" if offered else ""
        table.add_row(FIELD_LABELS["packages"], f"{_format_value(None)}{hint}")

    for name in ("git_init", "install_deps", "selected_ide", "run_dev_server"):
        table.add_row(FIELD_LABELS[name], _format_value(getattr(config, name)))

    table.add_row("Mode", "non-interactive" if config.yes else "interactive")
    table.add_row("Dry run", _format_value(bool(config.dry_run)))
    return table


def render_resolution(resolution: Resolution, console: Console) -> None:
    console.print(build_plan_table(resolution.config))

    for name, reason in resolution.invalid.items():
        console.print(
            f"[yellow]Ignored {FIELD_LABELS.get(name, name)} ({reason}); it will be asked again.[/yellow]"
        )

    if resolution.ready:
        console.print("[bold green]Configuration complete.[/bold green]")
    else:
        pending = ", ".join(FIELD_LABELS[name] for name in resolution.pending)
        console.print(f"[bold]Still to be asked:[/bold] {pending}")


def register_create_command(
    app: typer.Typer,
    *,
    console: Console,
    show_banner: Callable[[], None],
) -> None:
    """Attach the project command to *app*."""

    @app.command(
        add_help_option=False,
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    )
    def create(ctx: typer.Context) -> None:
        """Scaffold a new Vite or Next.js project (run with --help for all tokens)."""
        config = parse_flags(ctx.args)

        if config.help:
            show_banner()
            console.print(USAGE, markup=False, highlight=False)
            raise typer.Exit(0)

        if config.version:
            from esyt_cli import __version__

            console.print(__version__, markup=False, highlight=False)
            raise typer.Exit(0)

        try:
            defaults = load_defaults()
        except ConfigError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(1)

        show_banner()
        render_resolution(resolve_config(config, defaults), console)


__all__ = ["build_plan_table", "register_create_command", "render_resolution"]
