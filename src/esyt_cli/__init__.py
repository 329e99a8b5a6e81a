"""
esyt CLI - scaffold Vite and Next.js web projects.

Usage:
    esyt my-app -vite -ts --tailwindcss -git -i
    esyt my-app --next --yes --no-git
    esyt --help
"""

import logging
import os
from importlib.metadata import PackageNotFoundError, version

import typer
from rich.align import Align
from rich.console import Console
from rich.text import Text

from esyt_cli.cli.commands.create import register_create_command
from esyt_cli.core.constants import LOG_LEVEL_ENV

try:
    __version__ = version("esyt")
except PackageNotFoundError:
    __version__ = "0.0.0"

BANNER = r"""
 ______     ______     __  __     ______
/\  ___\   /\  ___\   /\ \_\ \   /\__  _\
\ \  __\   \ \___  \  \ \____ \  \/_/\ \/
 \ \_____\  \/\_____\  \/\_____\    \ \_\
  \/_____/   \/_____/   \/_____/     \/_/
"""

TAGLINE = "esyt - Vite and Next.js project scaffolding"

console = Console()

app = typer.Typer(
    name="esyt",
    help="Scaffold Vite and Next.js web projects",
    add_completion=False,
)


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip("\n").split("\n")
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        color = colors[i % len(colors)]
        styled_banner.append(line + "\n", style=color)

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


register_create_command(app, console=console, show_banner=show_banner)


def main():
    logging.basicConfig(level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    app()


if __name__ == "__main__":
    main()
