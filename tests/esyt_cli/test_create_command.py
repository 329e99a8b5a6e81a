"""CLI tests for the esyt command."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console
from typer import Typer
from typer.testing import CliRunner

from esyt_cli import app as cli_app
from esyt_cli.cli.commands.create import build_plan_table, register_create_command
from esyt_cli.flags import parse_flags


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture()
def isolated_app() -> tuple[Typer, Console, list[str]]:
    console = Console(file=io.StringIO(), force_terminal=False, width=200)
    outputs: list[str] = []
    app = Typer(add_completion=False)

    def fake_show_banner():  # noqa: D401
        outputs.append("banner")

    register_create_command(app, console=console, show_banner=fake_show_banner)
    return app, console, outputs


def _invoke(app: Typer, args: list[str], expected_exit: int = 0):
    result = CliRunner().invoke(app, args, catch_exceptions=False)
    if result.exit_code != expected_exit:
        raise AssertionError(result.output)
    return result


def test_help_prints_usage(isolated_app):
    app, console, outputs = isolated_app

    _invoke(app, ["--help"])

    text = console.file.getvalue()
    assert "Usage: esyt" in text
    assert "--no-interactive" in text
    assert outputs == ["banner"]


def test_bare_help_keyword_after_other_tokens(isolated_app):
    app, console, _ = isolated_app

    _invoke(app, ["my-app", "-vite", "help"])

    assert "Negations" in console.file.getvalue()


def test_version_prints_package_version(isolated_app, monkeypatch: pytest.MonkeyPatch):
    import esyt_cli

    monkeypatch.setattr(esyt_cli, "__version__", "9.9.9")
    app, console, outputs = isolated_app

    _invoke(app, ["-v"])

    assert console.file.getvalue().strip() == "9.9.9"
    assert outputs == []


def test_single_dash_long_tokens_reach_the_interpreter(isolated_app):
    app, console, _ = isolated_app

    _invoke(app, ["-vite", "-ts", "my-app", "-tailwindcss", "--axios", "-git", "-i", "-code", "-dev"])

    text = console.file.getvalue()
    assert "Vite" in text
    assert "TypeScript" in text
    assert "my-app" in text
    assert "TailwindCSS, Axios" in text
    assert "VSCode" in text
    assert "Configuration complete." in text


def test_yes_fills_defaults(isolated_app):
    app, console, _ = isolated_app

    _invoke(app, ["--yes", "--no-git"])

    text = console.file.getvalue()
    assert "esyt-app" in text
    assert "non-interactive" in text
    assert "Configuration complete." in text


def test_missing_values_are_listed(isolated_app):
    app, console, _ = isolated_app

    _invoke(app, ["demo", "--next"])

    text = console.file.getvalue()
    assert "Still to be asked:" in text
    assert "Language" in text
    assert "next-pwa" in text


def test_user_defaults_are_applied(isolated_app, esyt_home: Path):
    (esyt_home / "config.yaml").write_text("defaults:\n  framework: NextJS\n", encoding="utf-8")
    app, console, _ = isolated_app

    _invoke(app, ["-y"])

    assert "Next.js" in console.file.getvalue()


def test_broken_defaults_exit_with_error(isolated_app, esyt_home: Path):
    (esyt_home / "config.yaml").write_text("defaults:\n  colour: blue\n", encoding="utf-8")
    app, console, _ = isolated_app

    _invoke(app, ["-y"], expected_exit=1)

    assert "Error:" in console.file.getvalue()


def test_help_ignores_broken_defaults(isolated_app, esyt_home: Path):
    (esyt_home / "config.yaml").write_text("defaults: [\n", encoding="utf-8")
    app, _, _ = isolated_app

    _invoke(app, ["-h"])


def test_module_app_runs(runner):
    result = runner.invoke(cli_app, ["my-app", "-vite", "-js", "--yes"])

    assert result.exit_code == 0
    assert "my-app" in result.stdout


def test_plan_table_lists_ask_for_absent_values():
    table = build_plan_table(parse_flags([]))
    console = Console(file=io.StringIO(), width=200)
    console.print(table)

    text = console.file.getvalue()
    assert "Project Configuration" in text
    assert "ask" in text
    assert "interactive" in text
