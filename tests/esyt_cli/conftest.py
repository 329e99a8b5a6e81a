from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def esyt_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ESYT_HOME at an empty temp dir so user defaults never leak in."""
    home = tmp_path / "esyt-home"
    home.mkdir()
    monkeypatch.setenv("ESYT_HOME", str(home))
    return home
