from __future__ import annotations

import pytest
from typer.testing import CliRunner

from custom_commands.logging import set_verbose
from custom_commands.paths import config_path


@pytest.fixture(autouse=True)
def isolate_home(tmp_path, monkeypatch):
    """Point the home directory (and so the command file) at a temp folder."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    set_verbose(False)
    yield home
    set_verbose(False)


@pytest.fixture
def command_file(isolate_home):
    return config_path(isolate_home)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
