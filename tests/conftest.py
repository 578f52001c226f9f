"""Pytest configuration for test isolation.

Commands resolve the config file from ``XDG_CONFIG_HOME`` and the default
data file from the home directory. Both are redirected to the test's own
temporary directory so tests never touch real user data.
"""

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point HOME and XDG_CONFIG_HOME at per-test directories."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", os.fspath(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", os.fspath(home / ".config"))


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    """Data file path inside the test's temporary directory."""
    return tmp_path / "data" / "transactions.json"
