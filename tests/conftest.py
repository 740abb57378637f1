# tests/conftest.py
from __future__ import annotations
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from repomanager.app.settings import HOME_ENV_VAR, loadSettings



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



@pytest.fixture(autouse=True)
def isolatedHome(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Points the home directory at a temp dir so no test reads the real user settings."""
    home = tmp_path / "home"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    loadSettings.cache_clear()
    yield home
    loadSettings.cache_clear()
