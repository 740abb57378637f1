# tests/repomanager/core/test_dictpath.py
from __future__ import annotations

import pytest

from repomanager.core.dictpath import getByPath

DATA = {
    "files": {"package": "repo.json5", "empty": None},
    "a.b": {"c": 1},
    "list": [1, 2],
}



def test_getByPath_nestedKeys() -> None:
    assert getByPath(DATA, "files.package") == "repo.json5"
    assert getByPath(DATA, "files") == {"package": "repo.json5", "empty": None}


def test_getByPath_escapedDot() -> None:
    assert getByPath(DATA, "a\\.b.c") == 1
    assert getByPath(DATA, "a.b.c") is None


def test_getByPath_missingReturnsDefault() -> None:
    assert getByPath(DATA, "files.missing") is None
    assert getByPath(DATA, "files.missing", "fallback") == "fallback"
    # Lists are not walked into
    assert getByPath(DATA, "list.0", "fallback") == "fallback"
    assert getByPath(DATA, "files.package.deeper", "fallback") == "fallback"


def test_getByPath_storedNoneIsReturned() -> None:
    assert getByPath(DATA, "files.empty", "fallback") is None


@pytest.mark.parametrize("path", ["", ".files", "files.", "files..package", "files\\"])
def test_getByPath_invalidPathReturnsDefault(path: str) -> None:
    assert getByPath(DATA, path, "fallback") == "fallback"
