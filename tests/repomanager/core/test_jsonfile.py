# tests/repomanager/core/test_jsonfile.py
from __future__ import annotations
from pathlib import Path

import pytest

from repomanager.core.errors import InvalidFileError
from repomanager.core.jsonfile import readJsonFile, writeJsonFile



def test_readJsonFile_acceptsJson5(tmp_path: Path) -> None:
    path = tmp_path / "doc.json5"
    path.write_text("{\n  // comment\n  key: 'value',\n  list: [1, 2,],\n}\n", encoding="utf-8")

    assert readJsonFile(path) == {"key": "value", "list": [1, 2]}


def test_readJsonFile_missing_raisesFileNotFound(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        readJsonFile(tmp_path / "missing.json5")


def test_readJsonFile_directory_raisesInvalidFile(tmp_path: Path) -> None:
    with pytest.raises(InvalidFileError):
        readJsonFile(tmp_path)


@pytest.mark.parametrize("content", ["{", "[1, 2]", "42"])
def test_readJsonFile_badContent_raisesInvalidFile(tmp_path: Path, content: str) -> None:
    path = tmp_path / "doc.json5"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(InvalidFileError) as excInfo:
        readJsonFile(path)

    assert excInfo.value.path == str(path)


def test_readJsonFile_notUtf8_raisesInvalidFile(tmp_path: Path) -> None:
    path = tmp_path / "doc.json5"
    path.write_bytes(b"\xff\xfe\x00{")

    with pytest.raises(InvalidFileError):
        readJsonFile(path)


def test_writeJsonFile_createsParentsAndReplaces(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "doc.json5"

    writeJsonFile(path, {"first": 1})
    writeJsonFile(path, {"second": [1, 2]})

    assert readJsonFile(path) == {"second": [1, 2]}
    assert [item.name for item in path.parent.iterdir()] == ["doc.json5"]
