# repomanager/core/jsonfile.py
from __future__ import annotations
import os
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import json5

from repomanager.core.errors import InvalidFileError

logger = logging.getLogger(__name__)

__all__ = ["readJsonFile", "writeJsonFile"]



def readJsonFile(path: str | Path) -> dict[str, Any]:
    """
    Reads a JSON/JSON5 document that must contain an object at the top level.

    Raises:
        FileNotFoundError: if `path` does not exist
        InvalidFileError: if `path` is not a file, cannot be parsed or is not an object
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"The file '{path}' does not exist")

    if not path.is_file():
        raise InvalidFileError(path, "exists but is not a file")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise InvalidFileError(path, f"cannot be read: {err}") from err

    try:
        parsed = json5.loads(text)
    except ValueError as err:
        raise InvalidFileError(path, f"parse failed: {err}") from err

    # Empty documents are treated as empty objects
    if parsed is None:
        return {}

    if not isinstance(parsed, Mapping):
        raise InvalidFileError(path, f"content must be a JSON object, not '{type(parsed).__name__}'")

    return dict(parsed)



def writeJsonFile(path: str | Path, data: Mapping[str, Any]) -> None:
    """Serializes `data` as JSON5 and replaces `path` atomically."""
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise OSError(f"Cannot create parent directory '{path.parent}': {err}") from err

    out = json5.dumps(dict(data), indent=2, quote_keys=True)

    tmpPath = path.with_suffix(path.suffix + ".tmp")
    with open(tmpPath, "w", encoding="utf-8") as fl:
        fl.write(out)
        if not out.endswith("\n"):
            fl.write("\n")

    os.replace(tmpPath, path)
    logger.debug("Saved %d keys to '%s'", len(data), path)
