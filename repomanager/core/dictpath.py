# repomanager/core/dictpath.py
from __future__ import annotations
from collections.abc import Mapping
from typing import Any

__all__ = ["getByPath"]



# ----------------------------------------------
#                  path parsing
# ----------------------------------------------

def _splitPath(path: str) -> list[str]:
    """
    Splits a dotted path into segments. A backslash escapes the next
    character, so a literal dot in a key is written "\\.".

    Examples:
      - files.package -> ["files", "package"]
      - a\\.b.c       -> ["a.b", "c"]

    Raises ValueError for empty paths, empty segments and a trailing backslash.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("Path must be a non-empty string")

    parts: list[str] = []
    current: list[str] = []
    escaped = False
    for ch in path:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == ".":
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    if escaped:
        raise ValueError(f"Path '{path}' ends with a dangling escape")
    parts.append("".join(current))

    # "a..b", ".a" and "a." leave an empty segment behind
    if any(part == "" for part in parts):
        raise ValueError(f"Path '{path}' contains empty segment(s)")
    return parts



# ----------------------------------------------
#                   Public API
# ----------------------------------------------

def getByPath(data: Any, path: str, default: Any = None) -> Any:
    """Returns the value at dotted `path` inside nested mappings, or `default` when unreachable."""
    try:
        parts = _splitPath(path)
    except ValueError:
        # Invalid path is treated as "not found"
        return default

    current = data
    for part in parts:
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current
