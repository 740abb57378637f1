# repomanager/app/settings.py
from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

import json5
from pydantic import JsonValue

from repomanager.core.dictpath import getByPath

import logging
logger = logging.getLogger(__name__)

__all__ = [
    "HOME_ENV_VAR", "DEFAULT_HOME_DIR", "SETTINGS_FILE_NAME", "SETTINGS",
    "resolveHomeDir", "loadUserSettings", "loadSettings", "deepMerge",
    "settings", "settingsBool", "packageFileName", "configFileName",
]



HOME_ENV_VAR = "REPOMANAGER_HOME"
DEFAULT_HOME_DIR = "~/.repomanager"
SETTINGS_FILE_NAME = "settings.json5"

SETTINGS: JsonValue = {
    "__source": "BUILTIN_DEFAULTS",
    "debug": {"devModeEnabled": False},
    "logging": {"file": None, "maxBytes": 10 * 1024 * 1024, "backupCount": 5},
    "files": {
        "config": "config.json5",
        "package": "repo.json5",
    },
}



def resolveHomeDir(explicit: str | Path | None = None) -> Path:
    """
    Returns the home directory holding the user's config file and settings.

    Precedence: explicit argument → $REPOMANAGER_HOME → ~/.repomanager
    """
    if explicit is not None:
        return Path(explicit).expanduser()
    envValue = os.environ.get(HOME_ENV_VAR, "").strip()
    if envValue:
        return Path(envValue).expanduser()
    return Path(DEFAULT_HOME_DIR).expanduser()



def loadUserSettings() -> JsonValue:
    filePath = resolveHomeDir() / SETTINGS_FILE_NAME
    if filePath.exists():
        try:
            return json5.loads(filePath.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            logger.error("Failed to parse '%s': %s", filePath, err)
    return {}



@lru_cache(maxsize=1)
def loadSettings():
    return deepMerge(SETTINGS, loadUserSettings())



def deepMerge(first: JsonValue, second: JsonValue) -> JsonValue:
    """
    Returns a new JsonValue where keys from `second` override/extend `first`.
    Only merges recursively when BOTH sides are JSON objects (dicts).
    For all other JSON types (lists, strings, numbers, booleans, null),
    the right-hand value `second` replaces `first`.
    """
    if isinstance(first, dict) and isinstance(second, dict):
        out: dict[str, JsonValue] = {}
        for key, value in first.items():
            out[key] = cast(JsonValue, value)
        for key, value in second.items():
            if key in out:
                out[key] = deepMerge(out[key], cast(JsonValue, value))
            else:
                out[key] = cast(JsonValue, value)
        return cast(JsonValue, out)

    return cast(JsonValue, second)


# ---------- Ergonomic accessors over merged settings ----------

def settings(path: str, default: Any = None) -> Any:
    """Returns value at dotted `path` from merged settings, or `default` if missing."""
    val = getByPath(loadSettings(), path)
    return default if val is None else val



def settingsBool(path: str, default: bool = False) -> bool:
    """Returns bool value at `path` or `default` if missing."""
    val = getByPath(loadSettings(), path)
    if isinstance(val, bool):
        return val
    if val is None:
        return default
    return bool(val)

# --------------------------------------------------------------

def packageFileName() -> str:
    """Name of the package file inside a package directory (and the project root)."""
    return str(settings("files.package", "repo.json5"))



def configFileName() -> str:
    """Name of the user's config file inside the home directory."""
    return str(settings("files.config", "config.json5"))
