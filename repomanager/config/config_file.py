# repomanager/config/config_file.py
from __future__ import annotations
from pathlib import Path

from .config import Config

__all__ = ["ConfigFile"]



class ConfigFile:
    """A config document stored at `path`. Its config falls back to `baseConfig`."""

    def __init__(self, path: str | Path | None = None, baseConfig: Config | None = None) -> None:
        self.path = str(path) if path is not None else None
        self.config = Config(baseConfig)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigFile):
            return NotImplemented
        return self.path == other.path and self.config == other.config

    def __repr__(self) -> str:
        return f"ConfigFile(path={self.path!r}, config={self.config!r})"
