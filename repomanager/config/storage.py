# repomanager/config/storage.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from .config import Config
from .config_file import ConfigFile

logger = logging.getLogger(__name__)

__all__ = ["ConfigFileReader", "ConfigFileWriter", "ConfigFileStorage"]



class ConfigFileReader(Protocol):
    def readConfigFile(self, path: str | Path, baseConfig: Config | None = None) -> ConfigFile:
        """Raises FileNotFoundError if `path` does not exist."""
        ...



class ConfigFileWriter(Protocol):
    def writeConfigFile(self, configFile: ConfigFile, path: str | Path) -> None: ...



class ConfigFileStorage:
    """Loads and saves config files, creating fresh ones for missing paths."""

    def __init__(self, reader: ConfigFileReader, writer: ConfigFileWriter) -> None:
        self._reader = reader
        self._writer = writer

    def loadConfigFile(self, path: str | Path, baseConfig: Config | None = None) -> ConfigFile:
        try:
            return self._reader.readConfigFile(path, baseConfig)
        except FileNotFoundError:
            logger.debug("Config file '%s' not found, starting with an empty one", path)
            return ConfigFile(path, baseConfig)

    def saveConfigFile(self, configFile: ConfigFile) -> None:
        if configFile.path is None:
            raise ValueError("Cannot save a config file without a path.")
        self._writer.writeConfigFile(configFile, configFile.path)
