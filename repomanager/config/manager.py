# repomanager/config/manager.py
from __future__ import annotations
import fnmatch
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .config import Config, ConfigValue
from .config_file import ConfigFile
from .storage import ConfigFileStorage

logger = logging.getLogger(__name__)

__all__ = ["ConfigFileManager"]



class ConfigFileManager:
    """
    Edits the keys of one config file and persists every change.

    Reads default to the raw values stored in the file itself, which is what
    a user editing the file expects to see.
    """

    def __init__(self, configFile: ConfigFile, storage: ConfigFileStorage) -> None:
        self._configFile = configFile
        self._storage = storage

    @property
    def configFile(self) -> ConfigFile:
        return self._configFile

    @property
    def config(self) -> Config:
        return self._configFile.config

    def setConfigKey(self, key: str, value: Any) -> None:
        self.config.set(key, value)
        self._save()

    def setConfigKeys(self, values: Mapping[str, Any]) -> None:
        self.config.merge(values)
        self._save()

    def getConfigKey(self, key: str, *, fallback: bool = False, raw: bool = True) -> ConfigValue:
        return self.config.get(key, resolve=not raw, fallback=fallback)

    def getConfigKeys(self, *, fallback: bool = False, raw: bool = True) -> dict[str, Any]:
        return self.config.toDict(resolve=not raw, fallback=fallback)

    def findConfigKeys(self, pattern: str, *, fallback: bool = False, raw: bool = True) -> dict[str, Any]:
        """Returns the set keys whose names match the glob `pattern`."""
        values = self.getConfigKeys(fallback=fallback, raw=raw)
        return {key: value for key, value in values.items() if fnmatch.fnmatchcase(key, pattern)}

    def removeConfigKey(self, key: str) -> None:
        self.config.remove(key)
        self._save()

    def removeConfigKeys(self, keys: Iterable[str]) -> None:
        for key in keys:
            self.config.remove(key)
        self._save()

    def _save(self) -> None:
        self._storage.saveConfigFile(self._configFile)
        logger.debug("Saved config file '%s'", self._configFile.path)
