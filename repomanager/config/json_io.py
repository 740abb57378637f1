# repomanager/config/json_io.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

import fastjsonschema

from repomanager.core.errors import InvalidConfigError, InvalidFileError
from repomanager.core.jsonfile import readJsonFile, writeJsonFile
from .config import Config, KEY_TYPES
from .config_file import ConfigFile

logger = logging.getLogger(__name__)

__all__ = ["CONFIG_FILE_SCHEMA", "JsonConfigFileReader", "JsonConfigFileWriter"]



def _buildSchema() -> dict[str, Any]:
    properties: dict[str, Any] = {}
    for key, keyType in KEY_TYPES.items():
        if keyType == "list":
            properties[key] = {"type": ["array", "null"], "items": {"type": "string", "minLength": 1}}
        else:
            properties[key] = {"type": ["string", "null"], "minLength": 1}
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
    }



CONFIG_FILE_SCHEMA = _buildSchema()
_validateConfigDocument = fastjsonschema.compile(CONFIG_FILE_SCHEMA)



class JsonConfigFileReader:
    """Reads config files stored as JSON/JSON5 objects."""

    def readConfigFile(self, path: str | Path, baseConfig: Config | None = None) -> ConfigFile:
        data = readJsonFile(path)

        try:
            _validateConfigDocument(data)
        except fastjsonschema.JsonSchemaValueException as err:
            raise InvalidFileError(path, err.message) from err

        configFile = ConfigFile(path, baseConfig)
        try:
            configFile.config.merge(data)
        except InvalidConfigError as err:
            raise InvalidFileError(path, str(err)) from err

        logger.debug("Read %d config keys from '%s'", len(data), path)
        return configFile



class JsonConfigFileWriter:
    """Writes only the values stored in the file's own config, never inherited ones."""

    def writeConfigFile(self, configFile: ConfigFile, path: str | Path) -> None:
        writeJsonFile(path, configFile.config.toDict(resolve=False, fallback=False))
