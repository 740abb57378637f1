# repomanager/config/__init__.py
from .config import Config, ConfigValue, KEY_TYPES, KEYS
from .config_file import ConfigFile
from .json_io import JsonConfigFileReader, JsonConfigFileWriter
from .manager import ConfigFileManager
from .plugins import PluginDescriptor
from .storage import ConfigFileReader, ConfigFileWriter, ConfigFileStorage

__all__ = [
    "Config",
    "ConfigValue",
    "KEY_TYPES",
    "KEYS",
    "ConfigFile",
    "ConfigFileManager",
    "ConfigFileReader",
    "ConfigFileWriter",
    "ConfigFileStorage",
    "JsonConfigFileReader",
    "JsonConfigFileWriter",
    "PluginDescriptor",
]
