# repomanager/environment.py
from __future__ import annotations
import logging
from pathlib import Path

from repomanager.app.settings import configFileName, packageFileName, resolveHomeDir
from repomanager.config.config import Config
from repomanager.config.config_file import ConfigFile
from repomanager.config.json_io import JsonConfigFileReader, JsonConfigFileWriter
from repomanager.config.storage import ConfigFileStorage
from repomanager.package.json_io import JsonPackageFileReader, JsonPackageFileWriter
from repomanager.package.package_file import RootPackageFile
from repomanager.package.storage import PackageFileStorage

logger = logging.getLogger(__name__)

__all__ = ["GlobalEnvironment", "ProjectEnvironment"]



class GlobalEnvironment:
    """
    The user's configuration, independent of any project.

    Fallback chain: built-in defaults ← <home>/config.json5
    """

    def __init__(
        self,
        homeDir: str | Path | None,
        configFileStorage: ConfigFileStorage,
        *,
        defaultConfig: Config | None = None,
    ) -> None:
        self.homeDir = resolveHomeDir(homeDir)
        self.defaultConfig = defaultConfig if defaultConfig is not None else Config.createDefault()
        self.configFileStorage = configFileStorage
        configPath = self.homeDir / configFileName()
        self.configFile: ConfigFile = configFileStorage.loadConfigFile(configPath, self.defaultConfig)
        logger.debug("Global environment at '%s' (config file '%s')", self.homeDir, configPath)

    @classmethod
    def create(cls, homeDir: str | Path | None = None) -> GlobalEnvironment:
        """Builds an environment backed by JSON5 files."""
        return cls(homeDir, ConfigFileStorage(JsonConfigFileReader(), JsonConfigFileWriter()))

    def getConfig(self) -> Config:
        return self.configFile.config



class ProjectEnvironment(GlobalEnvironment):
    """
    A project (root package) on top of the user's configuration.

    Fallback chain: built-in defaults ← <home>/config.json5 ← <root>/repo.json5
    """

    def __init__(
        self,
        homeDir: str | Path | None,
        rootDir: str | Path,
        configFileStorage: ConfigFileStorage,
        packageFileStorage: PackageFileStorage,
        *,
        defaultConfig: Config | None = None,
    ) -> None:
        super().__init__(homeDir, configFileStorage, defaultConfig=defaultConfig)
        self.rootDir = Path(rootDir).expanduser().absolute()
        self.packageFileStorage = packageFileStorage
        rootPackagePath = self.rootDir / packageFileName()
        self.rootPackageFile: RootPackageFile = packageFileStorage.loadRootPackageFile(
            rootPackagePath,
            self.configFile.config,
        )

    @classmethod
    def create(cls, rootDir: str | Path, homeDir: str | Path | None = None) -> ProjectEnvironment:
        """Builds an environment backed by JSON5 files."""
        return cls(
            homeDir,
            rootDir,
            ConfigFileStorage(JsonConfigFileReader(), JsonConfigFileWriter()),
            PackageFileStorage(JsonPackageFileReader(), JsonPackageFileWriter()),
        )

    def getConfig(self) -> Config:
        return self.rootPackageFile.config

    def resolvePath(self, key: str) -> Path | None:
        """Returns the resolved value of a path key, made absolute against the root directory."""
        value = self.getConfig().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError(f"The config key '{key}' does not hold a path.")
        path = Path(value).expanduser()
        return path if path.is_absolute() else self.rootDir / path
