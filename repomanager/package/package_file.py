# repomanager/package/package_file.py
from __future__ import annotations
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from repomanager.config.config import Config

__all__ = ["PackageFile", "RootPackageFile"]



def _validateName(name: object) -> str | None:
    if name is None:
        return None
    if not isinstance(name, str):
        raise ValueError(f"The package name should be a string or null. Got: {type(name).__name__}")
    if not name.strip():
        raise ValueError("The package name should not be empty.")
    return name



class PackageFile:
    """
    Metadata a package declares about itself (the repo.json5 in its root).

    Resource mappings and binding types are kept as plain data; this layer
    does not interpret them.
    """

    def __init__(
        self,
        packageName: str | None = None,
        path: str | Path | None = None,
        config: Config | None = None,
    ) -> None:
        self._packageName = _validateName(packageName)
        self.path = str(path) if path is not None else None
        # Optional settings override declared by the package
        self.config = config
        self._resources: dict[str, list[str]] = {}
        self._bindingTypes: dict[str, dict[str, Any]] = {}
        self._overriddenPackages: list[str] = []

    # ----- Name -----

    @property
    def packageName(self) -> str | None:
        return self._packageName

    @packageName.setter
    def packageName(self, name: str | None) -> None:
        self._packageName = _validateName(name)

    # ----- Resource mappings -----

    def addResourceMapping(self, repositoryPath: str, filesystemPaths: str | Iterable[str]) -> None:
        if not repositoryPath:
            raise ValueError("The repository path should not be empty.")
        if isinstance(filesystemPaths, str):
            filesystemPaths = [filesystemPaths]
        paths = list(filesystemPaths)
        if not paths or any(not isinstance(item, str) or not item for item in paths):
            raise ValueError(f"The paths mapped to '{repositoryPath}' should be non-empty strings.")
        self._resources[repositoryPath] = paths

    def removeResourceMapping(self, repositoryPath: str) -> None:
        self._resources.pop(repositoryPath, None)

    def hasResourceMapping(self, repositoryPath: str) -> bool:
        return repositoryPath in self._resources

    def getResourceMappings(self) -> dict[str, list[str]]:
        return {key: list(value) for key, value in self._resources.items()}

    # ----- Binding types -----

    def addBindingType(self, typeName: str, definition: Mapping[str, Any] | None = None) -> None:
        if not typeName:
            raise ValueError("The binding type name should not be empty.")
        self._bindingTypes[typeName] = dict(definition or {})

    def removeBindingType(self, typeName: str) -> None:
        self._bindingTypes.pop(typeName, None)

    def getBindingTypes(self) -> dict[str, dict[str, Any]]:
        return {key: dict(value) for key, value in self._bindingTypes.items()}

    # ----- Overrides -----

    def getOverriddenPackages(self) -> list[str]:
        return list(self._overriddenPackages)

    def setOverriddenPackages(self, packageNames: Iterable[str]) -> None:
        self._overriddenPackages = []
        for packageName in packageNames:
            self.addOverriddenPackage(packageName)

    def addOverriddenPackage(self, packageName: str) -> None:
        packageName = _validateName(packageName)
        if packageName is None:
            raise ValueError("The overridden package name should not be null.")
        if packageName not in self._overriddenPackages:
            self._overriddenPackages.append(packageName)

    def removeOverriddenPackage(self, packageName: str) -> None:
        if packageName in self._overriddenPackages:
            self._overriddenPackages.remove(packageName)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageFile) or type(other) is not type(self):
            return NotImplemented
        return (
            self._packageName == other._packageName
            and self.path == other.path
            and self.config == other.config
            and self._resources == other._resources
            and self._bindingTypes == other._bindingTypes
            and self._overriddenPackages == other._overriddenPackages
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(packageName={self._packageName!r}, path={self.path!r})"



class RootPackageFile(PackageFile):
    """
    Package file of the project being managed. It always owns a config whose
    parent is `baseConfig` (usually the user's global config).
    """

    def __init__(
        self,
        packageName: str | None = None,
        path: str | Path | None = None,
        baseConfig: Config | None = None,
    ) -> None:
        super().__init__(packageName, path, Config(baseConfig))

    @property
    def config(self) -> Config:
        return self._config

    @config.setter
    def config(self, config: Config | None) -> None:
        if config is None:
            raise ValueError("A root package file always has a config.")
        self._config = config

    def getInstallFile(self) -> str | None:
        """Returns the resolved path of the install file listing the installed packages."""
        return self._config.get(Config.INSTALL_FILE)
