# repomanager/package/json_io.py
from __future__ import annotations
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from repomanager.config.config import Config
from repomanager.core.errors import InvalidFileError, NoSuchConfigKeyError
from repomanager.core.jsonfile import readJsonFile, writeJsonFile
from .install_file import InstallFile
from .install_info import DEFAULT_INSTALLER, InstallInfo
from .package_file import PackageFile, RootPackageFile

logger = logging.getLogger(__name__)

__all__ = [
    "PackageFileDocument",
    "InstallInfoDocument",
    "InstallFileDocument",
    "JsonPackageFileReader",
    "JsonPackageFileWriter",
    "JsonInstallFileReader",
    "JsonInstallFileWriter",
]



class PackageFileDocument(BaseModel):
    """Shape of a repo.json5 package file."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str | None = Field(default=None, min_length=1)
    resources: dict[str, str | list[str]] = Field(default_factory=dict)
    bindingTypes: dict[str, dict[str, Any]] = Field(default_factory=dict, alias="binding-types")
    override: str | list[str] = Field(default_factory=list)
    config: dict[str, Any] | None = None



class InstallInfoDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    installPath: str = Field(min_length=1)
    name: str | None = Field(default=None, min_length=1)
    installer: str = Field(default=DEFAULT_INSTALLER, min_length=1)
    enabledBindings: list[str] = Field(default_factory=list)
    disabledBindings: list[str] = Field(default_factory=list)



class InstallFileDocument(BaseModel):
    """Shape of the install file listing the installed packages."""
    model_config = ConfigDict(extra="forbid")

    packages: list[InstallInfoDocument] = Field(default_factory=list)



def _parse(model: type[BaseModel], path: str | Path, data: dict[str, Any]) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as err:
        raise InvalidFileError(path, str(err)) from err



def _compact(data: dict[str, Any]) -> dict[str, Any]:
    # Leave unset and empty entries out of written files
    return {key: value for key, value in data.items() if value not in (None, [], {})}



_PackageFileT = TypeVar("_PackageFileT", bound=PackageFile)



def _buildPackageFile(
    create: Callable[[str | None], _PackageFileT],
    doc: PackageFileDocument,
    path: str | Path,
) -> _PackageFileT:
    """Builds the package file from a validated document. Rejected values raise InvalidFileError."""
    try:
        packageFile = create(doc.name)
        for repositoryPath, filesystemPaths in doc.resources.items():
            packageFile.addResourceMapping(repositoryPath, filesystemPaths)
        for typeName, definition in doc.bindingTypes.items():
            packageFile.addBindingType(typeName, definition)
        overrides = [doc.override] if isinstance(doc.override, str) else doc.override
        packageFile.setOverriddenPackages(overrides)
        if doc.config is not None and packageFile.config is not None:
            packageFile.config.merge(doc.config)
    except (ValueError, NoSuchConfigKeyError) as err:
        # InvalidConfigError is a ValueError too
        raise InvalidFileError(path, str(err)) from err
    return packageFile



class JsonPackageFileReader:
    """Reads package files stored as JSON/JSON5 objects."""

    def readPackageFile(self, path: str | Path) -> PackageFile:
        doc = _parse(PackageFileDocument, path, readJsonFile(path))
        config = Config() if doc.config is not None else None
        return _buildPackageFile(lambda name: PackageFile(name, path, config), doc, path)

    def readRootPackageFile(self, path: str | Path, baseConfig: Config | None = None) -> RootPackageFile:
        doc = _parse(PackageFileDocument, path, readJsonFile(path))
        return _buildPackageFile(lambda name: RootPackageFile(name, path, baseConfig), doc, path)



class JsonPackageFileWriter:

    def writePackageFile(self, packageFile: PackageFile, path: str | Path) -> None:
        overrides = packageFile.getOverriddenPackages()
        config = packageFile.config.toDict() if packageFile.config is not None else {}
        doc = PackageFileDocument(
            name=packageFile.packageName,
            resources={
                key: value[0] if len(value) == 1 else value
                for key, value in packageFile.getResourceMappings().items()
            },
            bindingTypes=packageFile.getBindingTypes(),
            override=overrides[0] if len(overrides) == 1 else overrides,
            config=config or None,
        )
        writeJsonFile(path, _compact(doc.model_dump(by_alias=True)))



class JsonInstallFileReader:
    """Reads install files stored as JSON/JSON5 objects."""

    def readInstallFile(self, path: str | Path) -> InstallFile:
        doc = _parse(InstallFileDocument, path, readJsonFile(path))
        installFile = InstallFile(path)
        for entry in doc.packages:
            installFile.addInstallInfo(InstallInfo(
                installPath=entry.installPath,
                packageName=entry.name,
                installer=entry.installer,
                enabledBindings=set(entry.enabledBindings),
                disabledBindings=set(entry.disabledBindings),
            ))
        logger.debug("Read %d install infos from '%s'", len(installFile), path)
        return installFile



class JsonInstallFileWriter:

    def writeInstallFile(self, installFile: InstallFile, path: str | Path) -> None:
        doc = InstallFileDocument(packages=[
            InstallInfoDocument(
                installPath=info.installPath,
                name=info.packageName,
                installer=info.installer,
                enabledBindings=sorted(info.enabledBindings),
                disabledBindings=sorted(info.disabledBindings),
            )
            for info in installFile.getInstallInfos()
        ])
        writeJsonFile(path, {"packages": [_compact(entry) for entry in doc.model_dump()["packages"]]})
