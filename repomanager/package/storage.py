# repomanager/package/storage.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from repomanager.config.config import Config
from .install_file import InstallFile
from .package_file import PackageFile, RootPackageFile

logger = logging.getLogger(__name__)

__all__ = [
    "PackageFileReader", "PackageFileWriter", "PackageFileStorage",
    "InstallFileReader", "InstallFileWriter", "InstallFileStorage",
]



class PackageFileReader(Protocol):
    def readPackageFile(self, path: str | Path) -> PackageFile:
        """Raises FileNotFoundError if `path` does not exist."""
        ...

    def readRootPackageFile(self, path: str | Path, baseConfig: Config | None = None) -> RootPackageFile:
        """Raises FileNotFoundError if `path` does not exist."""
        ...



class PackageFileWriter(Protocol):
    def writePackageFile(self, packageFile: PackageFile, path: str | Path) -> None: ...



class InstallFileReader(Protocol):
    def readInstallFile(self, path: str | Path) -> InstallFile:
        """Raises FileNotFoundError if `path` does not exist."""
        ...



class InstallFileWriter(Protocol):
    def writeInstallFile(self, installFile: InstallFile, path: str | Path) -> None: ...



class PackageFileStorage:
    """Loads and saves package files, creating fresh ones for missing paths."""

    def __init__(self, reader: PackageFileReader, writer: PackageFileWriter) -> None:
        self._reader = reader
        self._writer = writer

    def loadPackageFile(self, path: str | Path) -> PackageFile:
        try:
            return self._reader.readPackageFile(path)
        except FileNotFoundError:
            logger.debug("Package file '%s' not found, starting with an empty one", path)
            return PackageFile(None, path)

    def loadRootPackageFile(self, path: str | Path, baseConfig: Config | None = None) -> RootPackageFile:
        try:
            return self._reader.readRootPackageFile(path, baseConfig)
        except FileNotFoundError:
            logger.debug("Root package file '%s' not found, starting with an empty one", path)
            return RootPackageFile(None, path, baseConfig)

    def savePackageFile(self, packageFile: PackageFile) -> None:
        if packageFile.path is None:
            raise ValueError("Cannot save a package file without a path.")
        self._writer.writePackageFile(packageFile, packageFile.path)

    def saveRootPackageFile(self, packageFile: RootPackageFile) -> None:
        self.savePackageFile(packageFile)



class InstallFileStorage:
    """Loads and saves install files, creating fresh ones for missing paths."""

    def __init__(self, reader: InstallFileReader, writer: InstallFileWriter) -> None:
        self._reader = reader
        self._writer = writer

    def loadInstallFile(self, path: str | Path) -> InstallFile:
        try:
            return self._reader.readInstallFile(path)
        except FileNotFoundError:
            logger.debug("Install file '%s' not found, starting with an empty one", path)
            return InstallFile(path)

    def saveInstallFile(self, installFile: InstallFile) -> None:
        if installFile.path is None:
            raise ValueError("Cannot save an install file without a path.")
        self._writer.writeInstallFile(installFile, installFile.path)
