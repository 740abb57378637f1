# repomanager/package/manager.py
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from repomanager.app.settings import packageFileName
from repomanager.config.config import Config
from repomanager.core.errors import InvalidFileError
from repomanager.core.logging import logContext
from .collection import PackageCollection
from .install_file import InstallFile
from .install_info import DEFAULT_INSTALLER, InstallInfo
from .package import Package
from .state import PackageState, PathExists
from .storage import InstallFileStorage, PackageFileStorage

if TYPE_CHECKING:
    from repomanager.environment import ProjectEnvironment

logger = logging.getLogger(__name__)

__all__ = ["PackageManager"]



class PackageManager:
    """
    Builds the package collection of a project and keeps the install file in
    sync when packages are installed or removed.

    The root package is registered first, followed by the installed packages
    in install-file order.
    """

    def __init__(
        self,
        environment: ProjectEnvironment,
        packageFileStorage: PackageFileStorage,
        installFileStorage: InstallFileStorage,
        *,
        exists: PathExists | None = None,
    ) -> None:
        self._environment = environment
        self._packageFileStorage = packageFileStorage
        self._installFileStorage = installFileStorage
        self._exists = exists or os.path.exists
        self._packages: PackageCollection | None = None
        self._installFile: InstallFile | None = None

    # ----- Loading -----

    def loadPackages(self) -> PackageCollection:
        """(Re)loads the install file and every package listed in it."""
        env = self._environment
        installFile = self._loadInstallFile()

        packages = PackageCollection()
        root = Package.root(env.rootPackageFile, str(env.rootDir), exists=self._exists)
        packages.add(root)

        for installInfo in installFile.getInstallInfos():
            package = self._loadPackage(installInfo)
            if package.name is None and package.loadError is not None:
                logger.error("Dropping broken package at '%s': its package file cannot be loaded "
                             "and the install file gives it no name (%s)", installInfo.installPath, package.loadError)
                continue
            if package.name is None:
                logger.error("Skipping package at '%s': it has no name", installInfo.installPath)
                continue
            if package.name == root.name:
                logger.error("Skipping package at '%s': its name '%s' is taken by the root package",
                             installInfo.installPath, package.name)
                continue
            if package.name in packages:
                logger.warning("Package '%s' is installed twice, '%s' wins",
                               package.name, installInfo.installPath)
            packages.add(package)

        self._packages = packages
        logger.debug("Loaded %d packages (%d enabled)", len(packages),
                     len(packages.getPackagesByState(PackageState.ENABLED)))
        return packages

    def _loadInstallFile(self) -> InstallFile:
        path = self._environment.resolvePath(Config.INSTALL_FILE)
        if path is None:
            raise ValueError(f"The config key '{Config.INSTALL_FILE}' is not set.")
        self._installFile = self._installFileStorage.loadInstallFile(path)
        return self._installFile

    def _loadPackage(self, installInfo: InstallInfo) -> Package:
        installPath = self._absoluteInstallPath(installInfo.installPath)
        packageFilePath = os.path.join(installPath, packageFileName())
        try:
            packageFile = self._packageFileStorage.loadPackageFile(packageFilePath)
        except InvalidFileError as err:
            logger.warning("Could not load the package file of '%s': %s", installPath, err)
            return Package(None, installPath, installInfo, err, exists=self._exists)
        return Package(packageFile, installPath, installInfo, exists=self._exists)

    def _absoluteInstallPath(self, installPath: str) -> str:
        path = Path(installPath).expanduser()
        if not path.is_absolute():
            path = self._environment.rootDir / path
        return os.path.normpath(str(path))

    def _recordedInstallPath(self, absolutePath: str) -> str:
        # Paths inside the project are stored relative to the root directory
        rootDir = str(self._environment.rootDir)
        if os.path.commonpath([rootDir, absolutePath]) == rootDir:
            return Path(os.path.relpath(absolutePath, rootDir)).as_posix()
        return absolutePath

    # ----- Queries -----

    def getPackages(self) -> PackageCollection:
        if self._packages is None:
            return self.loadPackages()
        return self._packages

    def getPackage(self, name: str) -> Package:
        return self.getPackages().get(name)

    def hasPackage(self, name: str) -> bool:
        return self.getPackages().contains(name)

    def getRootPackage(self) -> Package:
        root = self.getPackages().getRootPackage()
        assert root is not None
        return root

    def getPackagesByState(self, state: PackageState) -> dict[str, Package]:
        return self.getPackages().getPackagesByState(state)

    def refreshPackageStates(self) -> None:
        for package in self.getPackages():
            package.refreshState()

    # ----- Changes -----

    def installPackage(self, installPath: str | Path, name: str | None = None, installer: str = DEFAULT_INSTALLER) -> Package:
        """
        Installs the package found at `installPath` and records it in the install file.

        Raises:
            FileNotFoundError: if `installPath` does not exist
            InvalidFileError: if the package file cannot be loaded
            ValueError: if the package has no name, the name is taken or the
                install path is already recorded
        """
        packages = self.getPackages()
        absolutePath = self._absoluteInstallPath(str(installPath))
        with logContext(operation="install", package=name or absolutePath):
            if not self._exists(absolutePath):
                raise FileNotFoundError(f"The install path '{absolutePath}' does not exist.")

            packageFilePath = os.path.join(absolutePath, packageFileName())
            packageFile = self._packageFileStorage.loadPackageFile(packageFilePath)

            packageName = name if name is not None else packageFile.packageName
            if packageName is None:
                raise ValueError(f"The package at '{absolutePath}' declares no name. Pass one explicitly.")
            if packageName in packages:
                raise ValueError(f"A package named '{packageName}' is already installed.")

            recordedPath = self._recordedInstallPath(absolutePath)
            installFile = self._installFile if self._installFile is not None else self._loadInstallFile()
            # The install file holds one entry per install path
            if installFile.hasInstallInfo(recordedPath):
                raise ValueError(f"The install path '{recordedPath}' is already recorded in the install file.")

            installInfo = InstallInfo(installPath=recordedPath, packageName=packageName, installer=installer)
            installFile.addInstallInfo(installInfo)
            self._installFileStorage.saveInstallFile(installFile)

            package = Package(packageFile, absolutePath, installInfo, exists=self._exists)
            packages.add(package)
            logger.info("Installed package '%s' from '%s'", packageName, absolutePath)
            return package

    def removePackage(self, name: str) -> None:
        """Removes an installed package. Unknown names are ignored."""
        packages = self.getPackages()
        if name not in packages:
            return

        package = packages.get(name)
        if package.isRoot():
            raise ValueError(f"Cannot remove the root package '{name}'.")

        with logContext(operation="remove", package=name):
            if package.installInfo is not None:
                installFile = self._installFile if self._installFile is not None else self._loadInstallFile()
                installFile.removeInstallInfo(package.installInfo.installPath)
                self._installFileStorage.saveInstallFile(installFile)
            packages.remove(name)
            logger.info("Removed package '%s'", name)
