# repomanager/package/package.py
from __future__ import annotations
import os
from enum import Enum
from pathlib import Path

from repomanager.core.errors import InvariantViolationError
from .install_info import InstallInfo
from .package_file import PackageFile, RootPackageFile
from .state import PackageState, PathExists, detect

__all__ = ["PackageRole", "Package"]



class PackageRole(Enum):
    REGULAR = "regular"
    # The project being managed, as opposed to its installed dependencies
    ROOT = "root"



class Package:
    """
    An installed package: its package file (or the error raised while loading
    it), its absolute install path, its install info and its state.

    Everything except the state is fixed at construction. The state is
    detected right away and changes only through resetState()/refreshState().
    """

    # Name of packages that declare none and were installed without one
    DEFAULT_NAME: str | None = None
    # Name of a root package that declares none
    ROOT_DEFAULT_NAME = "__root__"

    def __init__(
        self,
        packageFile: PackageFile | None,
        installPath: str | Path,
        installInfo: InstallInfo | None = None,
        loadError: Exception | None = None,
        *,
        role: PackageRole = PackageRole.REGULAR,
        exists: PathExists | None = None,
    ) -> None:
        if not isinstance(installPath, (str, Path)) or not os.path.isabs(installPath):
            raise InvariantViolationError(f"The install path should be an absolute path. Got: {installPath!r}")
        if packageFile is None and loadError is None:
            raise InvariantViolationError("The load error must be passed if the package file is null.")
        if role is PackageRole.ROOT and packageFile is not None and not isinstance(packageFile, RootPackageFile):
            raise InvariantViolationError(
                f"A root package needs a RootPackageFile. Got: {type(packageFile).__name__}"
            )

        # A name chosen during installation wins over the one in the package file
        if installInfo is not None and installInfo.packageName is not None:
            name = installInfo.packageName
        elif packageFile is not None:
            name = packageFile.packageName
        else:
            name = None

        if name is None:
            name = self.ROOT_DEFAULT_NAME if role is PackageRole.ROOT else self.DEFAULT_NAME

        self._name = name
        self._installPath = str(installPath)
        self._packageFile = packageFile
        self._installInfo = installInfo
        self._loadError = loadError
        self._role = role
        self._exists = exists
        self._state = PackageState.NOT_LOADED

        self._state = detect(self, self._exists)

    @classmethod
    def root(
        cls,
        packageFile: RootPackageFile | None,
        installPath: str | Path,
        loadError: Exception | None = None,
        *,
        exists: PathExists | None = None,
    ) -> Package:
        return cls(packageFile, installPath, None, loadError, role=PackageRole.ROOT, exists=exists)

    # ----- Accessors -----

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def installPath(self) -> str:
        return self._installPath

    @property
    def packageFile(self) -> PackageFile | None:
        return self._packageFile

    @property
    def installInfo(self) -> InstallInfo | None:
        return self._installInfo

    @property
    def loadError(self) -> Exception | None:
        return self._loadError

    @property
    def role(self) -> PackageRole:
        return self._role

    @property
    def state(self) -> PackageState:
        return self._state

    # ----- State -----

    def resetState(self) -> None:
        self._state = PackageState.NOT_LOADED

    def refreshState(self) -> None:
        self._state = detect(self, self._exists)

    def isRoot(self) -> bool:
        return self._role is PackageRole.ROOT

    def isLoaded(self) -> bool:
        return self._state is not PackageState.NOT_LOADED

    def isEnabled(self) -> bool:
        return self._state is PackageState.ENABLED

    def isNotFound(self) -> bool:
        return self._state is PackageState.NOT_FOUND

    def isNotLoadable(self) -> bool:
        return self._state is PackageState.NOT_LOADABLE

    def __repr__(self) -> str:
        return f"Package(name={self._name!r}, installPath={self._installPath!r}, role={self._role.value}, state={self._state.value})"
