# repomanager/package/install_file.py
from __future__ import annotations
from collections.abc import Iterable
from pathlib import Path

from .install_info import InstallInfo

__all__ = ["InstallFile"]



class InstallFile:
    """Ordered list of install infos, keyed by the install path as recorded."""

    def __init__(self, path: str | Path | None = None, installInfos: Iterable[InstallInfo] = ()) -> None:
        self.path = str(path) if path is not None else None
        self._installInfos: dict[str, InstallInfo] = {}
        for installInfo in installInfos:
            self.addInstallInfo(installInfo)

    def addInstallInfo(self, installInfo: InstallInfo) -> None:
        self._installInfos[installInfo.installPath] = installInfo

    def removeInstallInfo(self, installPath: str) -> None:
        self._installInfos.pop(installPath, None)

    def hasInstallInfo(self, installPath: str) -> bool:
        return installPath in self._installInfos

    def getInstallInfo(self, installPath: str) -> InstallInfo:
        if installPath not in self._installInfos:
            raise LookupError(f"No package is installed at '{installPath}'")
        return self._installInfos[installPath]

    def getInstallInfos(self) -> list[InstallInfo]:
        return list(self._installInfos.values())

    def findInstallInfo(self, packageName: str) -> InstallInfo | None:
        """Returns the install info recorded under `packageName`, if any."""
        return next(
            (info for info in self._installInfos.values() if info.packageName == packageName),
            None,
        )

    def __len__(self) -> int:
        return len(self._installInfos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstallFile):
            return NotImplemented
        return self.path == other.path and list(self._installInfos.items()) == list(other._installInfos.items())

    def __repr__(self) -> str:
        return f"InstallFile(path={self.path!r}, installInfos={len(self._installInfos)})"
