# repomanager/package/install_info.py
from __future__ import annotations
from dataclasses import dataclass, field

__all__ = ["DEFAULT_INSTALLER", "InstallInfo"]



DEFAULT_INSTALLER = "user"



@dataclass(eq=True)
class InstallInfo:
    """
    What was recorded when a package was installed.

    `installPath` is kept exactly as written in the install file (it may be
    relative to the root package), unlike Package.installPath which is always
    absolute. A non-null `packageName` wins over the name in the package file.
    """
    installPath: str
    packageName: str | None = None
    installer: str = DEFAULT_INSTALLER
    enabledBindings: set[str] = field(default_factory=set)
    disabledBindings: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if not isinstance(self.installPath, str) or not self.installPath:
            raise ValueError("The install path should be a non-empty string.")
        if self.packageName is not None and (not isinstance(self.packageName, str) or not self.packageName):
            raise ValueError("The package name should be a non-empty string or null.")
        if not self.installer:
            raise ValueError("The installer should not be empty.")

    def enableBinding(self, uuid: str) -> None:
        self.disabledBindings.discard(uuid)
        self.enabledBindings.add(uuid)

    def disableBinding(self, uuid: str) -> None:
        self.enabledBindings.discard(uuid)
        self.disabledBindings.add(uuid)

    def resetBinding(self, uuid: str) -> None:
        self.enabledBindings.discard(uuid)
        self.disabledBindings.discard(uuid)

    def isBindingEnabled(self, uuid: str) -> bool:
        return uuid in self.enabledBindings

    def isBindingDisabled(self, uuid: str) -> bool:
        return uuid in self.disabledBindings
