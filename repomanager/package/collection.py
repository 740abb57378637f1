# repomanager/package/collection.py
from __future__ import annotations
import logging
from collections.abc import Iterable, Iterator

from repomanager.core.errors import NoSuchPackageError, RootPackageConflictError
from .package import Package
from .state import PackageState

logger = logging.getLogger(__name__)

__all__ = ["PackageCollection"]



class PackageCollection:
    """
    Ordered registry of packages keyed by name.

    Insertion order is override precedence: the first package added has the
    lowest precedence. At most one package with the root role is held; it is
    tracked by identity and iterated at its insertion position.

    Policies:
      - Adding a package whose name is already present replaces the entry in
        place (the position is kept).
      - Adding a root package while a root package with another name is
        present raises RootPackageConflictError. Nothing is demoted implicitly.
    """

    def __init__(self, packages: Iterable[Package] = ()) -> None:
        self._packages: dict[str, Package] = {}
        self._rootPackage: Package | None = None
        self.merge(packages)

    # ----- Mutation -----

    def add(self, package: Package) -> None:
        name = package.name
        if name is None:
            raise ValueError(f"Cannot add the unnamed package at '{package.installPath}'.")

        root = self._rootPackage
        if package.isRoot() and root is not None and root.name != name:
            raise RootPackageConflictError(root.name, name)

        existing = self._packages.get(name)
        if existing is not None:
            logger.debug("Replacing package '%s' (%s → %s)", name, existing.installPath, package.installPath)

        # Assigning to an existing key keeps its position
        self._packages[name] = package

        if package.isRoot():
            self._rootPackage = package
        elif existing is not None and existing is root:
            self._rootPackage = None

    def merge(self, packages: Iterable[Package]) -> None:
        for package in packages:
            self.add(package)

    def replace(self, packages: Iterable[Package]) -> None:
        self.clear()
        self.merge(packages)

    def remove(self, name: str) -> None:
        """Removes the package called `name`. Unknown names are ignored."""
        package = self._packages.pop(name, None)
        if package is not None and package is self._rootPackage:
            self._rootPackage = None

    def clear(self) -> None:
        self._packages.clear()
        self._rootPackage = None

    # ----- Lookup -----

    def get(self, name: str) -> Package:
        """
        Raises:
            NoSuchPackageError: if no package is called `name`
        """
        if name not in self._packages:
            raise NoSuchPackageError(name)
        return self._packages[name]

    def contains(self, name: str) -> bool:
        return name in self._packages

    def getRootPackage(self) -> Package | None:
        return self._rootPackage

    def getRootPackageName(self) -> str | None:
        return self._rootPackage.name if self._rootPackage is not None else None

    def getInstalledPackages(self) -> dict[str, Package]:
        """Returns all packages except the root package, in order."""
        return {
            name: package
            for name, package in self._packages.items()
            if package is not self._rootPackage
        }

    def getInstalledPackageNames(self) -> list[str]:
        return list(self.getInstalledPackages())

    def getPackageNames(self) -> list[str]:
        return list(self._packages)

    def getPackagesByState(self, state: PackageState) -> dict[str, Package]:
        return {name: package for name, package in self._packages.items() if package.state is state}

    def toDict(self) -> dict[str, Package]:
        return dict(self._packages)

    def isEmpty(self) -> bool:
        return not self._packages

    # ----- Container protocol -----

    def __getitem__(self, name: str) -> Package:
        return self.get(name)

    def __delitem__(self, name: str) -> None:
        self.remove(name)

    def __contains__(self, name: object) -> bool:
        return name in self._packages

    def __iter__(self) -> Iterator[Package]:
        return iter(list(self._packages.values()))

    def __len__(self) -> int:
        return len(self._packages)

    def __repr__(self) -> str:
        return f"PackageCollection({list(self._packages)!r}, root={self.getRootPackageName()!r})"
