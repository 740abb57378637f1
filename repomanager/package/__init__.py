# repomanager/package/__init__.py
from .collection import PackageCollection
from .install_file import InstallFile
from .install_info import InstallInfo
from .json_io import (
    JsonInstallFileReader,
    JsonInstallFileWriter,
    JsonPackageFileReader,
    JsonPackageFileWriter,
)
from .package import Package, PackageRole
from .package_file import PackageFile, RootPackageFile
from .state import PackageState, detect
from .storage import InstallFileStorage, PackageFileStorage

__all__ = [
    "PackageCollection",
    "InstallFile",
    "InstallInfo",
    "JsonInstallFileReader",
    "JsonInstallFileWriter",
    "JsonPackageFileReader",
    "JsonPackageFileWriter",
    "Package",
    "PackageRole",
    "PackageFile",
    "RootPackageFile",
    "PackageState",
    "detect",
    "InstallFileStorage",
    "PackageFileStorage",
]
