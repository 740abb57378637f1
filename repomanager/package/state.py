# repomanager/package/state.py
from __future__ import annotations
import logging
import os
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .package import Package

logger = logging.getLogger(__name__)

__all__ = ["PackageState", "PathExists", "detect"]



# Returns whether an absolute path exists on the backing store
PathExists = Callable[[str], bool]



class PackageState(Enum):
    # Detection has not run yet, or the state was reset
    NOT_LOADED = "not-loaded"
    # The install path does not exist
    NOT_FOUND = "not-found"
    # The package file could not be loaded
    NOT_LOADABLE = "not-loadable"
    ENABLED = "enabled"



def detect(package: Package, exists: PathExists | None = None) -> PackageState:
    """
    Returns the state of `package`. Never returns NOT_LOADED.

    A load error wins over a missing install path. An OSError raised by the
    existence check counts as "not found".
    """
    if package.loadError is not None:
        return PackageState.NOT_LOADABLE

    check = exists or os.path.exists
    try:
        found = bool(check(package.installPath))
    except OSError as err:
        logger.warning("Could not check install path '%s' of package '%s': %s", package.installPath, package.name, err)
        found = False

    if not found:
        return PackageState.NOT_FOUND

    return PackageState.ENABLED
