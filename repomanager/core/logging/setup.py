# repomanager/core/logging/setup.py
from __future__ import annotations
import logging
import logging.handlers
from pathlib import Path

from repomanager.app.settings import settings, settingsBool
from .formatters import DevFormatter, JsonFormatter

__all__ = [
    "configureLogging",
    "getLogger",
]



def configureLogging(*, devMode: bool | None = None, logFile: str | Path | None = None) -> None:
    """
    Initiate the logging configuration for applications embedding repomanager.

    Dev:
      - Console pretty logs (DEBUG)
      - JSON file log (DEBUG), if a log file is configured

    Prod:
      - Console INFO
      - JSON file log INFO with rotation, if a log file is configured

    Arguments left as None are taken from settings ("debug.devModeEnabled", "logging.file").
    """
    if devMode is None:
        devMode = settingsBool("debug.devModeEnabled", False)
    if logFile is None:
        logFile = settings("logging.file", None)

    rootLevel = logging.DEBUG if devMode else logging.INFO

    root = logging.getLogger("repomanager")
    root.handlers.clear()
    root.setLevel(rootLevel)

    consoleHandler = logging.StreamHandler()
    consoleHandler.setLevel(rootLevel)
    consoleHandler.setFormatter(DevFormatter())
    root.addHandler(consoleHandler)

    if logFile:
        fileHandler = logging.handlers.RotatingFileHandler(
            str(logFile),
            maxBytes=int(settings("logging.maxBytes", 10 * 1024 * 1024)),
            backupCount=int(settings("logging.backupCount", 5)),
            encoding="utf-8"
        )
        fileHandler.setLevel(rootLevel)
        fileHandler.setFormatter(JsonFormatter())
        root.addHandler(fileHandler)



def getLogger(name: str, side: str = "") -> logging.Logger:
    return logging.getLogger(f"{str(side).strip()}.{str(name).strip()}" if str(side).strip() else str(name).strip())
