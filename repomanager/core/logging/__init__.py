# repomanager/core/logging/__init__.py
from __future__ import annotations

from .context import clearLogContext, getLogContext, logContext, setLogContext
from .formatters import DevFormatter, JsonFormatter
from .setup import configureLogging, getLogger

__all__ = [
    "configureLogging",
    "getLogger",
    "DevFormatter",
    "JsonFormatter",
    "setLogContext",
    "clearLogContext",
    "getLogContext",
    "logContext",
]
