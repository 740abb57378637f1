# repomanager/core/logging/formatters.py
from __future__ import annotations
import json
import logging

from .context import getLogContext

__all__ = ["JsonFormatter", "DevFormatter"]

# Context keys shown in console output, in this order
_CONSOLE_CONTEXT_KEYS = ("operation", "package")



class JsonFormatter(logging.Formatter):
    """One record per line, for log files."""
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": int(record.created * 1000),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
            "ctx": getLogContext() or {},
            "pid": record.process,
        }

        if record.exc_info:
            excType, excValue, _ = record.exc_info
            entry["exc"] = {
                "type": getattr(excType, "__name__", "Exception"),
                "message": str(excValue),
                "stack": self.formatException(record.exc_info),
            }

        # Paths and other objects in the context are written with str()
        return json.dumps(entry, ensure_ascii=False, default=str, separators=(",", ":"))



class DevFormatter(logging.Formatter):
    """Console formatter: `LEVEL: [logger] message [operation/package]`."""
    def format(self, record: logging.LogRecord) -> str:
        ctx = getLogContext() or {}
        parts = [str(ctx[key]) for key in _CONSOLE_CONTEXT_KEYS if ctx.get(key)]
        suffix = f" [{'/'.join(parts)}]" if parts else ""

        text = record.getMessage()
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        if record.stack_info:
            text += "\n" + self.formatStack(record.stack_info)
        return f"{record.levelname}: [{record.name}] {text}{suffix}"
