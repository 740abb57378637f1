# repomanager/core/logging/context.py
from __future__ import annotations
import contextvars
from collections.abc import Iterator
from contextlib import contextmanager

__all__ = ["setLogContext", "clearLogContext", "getLogContext", "logContext"]

# Keys rendered by the formatters: "operation" (install, remove, ...) and "package"
_logContextVar: contextvars.ContextVar[dict[str, object] | None] = contextvars.ContextVar(
    "repomanager.logctx", default=None
)



def setLogContext(**values: object) -> None:
    """Adds values to the current log context. None values are skipped."""
    merged = dict(_logContextVar.get() or {})
    merged.update({key: value for key, value in values.items() if value is not None})
    _logContextVar.set(merged)



def clearLogContext() -> None:
    _logContextVar.set(None)



def getLogContext() -> dict[str, object] | None:
    return _logContextVar.get()



@contextmanager
def logContext(**values: object) -> Iterator[None]:
    """Scopes log context values to a block and restores the previous context afterwards."""
    merged = dict(_logContextVar.get() or {})
    merged.update({key: value for key, value in values.items() if value is not None})
    token = _logContextVar.set(merged)
    try:
        yield
    finally:
        _logContextVar.reset(token)
