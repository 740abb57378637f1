# repomanager/core/errors.py
from __future__ import annotations
from pathlib import Path

__all__ = [
    "InvariantViolationError",
    "InvalidConfigError",
    "UnresolvedPlaceholderError",
    "NoSuchConfigKeyError",
    "NoSuchPackageError",
    "RootPackageConflictError",
    "InvalidFileError",
]



class InvariantViolationError(Exception):
    """Raised when an object is built in a way that breaks one of its invariants (programming error)."""
    pass



class InvalidConfigError(ValueError):
    """Raised when a configuration key receives a value of the wrong type or shape."""
    pass



class UnresolvedPlaceholderError(InvalidConfigError):
    """
    Raised when a "{$key}" placeholder cannot be expanded: the key is unknown,
    has no value anywhere in the fallback chain, or refers back to itself.
    """
    def __init__(self, key: str, placeholder: str, reason: str) -> None:
        super().__init__(f"Cannot resolve placeholder '{{${placeholder}}}' in config key '{key}': {reason}")
        self.key = key
        self.placeholder = placeholder



class NoSuchConfigKeyError(KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"The config key '{self.key}' does not exist"



class NoSuchPackageError(KeyError):
    def __init__(self, name: str | None) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"The package '{self.name}' does not exist"



class RootPackageConflictError(ValueError):
    """Raised when a second root package with a different name is added to a collection."""
    def __init__(self, existing: str | None, incoming: str | None) -> None:
        super().__init__(
            f"Cannot add root package '{incoming}': the collection already has the root package '{existing}'. "
            "Remove it first."
        )
        self.existing = existing
        self.incoming = incoming



class InvalidFileError(Exception):
    """Raised by readers when a file exists but its content cannot be parsed or validated."""
    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"Invalid file '{path}': {message}")
        self.path = str(path)
