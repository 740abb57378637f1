# repomanager/config/config.py
from __future__ import annotations
import re
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from repomanager.core.errors import InvalidConfigError, NoSuchConfigKeyError, UnresolvedPlaceholderError
from .plugins import PluginDescriptor, normalizePluginIdentifier

__all__ = ["Config", "ConfigValue", "KEY_TYPES", "KEYS"]



ConfigValue = str | list[str] | None

KeyType = Literal["path", "list"]

# Recognized keys, in the order used for serialization
KEY_TYPES: dict[str, KeyType] = {
    "repo-dir": "path",
    "install-file": "path",
    "package-repo-config": "path",
    "generated-repo": "path",
    "repo-cache": "path",
    "plugins": "list",
}
KEYS: tuple[str, ...] = tuple(KEY_TYPES)

_PLACEHOLDER_RE = re.compile(r"\{\$([^{}$]+)\}")



class Config:
    """
    Typed key/value store with placeholder expansion and a parent fallback chain.

    Values may reference other keys with "{$key}". Reading a value "resolved"
    expands each placeholder once; the referenced key is itself looked up fully
    resolved through the chain of the config that was queried. Reading "raw"
    returns the stored text untouched.

    The parent is only read from. Whoever created it keeps ownership.
    """

    REPO_DIR = "repo-dir"
    INSTALL_FILE = "install-file"
    PACKAGE_REPO_CONFIG = "package-repo-config"
    GENERATED_REPO = "generated-repo"
    REPO_CACHE = "repo-cache"
    PLUGINS = "plugins"

    def __init__(self, parent: Config | None = None, values: Mapping[str, Any] | None = None) -> None:
        self._parent = parent
        self._values: dict[str, ConfigValue] = {}
        if values:
            self.merge(values)

    @classmethod
    def createDefault(cls) -> Config:
        """Returns a config populated with the built-in defaults."""
        return cls(values={
            cls.REPO_DIR: ".repo",
            cls.INSTALL_FILE: "{$repo-dir}/install-file.json5",
            cls.PACKAGE_REPO_CONFIG: "{$repo-dir}/packages.json5",
            cls.GENERATED_REPO: "{$repo-dir}/resource-repository.py",
            cls.REPO_CACHE: "{$repo-dir}/cache",
        })

    @staticmethod
    def isValidKey(key: object) -> bool:
        return isinstance(key, str) and key in KEY_TYPES

    # ----- Parent -----

    def getParent(self) -> Config | None:
        return self._parent

    def setParent(self, parent: Config | None) -> None:
        node = parent
        while node is not None:
            if node is self:
                raise InvalidConfigError("A config cannot be its own ancestor.")
            node = node._parent
        self._parent = parent

    # ----- Reading -----

    def get(self, key: str, resolve: bool = True, *, fallback: bool = True) -> ConfigValue:
        """
        Returns the value of `key`, or None when neither this config nor
        (with `fallback`) any of its parents has a value.

        Raises:
            NoSuchConfigKeyError: for unrecognized keys
            UnresolvedPlaceholderError: if a placeholder cannot be expanded
        """
        self._assertValidKey(key)
        raw = self._lookup(key, fallback)
        if isinstance(raw, list):
            return list(raw)
        if raw is None or not resolve:
            return raw
        return self._expand(key, raw, (key,))

    def getRaw(self, key: str, *, fallback: bool = True) -> ConfigValue:
        return self.get(key, resolve=False, fallback=fallback)

    def contains(self, key: str, *, fallback: bool = False) -> bool:
        self._assertValidKey(key)
        return self._lookup(key, fallback) is not None

    def isEmpty(self) -> bool:
        return not self._values

    def toDict(self, resolve: bool = False, *, fallback: bool = False) -> dict[str, Any]:
        """Returns the set values in key order."""
        out: dict[str, Any] = {}
        for key in KEYS:
            value = self.get(key, resolve, fallback=fallback)
            if value is not None:
                out[key] = value
        return out

    # ----- Writing -----

    def set(self, key: str, value: Any) -> None:
        """
        Sets a local value. None removes the local value, so that reads fall
        back to the parent again.

        Raises:
            NoSuchConfigKeyError: for unrecognized keys
            InvalidConfigError: if the value has the wrong type or is empty
        """
        self._store(self._values, key, value)

    def merge(self, values: Mapping[str, Any]) -> None:
        """Sets several values at once. Nothing changes if any of them is invalid."""
        staged = dict(self._values)
        for key, value in values.items():
            self._store(staged, key, value)
        self._values = staged

    def replace(self, values: Mapping[str, Any]) -> None:
        staged: dict[str, ConfigValue] = {}
        for key, value in values.items():
            self._store(staged, key, value)
        self._values = staged

    def remove(self, key: str) -> None:
        self._assertValidKey(key)
        self._values.pop(key, None)

    def clear(self) -> None:
        self._values.clear()

    # ----- Plugin classes -----

    def getPluginClasses(self) -> list[str]:
        return list(self.get(self.PLUGINS) or [])

    def addPluginClass(self, descriptor: PluginDescriptor) -> None:
        identifier = descriptor.validate()
        current = self.getPluginClasses()
        if identifier not in current:
            current.append(identifier)
        self._values[self.PLUGINS] = current

    def setPluginClasses(self, descriptors: Iterable[PluginDescriptor]) -> None:
        identifiers = [descriptor.validate() for descriptor in descriptors]
        self._values[self.PLUGINS] = list(dict.fromkeys(identifiers))

    def removePluginClass(self, identifier: str) -> None:
        """Removes a plugin class. Unknown identifiers are ignored."""
        identifier = normalizePluginIdentifier(identifier)
        current = self.getPluginClasses()
        if identifier not in current:
            return
        current.remove(identifier)
        self._values[self.PLUGINS] = current

    # ----- Internals -----

    def _assertValidKey(self, key: object) -> None:
        if not self.isValidKey(key):
            raise NoSuchConfigKeyError(str(key))

    def _store(self, values: dict[str, ConfigValue], key: str, value: Any) -> None:
        self._assertValidKey(key)
        if value is None:
            values.pop(key, None)
        elif KEY_TYPES[key] == "list":
            values[key] = self._validateList(key, value)
        else:
            values[key] = self._validatePath(key, value)

    def _lookup(self, key: str, fallback: bool) -> ConfigValue:
        if key in self._values:
            return self._values[key]
        if fallback and self._parent is not None:
            return self._parent.get(key, resolve=False)
        return None

    def _expand(self, key: str, value: str, resolving: tuple[str, ...]) -> str:
        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in KEY_TYPES:
                raise UnresolvedPlaceholderError(key, name, "unknown config key")
            if name in resolving:
                raise UnresolvedPlaceholderError(key, name, "circular reference")
            inner = self._lookup(name, fallback=True)
            if inner is None:
                raise UnresolvedPlaceholderError(key, name, "no value is set")
            if not isinstance(inner, str):
                raise InvalidConfigError(
                    f"The config key '{name}' holds a list and cannot be used as a placeholder in '{key}'."
                )
            return self._expand(name, inner, resolving + (name,))

        return _PLACEHOLDER_RE.sub(replace, value)

    @staticmethod
    def _validatePath(key: str, value: Any) -> str:
        if not isinstance(value, str):
            raise InvalidConfigError(
                f"The value of the config key '{key}' should be a string or null. Got: {type(value).__name__}"
            )
        if value == "":
            raise InvalidConfigError(f"The value of the config key '{key}' should not be empty.")
        return value

    @staticmethod
    def _validateList(key: str, value: Any) -> list[str]:
        if not isinstance(value, (list, tuple)):
            raise InvalidConfigError(
                f"The value of the config key '{key}' should be a list or null. Got: {type(value).__name__}"
            )
        # Ordered set of identifiers
        return list(dict.fromkeys(normalizePluginIdentifier(item) for item in value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self._values == other._values and self._parent == other._parent

    def __repr__(self) -> str:
        return f"Config({self._values!r}, parent={'yes' if self._parent is not None else 'no'})"
