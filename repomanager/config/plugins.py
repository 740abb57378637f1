# repomanager/config/plugins.py
from __future__ import annotations
from dataclasses import dataclass

from repomanager.core.errors import InvalidConfigError

__all__ = ["PluginDescriptor", "normalizePluginIdentifier"]



# Characters stripped from the front of plugin identifiers ("\\Vendor\\Plugin", "/vendor.plugin")
_LEADING_SEPARATORS = "\\/"



def normalizePluginIdentifier(identifier: object) -> str:
    if not isinstance(identifier, str):
        raise InvalidConfigError(
            f"The plugin class should be a string. Got: {type(identifier).__name__}"
        )
    normalized = identifier.lstrip(_LEADING_SEPARATORS)
    if not normalized:
        raise InvalidConfigError("The plugin class should not be empty.")
    return normalized



@dataclass(frozen=True, slots=True)
class PluginDescriptor:
    """
    Result of registering a plugin class outside of the config layer.

    Whoever builds the descriptor inspects the class; Config only checks the
    recorded flags and stores the identifier.
    """
    identifier: str
    # False for interfaces, protocols and mixins
    isClass: bool = True
    # Class provides the plugin capability
    implementsPlugin: bool = True
    # Constructor has parameters without defaults
    requiresArguments: bool = False

    def validate(self) -> str:
        """Returns the normalized identifier or raises InvalidConfigError."""
        identifier = normalizePluginIdentifier(self.identifier)
        if not self.isClass:
            raise InvalidConfigError(f"The plugin class {identifier} should be a class.")
        if not self.implementsPlugin:
            raise InvalidConfigError(f"The plugin class {identifier} must implement the plugin capability.")
        if self.requiresArguments:
            raise InvalidConfigError(
                f"The constructor of the plugin class {identifier} must not have required parameters."
            )
        return identifier
