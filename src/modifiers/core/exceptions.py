from __future__ import annotations

from typing import Any, Dict, Mapping


class ModifiersError(Exception):
    """Base exception for the modifiers package."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context) if context is not None else {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(ModifiersError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ModifiersError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class EntityDataError(ModifiersError, ValueError):
    """Raised when plain data cannot be turned into an entity graph."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ModifiersError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class PluginRegistrationError(ModifiersError, TypeError):
    """Raised when a plugin factory does not satisfy the modifier contract."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ModifiersError.__init__(self, message, context=context)
        TypeError.__init__(self, message)


class PluginNotFoundError(ModifiersError, KeyError):
    """Raised when an unknown plugin id is instantiated."""

    def __init__(self, plugin_id: str, *, context: Mapping[str, Any] | None = None) -> None:
        ctx = {"plugin_id": plugin_id, **dict(context or {})}
        message = f"Unknown modifier plugin: {plugin_id}"
        ModifiersError.__init__(self, message, context=ctx)
        self.plugin_id = plugin_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "ModifiersError",
    "ConfigError",
    "EntityDataError",
    "PluginRegistrationError",
    "PluginNotFoundError",
]
