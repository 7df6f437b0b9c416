"""
Exceptions raised by the plugin transport layer.

The data pipeline itself never raises: bad arguments fall back to defaults
and failed validation is reported inside the mutation envelope. Only
registry misuse and lookups of unknown operations surface as exceptions.
"""


class PluginError(Exception):
    """Base class for plugin errors."""

    pass


class DuplicateOperationError(PluginError, ValueError):
    """Raised when an operation name is registered twice for the same kind."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.capitalize()} '{name}' is already registered")


class OperationNotFoundError(PluginError, LookupError):
    """Raised when an operation is requested that was never registered."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.capitalize()} '{name}' is not registered")
