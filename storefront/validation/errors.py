"""
Schema registry errors.

These are programmer errors (asking for a schema that was never defined,
defining the same name twice). Malformed request input is never an
exception: the validation gate reports it as violations instead.
"""


class SchemaRegistryError(Exception):
    """Base class for schema registry failures."""


class SchemaNotFoundError(SchemaRegistryError, LookupError):
    """Raised when a schema name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Schema '{name}' is not registered")


class SchemaConflictError(SchemaRegistryError, ValueError):
    """Raised when a schema name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Schema '{name}' is already registered")
