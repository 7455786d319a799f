"""
Request validation core.

- schema:   Schema / FieldConstraint declarations, define() and partial()
- registry: SchemaRegistry (named, append-only)
- gate:     validate() - the pure (schema, input, source) -> result function
"""

from .errors import SchemaConflictError, SchemaNotFoundError, SchemaRegistryError
from .gate import InputSource, ValidationResult, Violation, validate, validate_named
from .registry import SchemaRegistry
from .schema import FieldConstraint, RequestSchema, Schema, define, partial

__all__ = [
    "SchemaRegistryError",
    "SchemaNotFoundError",
    "SchemaConflictError",
    "InputSource",
    "Violation",
    "ValidationResult",
    "validate",
    "validate_named",
    "SchemaRegistry",
    "FieldConstraint",
    "RequestSchema",
    "Schema",
    "define",
    "partial",
]
