"""
Validation gate: (schema, raw input, source) -> ValidationResult.

The gate is a pure function. It never raises for malformed input; every
constraint failure is reported as a Violation, all of them, in field
declaration order. Unknown keys are dropped from the typed value.

Coercion policy by input source:
- body:   values are checked against the declared type as-is (strict mode),
          so "5" is not accepted for a number field
- query / params: values arrive as strings and are coerced where the
          conversion is lossless (lax mode): "5" -> 5, "true" -> True.
          A string that cannot be converted ("abc" for a number) is a
          violation, never silently defaulted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ValidationError
from pydantic_core import ErrorDetails

from storefront.utils.constants import REQUIRED_MESSAGE
from storefront.validation.registry import SchemaRegistry
from storefront.validation.schema import Schema


class InputSource(str, Enum):
    """Where a raw input record was read from."""
    BODY = "body"
    QUERY = "query"
    PARAMS = "params"


@dataclass(frozen=True)
class Violation:
    """A single constraint failure, keyed by dotted wire-name path."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of one validation call.

    Exactly one of `value` / `violations` is populated.
    """
    schema_name: str
    value: Optional[BaseModel] = None
    violations: Tuple[Violation, ...] = ()

    @property
    def success(self) -> bool:
        return self.value is not None

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        """Typed value keyed by wire names, or None on failure."""
        if self.value is None:
            return None
        return self.value.model_dump(by_alias=True)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form (typed values serialized in JSON mode)."""
        return {
            "success": self.success,
            "data": (
                self.value.model_dump(mode="json", by_alias=True)
                if self.value is not None
                else None
            ),
            "violations": [violation.to_dict() for violation in self.violations],
        }


def validate(
    schema: Schema,
    raw: Any,
    source: InputSource = InputSource.BODY,
) -> ValidationResult:
    """
    Validate a raw input record against a schema.

    Args:
        schema: Schema to apply
        raw: Untyped input (normally a dict of string keys)
        source: Where the input came from; decides the coercion policy

    Returns:
        ValidationResult with either the typed value or every violation found
    """
    source = InputSource(source)

    try:
        value = schema.model.model_validate(raw, strict=source is InputSource.BODY)
    except ValidationError as exc:
        return ValidationResult(
            schema_name=schema.name,
            violations=tuple(_to_violation(error, source) for error in exc.errors()),
        )

    return ValidationResult(schema_name=schema.name, value=value)


def validate_named(
    registry: SchemaRegistry,
    name: str,
    raw: Any,
    source: InputSource = InputSource.BODY,
) -> ValidationResult:
    """
    Look up a schema by name and validate against it.

    Raises:
        SchemaNotFoundError: If `name` is not registered (programmer error)
    """
    return validate(registry.get(name), raw, source)


def _to_violation(error: ErrorDetails, source: InputSource) -> Violation:
    path: List[str] = [str(part) for part in error["loc"]]
    message = REQUIRED_MESSAGE if error["type"] == "missing" else error["msg"]
    return Violation(field=".".join(path) or source.value, message=message)
