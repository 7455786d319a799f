"""
Schema declarations for request validation.

A Schema is a named, immutable wrapper around a pydantic model. The model
declares the shape (field types, required/optional, defaults, validators);
the Schema adds the registry name and exposes the declared shape as an
ordered tuple of FieldConstraint records so callers can inspect exactly what
the validation gate enforces.

Wire names are camelCase (`discountPrice`, `shippingAddress`) while Python
attribute names stay snake_case; RequestSchema wires this up through an
alias generator.
"""

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo

logger = logging.getLogger(__name__)

FieldType = Literal["string", "number", "boolean", "date", "array", "object"]

FieldDefinitions = Mapping[str, Tuple[Any, FieldInfo]]


class RequestSchema(BaseModel):
    """
    Base class for request payload models.

    - Keys are read and written by their camelCase alias only
    - Unknown keys are dropped, never rejected
    - Validated values are frozen
    - NaN and infinite numbers are rejected
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        frozen=True,
        allow_inf_nan=False,
    )


# JSON-schema keyword -> FieldConstraint validator name
_VALIDATOR_KEYWORDS = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "minimum": "minimum",
    "maximum": "maximum",
    "exclusiveMinimum": "exclusive_minimum",
    "exclusiveMaximum": "exclusive_maximum",
    "minItems": "min_items",
    "maxItems": "max_items",
    "pattern": "pattern",
    "enum": "enum",
}

_FORMATS = {
    "email": "email",
    "uri": "url",
}

_DATE_FORMATS = {"date", "date-time"}


@dataclass(frozen=True)
class FieldConstraint:
    """
    Declared shape of one schema field.

    Attributes:
        name: Wire name of the field (camelCase alias)
        type: Primitive type (string, number, boolean, date, array, object)
        required: True if the field must be present in the input
        default: Value applied when an optional field is absent
        has_default: True if `default` is meaningful
        validators: Declared checks as sorted (name, value) pairs
            (min_length, minimum, pattern, enum, format, ...)
        items: Element constraint for array fields
        fields: Child constraints for nested-object fields
    """
    name: str
    type: FieldType
    required: bool = True
    default: Any = None
    has_default: bool = False
    validators: Tuple[Tuple[str, Any], ...] = ()
    items: Optional["FieldConstraint"] = None
    fields: Tuple["FieldConstraint", ...] = ()

    def validator_map(self) -> Dict[str, Any]:
        """Validators as a plain dict, enum values as lists."""
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in self.validators
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "required": self.required,
            "validators": self.validator_map(),
        }
        if self.has_default:
            data["default"] = self.default
        if self.items is not None:
            data["items"] = self.items.to_dict()
        if self.fields:
            data["fields"] = [child.to_dict() for child in self.fields]
        return data


@dataclass(frozen=True)
class Schema:
    """
    Named, immutable validation target.

    Attributes:
        name: Registry name (e.g. "createProduct")
        model: Pydantic model declaring the shape
        description: One-line human description
    """
    name: str
    model: Type[BaseModel]
    description: Optional[str] = None

    @cached_property
    def fields(self) -> Tuple[FieldConstraint, ...]:
        """Field constraints in declaration order."""
        json_schema = self.model.model_json_schema(by_alias=True)
        return _constraints_from_object(json_schema, json_schema.get("$defs", {}))

    @property
    def field_names(self) -> Tuple[str, ...]:
        """Wire names of the declared fields, in declaration order."""
        return tuple(
            info.alias or attribute
            for attribute, info in self.model.model_fields.items()
        )


def define(
    name: str,
    fields: Union[Type[BaseModel], FieldDefinitions],
    *,
    description: Optional[str] = None,
) -> Schema:
    """
    Build a Schema from a model class or from field definitions.

    Args:
        name: Registry name for the schema
        fields: Either a pydantic model class, or a mapping of
            snake_case attribute name -> (type, Field(...))
        description: Optional description (defaults to the model docstring's first line)

    Returns:
        The new Schema

    Usage:
        >>> schema = define("refreshToken", {"refresh_token": (str, Field(...))})
        >>> schema.field_names
        ('refreshToken',)
    """
    if isinstance(fields, type) and issubclass(fields, BaseModel):
        model = fields
    else:
        model = create_model(_model_name(name), __base__=RequestSchema, **dict(fields))

    return Schema(name=name, model=model, description=description or _first_line(model.__doc__))


def partial(
    schema: Schema,
    name: Optional[str] = None,
    *,
    description: Optional[str] = None,
) -> Schema:
    """
    Derive a schema whose fields are all optional.

    Field-level constraints, aliases and existing defaults are preserved;
    required fields default to None. Model-level validators of the base are
    not carried over since they usually assume required fields are present.
    """
    partial_name = name or f"{schema.name}Partial"
    definitions = {
        attribute: _optional_field(info)
        for attribute, info in schema.model.model_fields.items()
    }
    model = create_model(
        _model_name(partial_name),
        __config__=schema.model.model_config,
        **definitions,
    )
    return Schema(
        name=partial_name,
        model=model,
        description=description or f"{schema.description or schema.name} (all fields optional)",
    )


def _optional_field(info: FieldInfo) -> Tuple[Any, FieldInfo]:
    """
    Rebuild a field definition as optional, keeping its constraints.

    Only the required flag is cleared: the type is not widened, so an
    explicit null is still a violation.
    """
    annotation: Any = info.annotation
    if info.metadata:
        annotation = Annotated[(annotation, *info.metadata)]

    if info.default_factory is not None:
        default_kwargs: Dict[str, Any] = {"default_factory": info.default_factory}
    else:
        default_kwargs = {"default": None if info.is_required() else info.default}

    return annotation, Field(
        alias=info.alias,
        description=info.description,
        json_schema_extra=info.json_schema_extra,
        **default_kwargs,
    )


def _model_name(schema_name: str) -> str:
    return schema_name[:1].upper() + schema_name[1:]


def _first_line(doc: Optional[str]) -> Optional[str]:
    if not doc:
        return None
    lines = [line.strip() for line in doc.strip().splitlines()]
    return lines[0] if lines else None


# --- JSON schema -> FieldConstraint ---

def _constraints_from_object(
    node: Mapping[str, Any],
    defs: Mapping[str, Any],
) -> Tuple[FieldConstraint, ...]:
    required = set(node.get("required", []))
    return tuple(
        _constraint_from_node(prop_name, prop, defs, prop_name in required)
        for prop_name, prop in node.get("properties", {}).items()
    )


def _constraint_from_node(
    name: str,
    node: Mapping[str, Any],
    defs: Mapping[str, Any],
    required: bool,
) -> FieldConstraint:
    node = _unwrap(node)
    has_default = "default" in node
    default = node.get("default")

    if "$ref" in node:
        target = defs[node["$ref"].rsplit("/", 1)[-1]]
        return FieldConstraint(
            name=name,
            type="object",
            required=required,
            default=default,
            has_default=has_default,
            fields=_constraints_from_object(target, defs),
        )

    validators = {
        key: node[keyword]
        for keyword, key in _VALIDATOR_KEYWORDS.items()
        if keyword in node
    }
    if "const" in node:
        validators["enum"] = [node["const"]]

    json_type = node.get("type")
    json_format = node.get("format")
    items = None
    children: Tuple[FieldConstraint, ...] = ()

    if json_type == "integer":
        field_type: FieldType = "number"
        validators["integer"] = True
    elif json_type == "number":
        field_type = "number"
    elif json_type == "boolean":
        field_type = "boolean"
    elif json_type == "array":
        field_type = "array"
        items = _constraint_from_node(name, node.get("items", {}), defs, True)
    elif json_type == "object":
        field_type = "object"
        children = _constraints_from_object(node, defs)
    elif json_format in _DATE_FORMATS:
        field_type = "date"
    else:
        field_type = "string"

    if json_format in _FORMATS:
        validators["format"] = _FORMATS[json_format]

    return FieldConstraint(
        name=name,
        type=field_type,
        required=required,
        default=default,
        has_default=has_default,
        validators=_freeze(validators),
        items=items,
        fields=children,
    )


def _unwrap(node: Mapping[str, Any]) -> Mapping[str, Any]:
    """Collapse Optional[X] (anyOf X|null) and single-entry allOf wrappers."""
    merged = {key: value for key, value in node.items() if key not in ("anyOf", "allOf")}

    if "allOf" in node and len(node["allOf"]) == 1:
        merged.update(node["allOf"][0])

    if "anyOf" in node:
        options = [option for option in node["anyOf"] if option.get("type") != "null"]
        if len(options) == 1:
            merged.update(_unwrap(options[0]))
        else:
            merged["anyOf"] = node["anyOf"]

    return merged


def _freeze(validators: Mapping[str, Any]) -> Tuple[Tuple[str, Any], ...]:
    return tuple(
        (key, tuple(value) if isinstance(value, list) else value)
        for key, value in sorted(validators.items())
    )
