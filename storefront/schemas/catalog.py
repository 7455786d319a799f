"""
Pydantic schemas for the schema catalogue endpoints.

These models describe registered request schemas (names, field constraints)
and the outcome of a dry-run validation.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from storefront.validation.schema import FieldType


class FieldConstraintResponse(BaseModel):
    """Declared shape of one field."""
    name: str = Field(..., description="Wire name of the field")
    type: FieldType = Field(..., description="Primitive type")
    required: bool = Field(..., description="True if the field must be present")
    default: Optional[Any] = Field(None, description="Default applied when absent (if any)")
    validators: Dict[str, Any] = Field(
        default_factory=dict,
        description="Declared checks, e.g. {'min_length': 2} or {'format': 'email'}"
    )
    items: Optional["FieldConstraintResponse"] = Field(
        None,
        description="Element constraint for array fields"
    )
    fields: List["FieldConstraintResponse"] = Field(
        default_factory=list,
        description="Child constraints for nested-object fields"
    )


class SchemaSummary(BaseModel):
    """Short description of a registered schema."""
    name: str = Field(..., description="Registry name", examples=["createProduct"])
    description: Optional[str] = Field(None, description="One-line description")
    field_count: int = Field(..., description="Number of top-level fields")


class SchemaListResponse(BaseModel):
    """
    Response for GET /schemas.
    """
    schemas: List[SchemaSummary] = Field(..., description="Schemas on this page")
    count: int = Field(..., description="Number of schemas returned")
    total: int = Field(..., description="Number of registered schemas")
    page: int = Field(..., description="1-based page number served")
    limit: int = Field(..., description="Page size served")


class SchemaDetailResponse(BaseModel):
    """
    Response for GET /schemas/{name}.
    """
    name: str = Field(..., description="Registry name")
    description: Optional[str] = Field(None, description="One-line description")
    fields: List[FieldConstraintResponse] = Field(..., description="Fields in declaration order")


class ViolationResponse(BaseModel):
    """A single constraint failure."""
    field: str = Field(..., description="Dotted path of wire names", examples=["shippingAddress.city"])
    message: str = Field(..., description="Human-readable message", examples=["required"])


class ValidationCheckResponse(BaseModel):
    """
    Response for POST /schemas/{name}/validate.

    Exactly one of `data` / `violations` is populated.
    """
    schema_name: str = Field(..., description="Schema applied")
    source: Literal["body", "query", "params"] = Field(..., description="Coercion policy applied")
    valid: bool = Field(..., description="True if the input satisfied every constraint")
    data: Optional[Dict[str, Any]] = Field(
        None,
        description="Typed value with exactly the schema's fields (defaults applied)"
    )
    violations: List[ViolationResponse] = Field(
        default_factory=list,
        description="Every violation found, in field declaration order"
    )
