"""
Schema catalogue API endpoints.

Exposes the registered request schemas so clients can discover the wire
contracts and dry-run payloads against them:
- GET  /schemas                  - paginated list of schema names
- GET  /schemas/{name}           - field constraints of one schema
- POST /schemas/{name}/validate  - run the validation gate without side effects

All endpoints are public and read-only.
"""

import logging
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status

from storefront.config import settings
from storefront.dependencies import validate_request
from storefront.schemas.catalog import (
    FieldConstraintResponse,
    SchemaDetailResponse,
    SchemaListResponse,
    SchemaSummary,
    ValidationCheckResponse,
    ViolationResponse,
)
from storefront.schemas.common import PaginationQuery
from storefront.schemas.registry import registry
from storefront.utils.constants import DEFAULT_LIMIT, DEFAULT_PAGE
from storefront.validation.errors import SchemaNotFoundError
from storefront.validation.gate import InputSource, validate
from storefront.validation.schema import FieldConstraint, Schema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schemas", tags=["schemas"])


def _positive_int(value: Optional[str], fallback: str) -> int:
    """Parse a pagination value; anything that isn't a positive integer falls back."""
    try:
        number = int(value) if value is not None else 0
    except ValueError:
        number = 0
    return number if number > 0 else int(fallback)


def _constraint_response(constraint: FieldConstraint) -> FieldConstraintResponse:
    return FieldConstraintResponse(
        name=constraint.name,
        type=constraint.type,
        required=constraint.required,
        default=constraint.default if constraint.has_default else None,
        validators=constraint.validator_map(),
        items=_constraint_response(constraint.items) if constraint.items is not None else None,
        fields=[_constraint_response(child) for child in constraint.fields],
    )


def _get_schema_or_404(name: str) -> Schema:
    try:
        return registry.get(name)
    except SchemaNotFoundError as e:
        logger.warning(f"Unknown schema requested: {name}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "schema_not_found", "details": str(e)}
        )


@router.get(
    "",
    response_model=SchemaListResponse,
    status_code=status.HTTP_200_OK,
    summary="List registered schemas",
    description="""
    List the names of all registered request schemas, sorted by name.

    Pagination:
    - `page` and `limit` are validated with the `pagination` schema
    - Values that are not positive integers fall back to page 1 / limit 10
    - `limit` is capped by the MAX_PAGE_SIZE setting
    """
)
async def list_schemas(
    pagination: Annotated[PaginationQuery, Depends(validate_request("pagination", InputSource.QUERY))]
) -> SchemaListResponse:
    """
    List registered schemas, one page at a time.
    """
    page = _positive_int(pagination.page, DEFAULT_PAGE)
    limit = min(_positive_int(pagination.limit, DEFAULT_LIMIT), settings.MAX_PAGE_SIZE)

    names = registry.names()
    start = (page - 1) * limit
    selected = [registry.get(name) for name in names[start:start + limit]]

    logger.info(f"Listing schemas page={page} limit={limit} ({len(selected)} of {len(names)})")

    return SchemaListResponse(
        schemas=[
            SchemaSummary(
                name=schema.name,
                description=schema.description,
                field_count=len(schema.field_names),
            )
            for schema in selected
        ],
        count=len(selected),
        total=len(names),
        page=page,
        limit=limit,
    )


@router.get(
    "/{name}",
    response_model=SchemaDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get schema field constraints",
    description="""
    Describe one schema: every field in declaration order with its type,
    required flag, default and declared validators. Nested objects and
    array elements are described recursively.
    """
)
async def get_schema(
    name: str = Path(..., description="Registry name, e.g. 'createProduct'")
) -> SchemaDetailResponse:
    """
    Get one schema's field constraints.
    """
    schema = _get_schema_or_404(name)

    return SchemaDetailResponse(
        name=schema.name,
        description=schema.description,
        fields=[_constraint_response(constraint) for constraint in schema.fields],
    )


@router.post(
    "/{name}/validate",
    response_model=ValidationCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Dry-run a payload against a schema",
    description="""
    Validate the JSON request body against a schema and report the outcome.

    - `source=body` checks values by declared type (no coercion)
    - `source=query` / `source=params` coerce string values first, as the
      query string and path parameters always arrive as strings

    Invalid payloads still return 200: the violations ARE the response.
    An empty body is treated as an empty object.
    """
)
async def validate_payload(
    name: str = Path(..., description="Registry name, e.g. 'createProduct'"),
    source: InputSource = Query(InputSource.BODY, description="Coercion policy to apply"),
    payload: Annotated[Any, Body()] = None,
) -> ValidationCheckResponse:
    """
    Run the validation gate over the request body.
    """
    schema = _get_schema_or_404(name)
    result = validate(schema, {} if payload is None else payload, source)

    logger.info(
        f"Dry-run schema={schema.name} source={source.value} "
        f"valid={result.success} violations={len(result.violations)}"
    )

    outcome = result.to_dict()
    return ValidationCheckResponse(
        schema_name=schema.name,
        source=source.value,
        valid=result.success,
        data=outcome["data"],
        violations=[ViolationResponse(**violation) for violation in outcome["violations"]],
    )
