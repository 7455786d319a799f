"""
FastAPI dependencies for request validation.

validate_request() turns a registered schema into a dependency that reads
one input source (body, query string or path parameters), runs the
validation gate on it and hands the typed value to the route. Invalid input
ends the request with 422 and the full violation list.

Usage:
    @router.post("/products")
    async def create_product(
        product: Annotated[BaseModel, Depends(validate_request("createProduct"))]
    ):
        ...
"""

import json
import logging
from typing import Any, Awaitable, Callable

from fastapi import HTTPException, Request, status
from pydantic import BaseModel

from storefront.schemas.registry import registry
from storefront.validation.gate import InputSource, validate
from storefront.validation.registry import SchemaRegistry

logger = logging.getLogger(__name__)


def validate_request(
    schema_name: str,
    source: InputSource = InputSource.BODY,
    schemas: SchemaRegistry = registry,
) -> Callable[[Request], Awaitable[BaseModel]]:
    """
    Build a dependency validating `source` against the named schema.

    The schema is resolved here, when the route module is imported, so a
    misspelled name fails at startup instead of on the first request.

    Raises:
        SchemaNotFoundError: If `schema_name` is not registered
    """
    schema = schemas.get(schema_name)
    source = InputSource(source)

    async def dependency(request: Request) -> BaseModel:
        raw = await _read_source(request, source)
        result = validate(schema, raw, source)

        if not result.success:
            logger.warning(
                f"Validation failed on {request.method} {request.url.path}: "
                f"schema={schema.name} source={source.value} "
                f"fields={[violation.field for violation in result.violations]}"
            )
            raise HTTPException(
                status_code=422,
                detail={
                    "error": "validation_error",
                    "details": [violation.to_dict() for violation in result.violations]
                }
            )

        logger.debug(f"Validated {source.value} against schema={schema.name}")
        return result.value

    return dependency


async def _read_source(request: Request, source: InputSource) -> Any:
    if source is InputSource.QUERY:
        return dict(request.query_params)

    if source is InputSource.PARAMS:
        return dict(request.path_params)

    body = await request.body()
    if not body.strip():
        return {}

    try:
        return json.loads(body, parse_constant=_reject_constant)
    except ValueError:
        logger.warning(f"Invalid JSON body on {request.method} {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_json", "details": "Request body is not valid JSON"}
        )


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Unsupported JSON constant: {token}")
