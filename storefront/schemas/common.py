"""
Shared field types and query/path schemas.

- ObjectId: 24-hex-digit document id used by every *Id field
- UrlString: string that must parse as an absolute URL (kept as str)
- WholeNumber: integer that also accepts an integral JSON number such as 2.0
- PaginationQuery / ProductIdParam: query-string and path-parameter schemas
"""

from typing import Annotated, Any

from pydantic import AfterValidator, AnyUrl, BeforeValidator, Field, TypeAdapter, ValidationError, WithJsonSchema
from pydantic_core import PydanticCustomError

from storefront.utils.constants import DEFAULT_LIMIT, DEFAULT_PAGE, OBJECT_ID_PATTERN
from storefront.validation.schema import RequestSchema

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def validate_url(value: str) -> str:
    """Check that `value` parses as an absolute URL; return it unchanged."""
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_format", "Invalid url") from None
    return value


def integral_float_to_int(value: Any) -> Any:
    """
    Turn a float with no fractional part into an int.

    JSON has a single number type, so `2.0` on the wire is the integer 2.
    Anything else is passed through for the int check to judge.
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


ObjectId = Annotated[
    str,
    Field(pattern=OBJECT_ID_PATTERN, description="24-hex-digit document id"),
]

UrlString = Annotated[
    str,
    AfterValidator(validate_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]

WholeNumber = Annotated[int, BeforeValidator(integral_float_to_int)]


class PaginationQuery(RequestSchema):
    """
    Pagination query string (?page=&limit=).

    Values stay strings; handlers convert them when slicing.
    """
    page: str = Field(
        DEFAULT_PAGE,
        description="1-based page number",
        examples=["1", "2"]
    )
    limit: str = Field(
        DEFAULT_LIMIT,
        description="Page size",
        examples=["10", "50"]
    )


class ProductIdParam(RequestSchema):
    """Path parameters for /products/{productId} routes."""
    product_id: ObjectId = Field(
        ...,
        description="Product document id",
        examples=["507f1f77bcf86cd799439011"]
    )
