"""
Pydantic schemas for product catalogue payloads.

The update contract is not declared here: it is derived from
CreateProductRequest with every field optional (see schemas.registry).
"""

from typing import List

from pydantic import Field

from storefront.schemas.common import UrlString, WholeNumber
from storefront.validation.schema import RequestSchema


class CreateProductRequest(RequestSchema):
    """
    Request to create a catalogue product.

    Required: name, description, price, category, stock.
    Optional: discountPrice, brand, images.
    """
    name: str = Field(
        ...,
        description="Product name",
        min_length=2,
        examples=["Mechanical Keyboard"]
    )
    description: str = Field(
        ...,
        description="Long description shown on the product page",
        min_length=10
    )
    price: float = Field(
        ...,
        description="Unit price (must be positive)",
        gt=0,
        examples=[49.99]
    )
    discount_price: float = Field(
        None,
        description="Reduced unit price while a promotion runs"
    )
    category: str = Field(
        ...,
        description="Category slug or name",
        min_length=2,
        examples=["electronics"]
    )
    brand: str = Field(None, description="Brand name")
    stock: WholeNumber = Field(
        ...,
        description="Units available",
        ge=0,
        examples=[25]
    )
    images: List[UrlString] = Field(
        None,
        description="Image URLs, first one is the cover"
    )
