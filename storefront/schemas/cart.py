"""
Pydantic schemas for shopping cart payloads.

Adding an item and changing its quantity share one contract.
"""

from pydantic import Field

from storefront.schemas.common import ObjectId, WholeNumber
from storefront.validation.schema import RequestSchema


class CartItemRequest(RequestSchema):
    """Request to add a product to the cart or set its quantity."""
    product_id: ObjectId = Field(..., description="Product id")
    quantity: WholeNumber = Field(..., description="Number of units", ge=1, examples=[1, 3])
