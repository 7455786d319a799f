"""
Pydantic schemas for product review payloads.
"""

from pydantic import Field

from storefront.schemas.common import ObjectId
from storefront.validation.schema import RequestSchema


class CreateReviewRequest(RequestSchema):
    """Request to review a product (one review per user and product)."""
    product_id: ObjectId = Field(..., description="Reviewed product id")
    rating: float = Field(..., description="Star rating", ge=1, le=5, examples=[4, 4.5])
    comment: str = Field(..., description="Review text", min_length=3)
