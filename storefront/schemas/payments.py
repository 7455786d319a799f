"""
Pydantic schemas for payment payloads.
"""

from typing import Literal

from pydantic import Field

from storefront.schemas.common import ObjectId
from storefront.validation.schema import RequestSchema

# Supported payment providers (COD = cash on delivery)
PaymentMethod = Literal["RAZORPAY", "STRIPE", "COD"]

# Payment state as reported by the provider
PaymentStatus = Literal["PENDING", "COMPLETED", "FAILED", "REFUNDED"]


class CreatePaymentRequest(RequestSchema):
    """Request to start paying for an order."""
    order_id: ObjectId = Field(..., description="Order being paid")
    payment_method: PaymentMethod = Field(
        ...,
        description="Payment provider",
        examples=["STRIPE", "COD"]
    )
