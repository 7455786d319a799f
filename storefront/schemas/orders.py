"""
Pydantic schemas for order placement payloads.

Order items and prices are taken from the user's cart server-side, so the
request only carries where to ship.
"""

from typing import Literal

from pydantic import Field

from storefront.validation.schema import RequestSchema

# Order lifecycle (set by the server, never by the client)
OrderStatus = Literal["PENDING", "PROCESSING", "SHIPPED", "DELIVERED", "CANCELLED"]


class ShippingAddress(RequestSchema):
    """Delivery address embedded in an order."""
    full_name: str = Field(..., description="Recipient name")
    address: str = Field(..., description="Street address")
    city: str = Field(..., description="City")
    postal_code: str = Field(..., description="Postal / ZIP code")
    country: str = Field(..., description="Country")
    phone: str = Field(..., description="Contact phone for the courier")


class CreateOrderRequest(RequestSchema):
    """Request to place an order from the current cart."""
    shipping_address: ShippingAddress = Field(..., description="Where to deliver")
