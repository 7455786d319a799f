"""
Default schema registry for the storefront request contracts.

Every request payload, query string and path-parameter shape the API accepts
is registered here once, at import time. Names are the identifiers routes
pass to validate_request().
"""

from storefront.schemas.auth import LoginRequest, RefreshTokenRequest, RegisterRequest
from storefront.schemas.cart import CartItemRequest
from storefront.schemas.common import PaginationQuery, ProductIdParam
from storefront.schemas.orders import CreateOrderRequest
from storefront.schemas.payments import CreatePaymentRequest
from storefront.schemas.products import CreateProductRequest
from storefront.schemas.reviews import CreateReviewRequest
from storefront.schemas.users import UpdateUserRequest
from storefront.validation.registry import SchemaRegistry


def build_registry() -> SchemaRegistry:
    """Create a registry holding every storefront schema."""
    schemas = SchemaRegistry()

    # Auth
    schemas.define("register", RegisterRequest)
    schemas.define("login", LoginRequest)
    schemas.define("refreshToken", RefreshTokenRequest)

    # Users
    schemas.define("updateUser", UpdateUserRequest)

    # Products
    create_product = schemas.define("createProduct", CreateProductRequest)
    schemas.partial(create_product, "updateProduct", description="Request to update a catalogue product")
    schemas.define("productIdParam", ProductIdParam)

    # Reviews
    schemas.define("createReview", CreateReviewRequest)

    # Cart
    schemas.define("addToCart", CartItemRequest, description="Request to add a product to the cart")
    schemas.define("updateCart", CartItemRequest, description="Request to change a cart item's quantity")

    # Orders & payments
    schemas.define("createOrder", CreateOrderRequest)
    schemas.define("createPayment", CreatePaymentRequest)

    # Query strings
    schemas.define("pagination", PaginationQuery)

    return schemas


registry = build_registry()
