"""
Tests for domain record shapes.

Tests cover:
- Document wrapper composition (id/timestamps around a plain record)
- camelCase wire form of records
- Minimal token payload and explicit identity context
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from storefront.schemas.records import (
    AuthenticatedUser,
    CartData,
    CartItemData,
    Document,
    OrderData,
    OrderItemData,
    ProductData,
    TokenPayload,
    UserData,
)


@pytest.fixture
def user():
    return UserData(name="Ada Lovelace", username="ada", email="ada@lovelace.dev")


class TestDocument:
    """Tests for Document[T]"""

    def test_wrap_keeps_record_separate(self, user, object_id):
        now = datetime(2025, 11, 5, 10, 0, tzinfo=timezone.utc)

        doc = Document[UserData].wrap(user, id=object_id, now=now)

        assert doc.id == object_id
        assert doc.data == user
        assert doc.created_at == doc.updated_at == now
        assert not hasattr(user, "created_at")

    def test_wrap_defaults_to_current_time(self, user, object_id):
        doc = Document[UserData].wrap(user, id=object_id)

        assert doc.created_at.tzinfo is not None

    def test_wire_form_uses_camel_case(self, user, object_id):
        doc = Document[UserData].wrap(user, id=object_id)
        data = doc.model_dump(by_alias=True)

        assert set(data) == {"id", "data", "createdAt", "updatedAt"}
        assert data["data"]["isActive"] is True
        assert data["data"]["role"] == "USER"

    def test_document_rejects_malformed_id(self, user):
        with pytest.raises(ValidationError):
            Document[UserData].wrap(user, id="abc")


class TestRecords:
    """Tests for plain data records"""

    def test_product_defaults(self, object_id):
        product = ProductData(
            name="Keyboard",
            description="Hot-swappable switches",
            price=49.99,
            category="electronics",
            stock=3,
            created_by=object_id,
        )

        assert product.images == []
        assert product.ratings == 0
        assert product.num_reviews == 0

    def test_product_rejects_negative_stock(self):
        with pytest.raises(ValidationError):
            ProductData(name="Keyboard", description="x", price=1, category="c", stock=-1)

    def test_records_accept_wire_names(self, object_id):
        cart = CartData.model_validate({
            "user": object_id,
            "items": [{"product": object_id, "quantity": 2, "price": 10.0}],
            "totalPrice": 20.0,
        })

        assert cart.items == [CartItemData(product=object_id, quantity=2, price=10.0)]
        assert cart.total_price == 20.0

    def test_order_embeds_shipping_address(self, object_id, valid_shipping_address):
        order = OrderData.model_validate({
            "user": object_id,
            "items": [{"product": object_id, "name": "Keyboard", "quantity": 1, "price": 49.99}],
            "shippingAddress": valid_shipping_address,
            "paymentMethod": "COD",
            "totalAmount": 49.99,
        })

        assert order.shipping_address.city == "London"
        assert order.order_status == "PENDING"
        assert order.payment_status == "PENDING"
        assert isinstance(order.items[0], OrderItemData)


class TestIdentity:
    """Tests for TokenPayload and AuthenticatedUser"""

    def test_token_payload_keeps_only_identity_claims(self):
        payload = TokenPayload.model_validate({
            "userId": "u-1",
            "role": "ADMIN",
            "exp": 1893456000,
            "email": "ada@lovelace.dev",
        })

        assert payload.model_dump(by_alias=True) == {"userId": "u-1", "role": "ADMIN"}

    def test_token_payload_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            TokenPayload.model_validate({"userId": "u-1", "role": "ROOT"})

    @pytest.mark.parametrize("role,is_admin", [("ADMIN", True), ("USER", False)])
    def test_authenticated_user_from_payload(self, role, is_admin):
        identity = AuthenticatedUser.from_token_payload(TokenPayload(user_id="u-1", role=role))

        assert identity == AuthenticatedUser(user_id="u-1", role=role)
        assert identity.is_admin is is_admin
