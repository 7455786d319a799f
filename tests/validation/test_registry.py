"""
Tests for the schema registry.

Tests cover:
- define / register / lookup
- Conflict on redefinition
- NotFound on unknown names
- partial derivation by name
"""

import pytest
from pydantic import Field

from storefront.schemas.cart import CartItemRequest
from storefront.schemas.products import CreateProductRequest
from storefront.validation.errors import (
    SchemaConflictError,
    SchemaNotFoundError,
    SchemaRegistryError,
)
from storefront.validation.registry import SchemaRegistry
from storefront.validation.schema import define


@pytest.fixture
def schemas():
    """Empty registry per test."""
    return SchemaRegistry()


class TestRegistryLookup:
    """Tests for define() and get()"""

    def test_define_and_get(self, schemas):
        defined = schemas.define("addToCart", CartItemRequest)

        assert schemas.get("addToCart") is defined
        assert "addToCart" in schemas
        assert len(schemas) == 1

    def test_get_unknown_raises_not_found(self, schemas):
        with pytest.raises(SchemaNotFoundError) as exc_info:
            schemas.get("checkout")

        assert exc_info.value.name == "checkout"
        assert isinstance(exc_info.value, LookupError)
        assert isinstance(exc_info.value, SchemaRegistryError)

    def test_names_are_sorted_and_iteration_keeps_registration_order(self, schemas):
        schemas.define("updateCart", CartItemRequest)
        schemas.define("addToCart", CartItemRequest)

        assert schemas.names() == ["addToCart", "updateCart"]
        assert [schema.name for schema in schemas] == ["updateCart", "addToCart"]

    def test_define_from_field_definitions(self, schemas):
        schema = schemas.define("refreshToken", {"refresh_token": (str, Field(...))})

        assert schema.field_names == ("refreshToken",)


class TestRegistryConflicts:
    """Tests for duplicate names"""

    def test_redefine_raises_conflict(self, schemas):
        schemas.define("addToCart", CartItemRequest)

        with pytest.raises(SchemaConflictError) as exc_info:
            schemas.define("addToCart", CreateProductRequest)

        assert exc_info.value.name == "addToCart"
        # The original schema is untouched
        assert schemas.get("addToCart").model is CartItemRequest

    def test_register_prebuilt_schema_conflict(self, schemas):
        schemas.register(define("addToCart", CartItemRequest))

        with pytest.raises(SchemaConflictError):
            schemas.register(define("addToCart", CartItemRequest))

    def test_partial_under_taken_name_raises_conflict(self, schemas):
        schemas.define("createProduct", CreateProductRequest)

        with pytest.raises(SchemaConflictError):
            schemas.partial("createProduct", "createProduct")


class TestRegistryPartial:
    """Tests for partial()"""

    def test_partial_by_name(self, schemas):
        schemas.define("createProduct", CreateProductRequest)

        derived = schemas.partial("createProduct", "updateProduct")

        assert schemas.get("updateProduct") is derived
        assert all(not constraint.required for constraint in derived.fields)

    def test_partial_of_unknown_base_raises_not_found(self, schemas):
        with pytest.raises(SchemaNotFoundError):
            schemas.partial("createProduct", "updateProduct")
