"""
Tests for the validate_request dependency.

A throwaway app mounts one route per input source so the dependency is
exercised exactly as product/cart routes would use it.
"""

from typing import Annotated

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from storefront.dependencies import validate_request
from storefront.schemas.common import PaginationQuery, ProductIdParam
from storefront.schemas.products import CreateProductRequest
from storefront.validation.errors import SchemaNotFoundError
from storefront.validation.gate import InputSource

app = FastAPI()


@app.post("/products")
async def create_product(
    product: Annotated[CreateProductRequest, Depends(validate_request("createProduct"))]
):
    return {"received": product.model_dump(by_alias=True)}


@app.get("/products/{productId}")
async def get_product(
    params: Annotated[ProductIdParam, Depends(validate_request("productIdParam", InputSource.PARAMS))]
):
    return {"productId": params.product_id}


@app.get("/products")
async def list_products(
    pagination: Annotated[PaginationQuery, Depends(validate_request("pagination", InputSource.QUERY))]
):
    return {"page": pagination.page, "limit": pagination.limit}


client = TestClient(app)


class TestBodyValidation:
    """Tests for body-sourced validation"""

    def test_valid_body_reaches_route_without_unknown_keys(self, valid_product):
        response = client.post("/products", json={**valid_product, "ownerId": "x"})

        assert response.status_code == 200
        received = response.json()["received"]
        assert "ownerId" not in received
        assert received["name"] == valid_product["name"]

    def test_invalid_body_returns_422_with_all_violations(self):
        response = client.post(
            "/products",
            json={"name": "a", "description": "short", "price": -1, "stock": 0},
        )

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["error"] == "validation_error"
        assert [item["field"] for item in detail["details"]] == [
            "name",
            "description",
            "price",
            "category",
        ]

    def test_empty_body_reports_required_fields(self):
        response = client.post("/products")

        assert response.status_code == 422
        messages = {item["message"] for item in response.json()["detail"]["details"]}
        assert messages == {"required"}

    def test_malformed_json_returns_400(self):
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "invalid_json"

    @pytest.mark.parametrize("token", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_number_tokens_return_400(self, token):
        body = (
            '{"name": "Keyboard", "description": "A mechanical keyboard", '
            '"category": "electronics", "stock": 1, "price": ' + token + "}"
        )

        response = client.post(
            "/products",
            content=body.encode(),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "invalid_json"

    def test_integral_float_stock_reaches_route_as_int(self, valid_product):
        response = client.post("/products", json={**valid_product, "stock": 5.0})

        assert response.status_code == 200
        assert response.json()["received"]["stock"] == 5


class TestParamsValidation:
    """Tests for path-parameter validation"""

    def test_valid_product_id(self, object_id):
        response = client.get(f"/products/{object_id}")

        assert response.status_code == 200
        assert response.json() == {"productId": object_id}

    def test_malformed_product_id(self):
        response = client.get("/products/abc")

        assert response.status_code == 422
        assert response.json()["detail"]["details"][0]["field"] == "productId"


class TestQueryValidation:
    """Tests for query-string validation"""

    def test_defaults(self):
        response = client.get("/products")

        assert response.json() == {"page": "1", "limit": "10"}

    def test_values_passed_through(self):
        response = client.get("/products", params={"page": "4", "limit": "20", "sort": "price"})

        assert response.json() == {"page": "4", "limit": "20"}


class TestDependencyFactory:
    """Tests for validate_request() itself"""

    def test_unknown_schema_fails_when_building_dependency(self):
        with pytest.raises(SchemaNotFoundError):
            validate_request("checkout")
