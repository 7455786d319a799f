"""
Pytest configuration for storefront tests.

Sets up test environment and shared fixtures.
"""
import os
import pytest

# Disable config validation during tests
# This allows tests to run without a .env file
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("MAX_PAGE_SIZE", "100")


VALID_OBJECT_ID = "507f1f77bcf86cd799439011"


@pytest.fixture
def object_id():
    """A well-formed 24-hex-digit document id."""
    return VALID_OBJECT_ID


@pytest.fixture
def valid_product():
    """A createProduct body that satisfies every constraint."""
    return {
        "name": "Mechanical Keyboard",
        "description": "Hot-swappable switches, aluminium case",
        "price": 49.99,
        "discountPrice": 44.99,
        "category": "electronics",
        "brand": "Keychron",
        "stock": 25,
        "images": ["https://cdn.shop.io/keyboard.png"],
    }


@pytest.fixture
def valid_shipping_address():
    """A complete shipping address."""
    return {
        "fullName": "Ada Lovelace",
        "address": "12 St James's Square",
        "city": "London",
        "postalCode": "SW1Y 4JH",
        "country": "UK",
        "phone": "+44 20 7946 0000",
    }
