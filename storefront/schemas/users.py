"""
Pydantic schemas for user administration payloads.
"""

from typing import Literal

from pydantic import Field

from storefront.validation.schema import RequestSchema

# User role enum (JWT payload carries the same values)
UserRole = Literal["USER", "ADMIN"]


class UpdateUserRequest(RequestSchema):
    """
    Request to update a user.

    All fields are optional - only provided fields are updated. An absent
    field reads as None; an explicit null is rejected like any other
    wrong type.
    """
    name: str = Field(None, description="Updated display name")
    username: str = Field(None, description="Updated handle")
    role: UserRole = Field(None, description="Updated role")
    is_active: bool = Field(
        None,
        description="Set to false to deactivate the account without deleting it"
    )
