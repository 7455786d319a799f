"""
Pydantic schemas for authentication request payloads.

These models define the strict request contracts for register, login and
token refresh. They carry credentials, so never log their values.
"""

from pydantic import EmailStr, Field

from storefront.validation.schema import RequestSchema


class RegisterRequest(RequestSchema):
    """
    Request to create a new user account.

    All fields are required.
    """
    name: str = Field(
        ...,
        description="Display name",
        min_length=2,
        examples=["Ada Lovelace"]
    )
    username: str = Field(
        ...,
        description="Unique handle used to log in",
        min_length=3,
        examples=["ada"]
    )
    email: EmailStr = Field(
        ...,
        description="Contact email, also accepted as a login identifier",
        examples=["ada@example.com"]
    )
    password: str = Field(
        ...,
        description="Plain-text password (hashed before storage)",
        min_length=6
    )


class LoginRequest(RequestSchema):
    """Request to log in with a username or email."""
    identifier: str = Field(
        ...,
        description="Username or email",
        min_length=3,
        examples=["ada", "ada@example.com"]
    )
    password: str = Field(..., description="Plain-text password", min_length=6)


class RefreshTokenRequest(RequestSchema):
    """Request to exchange a refresh token for a new access token."""
    refresh_token: str = Field(..., description="Refresh token issued at login")
