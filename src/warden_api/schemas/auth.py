"""Authentication schemas for request/response models."""

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from warden_api.schemas.common import CamelModel


class SignUpRequest(CamelModel):
    """Request schema for user registration."""

    username: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "pw123",
            },
        },
    )


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RefreshTokenRequest(CamelModel):
    refresh_token: str = Field(..., min_length=1)


class ResetPasswordRequest(CamelModel):
    email: str = Field(..., min_length=3, max_length=255)


class TokenPairResponse(CamelModel):
    """Response schema for an issued token pair."""

    access_token: str
    refresh_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
