from warden_api.schemas.auth import (
    LoginRequest,
    RefreshTokenRequest,
    ResetPasswordRequest,
    SignUpRequest,
    TokenPairResponse,
)
from warden_api.schemas.common import ErrorResponse, StatusResponse
from warden_api.schemas.users import UserPatchRequest, UserResponse

__all__ = [
    "ErrorResponse",
    "LoginRequest",
    "RefreshTokenRequest",
    "ResetPasswordRequest",
    "SignUpRequest",
    "StatusResponse",
    "TokenPairResponse",
    "UserPatchRequest",
    "UserResponse",
]
