"""Authentication router for signup, login, token refresh and password reset."""

import logging

from fastapi import APIRouter, status

from warden_api.dependencies import AuthService, DBSession, SettingsDep
from warden_api.schemas import (
    ErrorResponse,
    LoginRequest,
    RefreshTokenRequest,
    ResetPasswordRequest,
    SignUpRequest,
    StatusResponse,
    TokenPairResponse,
)
from warden_auth import InvalidCredentialsError, TokenPair, UserNotFoundError
from warden_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _token_pair_response(pair: TokenPair, settings: Settings) -> TokenPairResponse:
    return TokenPairResponse(
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
        expires_in=int(settings.access_token_ttl.total_seconds()),
    )


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Username already taken"},
    },
)
async def sign_up(
    request: SignUpRequest,
    auth_service: AuthService,
    session: DBSession,
) -> StatusResponse:
    await auth_service.sign_up(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    await session.commit()
    return StatusResponse()


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> TokenPairResponse:
    """
    Authenticate with username and password.

    Unknown usernames and wrong passwords produce the same response.
    """
    try:
        pair = await auth_service.login(
            username=request.username,
            password=request.password,
        )
    except UserNotFoundError as e:
        raise InvalidCredentialsError from e

    return _token_pair_response(pair, settings)


@router.post(
    "/refresh-token",
    summary="Exchange a refresh token for a new token pair",
    responses={
        200: {"description": "Tokens rotated"},
        401: {
            "model": ErrorResponse,
            "description": "Expired, malformed or already used refresh token",
        },
    },
)
async def refresh_token(
    request: RefreshTokenRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> TokenPairResponse:
    """
    Rotate tokens. The presented refresh token can not be used again.
    """
    pair = await auth_service.refresh_token(request.refresh_token)
    return _token_pair_response(pair, settings)


@router.post(
    "/reset-password",
    summary="Request a password reset",
    responses={
        200: {"description": "Reset request published"},
        404: {"model": ErrorResponse, "description": "Email not registered"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    auth_service: AuthService,
) -> StatusResponse:
    await auth_service.reset_password(request.email)
    logger.debug("Password reset requested")
    return StatusResponse()
