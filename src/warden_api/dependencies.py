"""FastAPI dependency injection for the Warden API.

Provides dependencies for:
- Database sessions
- The Redis client shared by the revocation tracker and reset channel
- Service instances
- Authentication (current user id from the access token)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from redis import asyncio as aioredis
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from warden_api.config import get_api_settings
from warden_auth import PasswordHashingService, TokenMalformedError, TokenService
from warden_auth.revocation import RedisRevocationTracker, RevocationTracker
from warden_config.settings import Settings
from warden_identity.application.services import (
    AuthenticationService,
    UserProfileService,
)
from warden_identity.infrastructure.notifications import (
    PasswordResetNotifier,
    RedisPasswordResetPublisher,
)
from warden_identity.infrastructure.persistence.sqlalchemy import (
    IdentityBase,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (one per database URL)
# -----------------------------------------------------------------------------


@lru_cache
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for ``database_url``.

    One engine per URL; it manages the connection pool and is reused
    across all requests.
    """
    # Ensure data directory exists for SQLite
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(settings: SettingsDep) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Uncommitted work is rolled back when the session closes, so routers
    only commit after the service call succeeded.
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(settings: Settings) -> None:
    """Create all identity tables (idempotent)."""
    engine = get_engine(settings.database_url)
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    logger.info("Database schema is up to date")


# -----------------------------------------------------------------------------
# Redis (revocation cache and reset channel)
# -----------------------------------------------------------------------------


@lru_cache
def _create_redis_client(redis_url: str, socket_timeout: float) -> aioredis.Redis:
    return aioredis.from_url(
        redis_url,
        decode_responses=True,
        socket_timeout=socket_timeout,
        socket_connect_timeout=socket_timeout,
    )


def get_redis_client(settings: SettingsDep) -> aioredis.Redis:
    """Get the shared Redis client; connections are pooled and opened lazily."""
    return _create_redis_client(settings.redis_url, settings.redis_socket_timeout)


def get_revocation_tracker(
    settings: SettingsDep,
    client: aioredis.Redis = Depends(get_redis_client),
) -> RevocationTracker:
    return RedisRevocationTracker(client, key_prefix=settings.revocation_key_prefix)


def get_reset_notifier(
    settings: SettingsDep,
    client: aioredis.Redis = Depends(get_redis_client),
) -> PasswordResetNotifier:
    return RedisPasswordResetPublisher(client, queue_name=settings.password_reset_queue)


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_token_service(settings: SettingsDep) -> TokenService:
    """Get token service configured with API settings."""
    return TokenService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_ttl=settings.access_token_ttl,
        refresh_token_ttl=settings.refresh_token_ttl,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_authentication_service(  # noqa: PLR0913
    session: DBSession,
    settings: SettingsDep,
    token_service: TokenService = Depends(get_token_service),
    password_service: PasswordHashingService = Depends(get_password_service),
    revocation_tracker: RevocationTracker = Depends(get_revocation_tracker),
    reset_notifier: PasswordResetNotifier = Depends(get_reset_notifier),
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        token_service=token_service,
        revocation_tracker=revocation_tracker,
        reset_notifier=reset_notifier,
        default_timeout=settings.auth_operation_timeout_seconds,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_user_profile_service(
    session: DBSession,
    settings: SettingsDep,
) -> UserProfileService:
    return UserProfileService(
        user_repository=UserRepositorySQLAlchemy(session),
        default_timeout=settings.auth_operation_timeout_seconds,
    )


ProfileService = Annotated[UserProfileService, Depends(get_user_profile_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user_id(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UUID:
    """
    FastAPI dependency returning the user id of a valid access token.

    Token errors propagate to the exception handlers (401).
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = auth_service.authenticate(credentials.credentials)
    try:
        return UUID(claims.subject)
    except ValueError as e:
        msg = "Subject claim is not a valid user id"
        raise TokenMalformedError(msg) from e


CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
