"""
API dependency helpers.

Provides the process-wide storage and admin authentication for routes.
Tests replace `get_storage` through `app.dependency_overrides`.
"""
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from grouptherapy.db import schemas
from grouptherapy.db.storage import DatabaseStorage, Storage
from grouptherapy.services.admin_auth import (
    AccountLockedError,
    AdminAuthService,
    InvalidCredentialsError,
)

_basic = HTTPBasic(realm="grouptherapy-admin")


@lru_cache(maxsize=1)
def _default_storage() -> DatabaseStorage:
    return DatabaseStorage()


def get_storage() -> Storage:
    """Dependency returning the shared DatabaseStorage built from the environment."""
    return _default_storage()


def get_admin_auth_service(storage: Storage = Depends(get_storage)) -> AdminAuthService:
    return AdminAuthService(storage)


def client_address(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()[: schemas.IP_ADDRESS_MAX_LENGTH] or None
    return request.client.host if request.client else None


def authenticate_or_raise(
    auth: AdminAuthService,
    username: str,
    password: str,
    request: Request,
    record_success: bool = True,
) -> schemas.AdminUser:
    """Run admin sign-in and translate failures into HTTP errors."""
    try:
        return auth.authenticate(
            username,
            password,
            ip_address=client_address(request),
            user_agent=request.headers.get("user-agent"),
            record_success=record_success,
        )
    except AccountLockedError as e:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many failed sign-in attempts. Try again later.",
            headers={"Retry-After": str(e.retry_after_minutes * 60)},
        )
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Basic"},
        )


def require_admin(
    request: Request,
    credentials: HTTPBasicCredentials = Depends(_basic),
    auth: AdminAuthService = Depends(get_admin_auth_service),
) -> schemas.AdminUser:
    return authenticate_or_raise(
        auth, credentials.username, credentials.password, request, record_success=False
    )
