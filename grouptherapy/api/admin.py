"""
Admin API endpoints.

Credential check for the admin panel and the signed-in admin's profile.
"""
from fastapi import APIRouter, Depends, Request

from grouptherapy.db import schemas
from grouptherapy.api.deps import authenticate_or_raise, get_admin_auth_service, require_admin
from grouptherapy.services.admin_auth import AdminAuthService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/login", response_model=schemas.AdminUserPublic)
def admin_login(
    payload: schemas.AdminLoginRequest,
    request: Request,
    auth: AdminAuthService = Depends(get_admin_auth_service),
):
    return authenticate_or_raise(auth, payload.username, payload.password, request)


@router.get("/me", response_model=schemas.AdminUserPublic)
def admin_me(admin: schemas.AdminUser = Depends(require_admin)):
    return admin
