"""
Releases API endpoints.

Public reads; writes require admin credentials.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.api.deps import get_storage, require_admin

router = APIRouter(prefix="/releases", tags=["releases"])


@router.get("/", response_model=List[schemas.Release])
def list_releases(storage: Storage = Depends(get_storage)):
    return storage.get_all_releases()


@router.get("/{release_id}", response_model=schemas.Release)
def get_release(
    release_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
):
    release = storage.get_release_by_id(release_id)
    if release is None:
        raise HTTPException(status_code=404, detail="Release not found")
    return release


@router.post("/", response_model=schemas.Release, status_code=status.HTTP_201_CREATED)
def create_release(
    payload: schemas.ReleaseCreate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    return storage.create_release(payload)


@router.patch("/{release_id}", response_model=schemas.Release)
def update_release(
    release_id: uuid.UUID,
    payload: schemas.ReleaseUpdate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    release = storage.update_release(release_id, payload)
    if release is None:
        raise HTTPException(status_code=404, detail="Release not found")
    return release


@router.delete("/{release_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_release(
    release_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    if not storage.delete_release(release_id):
        raise HTTPException(status_code=404, detail="Release not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
