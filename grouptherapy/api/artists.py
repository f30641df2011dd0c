"""
Artists API endpoints.

Public reads; writes require admin credentials.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.api.deps import get_storage, require_admin

router = APIRouter(prefix="/artists", tags=["artists"])


@router.get("/", response_model=List[schemas.Artist])
def list_artists(storage: Storage = Depends(get_storage)):
    return storage.get_all_artists()


@router.get("/{artist_id}", response_model=schemas.Artist)
def get_artist(
    artist_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
):
    artist = storage.get_artist_by_id(artist_id)
    if artist is None:
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist


@router.post("/", response_model=schemas.Artist, status_code=status.HTTP_201_CREATED)
def create_artist(
    payload: schemas.ArtistCreate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    return storage.create_artist(payload)


@router.patch("/{artist_id}", response_model=schemas.Artist)
def update_artist(
    artist_id: uuid.UUID,
    payload: schemas.ArtistUpdate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    artist = storage.update_artist(artist_id, payload)
    if artist is None:
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist


@router.delete("/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_artist(
    artist_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    if not storage.delete_artist(artist_id):
        raise HTTPException(status_code=404, detail="Artist not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
