"""
Playlists API endpoints.

Public reads; writes require admin credentials.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.api.deps import get_storage, require_admin

router = APIRouter(prefix="/playlists", tags=["playlists"])


@router.get("/", response_model=List[schemas.Playlist])
def list_playlists(storage: Storage = Depends(get_storage)):
    return storage.get_all_playlists()


@router.get("/{playlist_id}", response_model=schemas.Playlist)
def get_playlist(
    playlist_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
):
    playlist = storage.get_playlist_by_id(playlist_id)
    if playlist is None:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return playlist


@router.post("/", response_model=schemas.Playlist, status_code=status.HTTP_201_CREATED)
def create_playlist(
    payload: schemas.PlaylistCreate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    return storage.create_playlist(payload)


@router.patch("/{playlist_id}", response_model=schemas.Playlist)
def update_playlist(
    playlist_id: uuid.UUID,
    payload: schemas.PlaylistUpdate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    playlist = storage.update_playlist(playlist_id, payload)
    if playlist is None:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return playlist


@router.delete("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_playlist(
    playlist_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    if not storage.delete_playlist(playlist_id):
        raise HTTPException(status_code=404, detail="Playlist not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
