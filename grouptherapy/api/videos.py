"""
Videos API endpoints.

Public reads; writes require admin credentials.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.api.deps import get_storage, require_admin

router = APIRouter(prefix="/videos", tags=["videos"])


@router.get("/", response_model=List[schemas.Video])
def list_videos(storage: Storage = Depends(get_storage)):
    return storage.get_all_videos()


@router.get("/{video_id}", response_model=schemas.Video)
def get_video(
    video_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
):
    video = storage.get_video_by_id(video_id)
    if video is None:
        raise HTTPException(status_code=404, detail="Video not found")
    return video


@router.post("/", response_model=schemas.Video, status_code=status.HTTP_201_CREATED)
def create_video(
    payload: schemas.VideoCreate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    return storage.create_video(payload)


@router.patch("/{video_id}", response_model=schemas.Video)
def update_video(
    video_id: uuid.UUID,
    payload: schemas.VideoUpdate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    video = storage.update_video(video_id, payload)
    if video is None:
        raise HTTPException(status_code=404, detail="Video not found")
    return video


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_video(
    video_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    if not storage.delete_video(video_id):
        raise HTTPException(status_code=404, detail="Video not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
