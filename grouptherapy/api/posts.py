"""
Blog posts API endpoints.

Public reads; writes require admin credentials.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.api.deps import get_storage, require_admin

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=List[schemas.Post])
def list_posts(storage: Storage = Depends(get_storage)):
    return storage.get_all_posts()


@router.get("/{post_id}", response_model=schemas.Post)
def get_post(
    post_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
):
    post = storage.get_post_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.post("/", response_model=schemas.Post, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: schemas.PostCreate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    return storage.create_post(payload)


@router.patch("/{post_id}", response_model=schemas.Post)
def update_post(
    post_id: uuid.UUID,
    payload: schemas.PostUpdate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    post = storage.update_post(post_id, payload)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    if not storage.delete_post(post_id):
        raise HTTPException(status_code=404, detail="Post not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
