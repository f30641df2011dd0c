"""
Radio shows API endpoints.

Public reads; writes require admin credentials.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.api.deps import get_storage, require_admin

router = APIRouter(prefix="/radio-shows", tags=["radio-shows"])


@router.get("/", response_model=List[schemas.RadioShow])
def list_radio_shows(storage: Storage = Depends(get_storage)):
    return storage.get_all_radio_shows()


@router.get("/{radio_show_id}", response_model=schemas.RadioShow)
def get_radio_show(
    radio_show_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
):
    radio_show = storage.get_radio_show_by_id(radio_show_id)
    if radio_show is None:
        raise HTTPException(status_code=404, detail="Radio show not found")
    return radio_show


@router.post("/", response_model=schemas.RadioShow, status_code=status.HTTP_201_CREATED)
def create_radio_show(
    payload: schemas.RadioShowCreate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    return storage.create_radio_show(payload)


@router.patch("/{radio_show_id}", response_model=schemas.RadioShow)
def update_radio_show(
    radio_show_id: uuid.UUID,
    payload: schemas.RadioShowUpdate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    radio_show = storage.update_radio_show(radio_show_id, payload)
    if radio_show is None:
        raise HTTPException(status_code=404, detail="Radio show not found")
    return radio_show


@router.delete("/{radio_show_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_radio_show(
    radio_show_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    if not storage.delete_radio_show(radio_show_id):
        raise HTTPException(status_code=404, detail="Radio show not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
