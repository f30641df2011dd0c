"""
Events API endpoints.

Public reads; writes require admin credentials.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.api.deps import get_storage, require_admin

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/", response_model=List[schemas.Event])
def list_events(storage: Storage = Depends(get_storage)):
    return storage.get_all_events()


@router.get("/{event_id}", response_model=schemas.Event)
def get_event(
    event_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
):
    event = storage.get_event_by_id(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post("/", response_model=schemas.Event, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: schemas.EventCreate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    return storage.create_event(payload)


@router.patch("/{event_id}", response_model=schemas.Event)
def update_event(
    event_id: uuid.UUID,
    payload: schemas.EventUpdate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    event = storage.update_event(event_id, payload)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    if not storage.delete_event(event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
