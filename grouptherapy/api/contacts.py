"""
Contact API endpoints.

Submitting the contact form is public; reading and triaging submissions is
admin-only.
"""
from typing import List
import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.api.deps import get_storage, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.post("/", response_model=schemas.Contact, status_code=status.HTTP_201_CREATED)
def submit_contact(
    payload: schemas.ContactCreate,
    storage: Storage = Depends(get_storage),
):
    contact = storage.create_contact(payload)
    logger.info("contact_submitted: id=%s category=%s", contact.id, contact.category)
    return contact


@router.get("/", response_model=List[schemas.Contact])
def list_contacts(
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    return storage.get_all_contacts()


@router.get("/{contact_id}", response_model=schemas.Contact)
def get_contact(
    contact_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    contact = storage.get_contact_by_id(contact_id)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.patch("/{contact_id}", response_model=schemas.Contact)
def update_contact(
    contact_id: uuid.UUID,
    payload: schemas.ContactUpdate,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    contact = storage.update_contact(contact_id, payload)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(
    contact_id: uuid.UUID,
    storage: Storage = Depends(get_storage),
    _admin: schemas.AdminUser = Depends(require_admin),
):
    if not storage.delete_contact(contact_id):
        raise HTTPException(status_code=404, detail="Contact not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
