"""
Contact-form submission repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


def get_contacts(db: Session) -> List[models.Contact]:
    return db.query(models.Contact).order_by(models.Contact.created_at.desc()).all()


def get_contact(db: Session, contact_id: uuid.UUID) -> Optional[models.Contact]:
    return db.query(models.Contact).filter(models.Contact.id == contact_id).first()


def create_contact(db: Session, contact: schemas.ContactCreate) -> models.Contact:
    db_contact = models.Contact(**contact.model_dump())
    db.add(db_contact)
    db.commit()
    db.refresh(db_contact)
    return db_contact


def update_contact(db: Session, contact_id: uuid.UUID, contact: schemas.ContactUpdate) -> Optional[models.Contact]:
    db_contact = db.query(models.Contact).filter(models.Contact.id == contact_id).first()
    if db_contact:
        changes = contact.model_dump(exclude_unset=True)
        if changes:
            for key, value in changes.items():
                setattr(db_contact, key, value)
            db.commit()
            db.refresh(db_contact)
    return db_contact


def delete_contact(db: Session, contact_id: uuid.UUID) -> bool:
    deleted = (
        db.query(models.Contact)
        .filter(models.Contact.id == contact_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
