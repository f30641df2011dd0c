"""
Event repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


def get_events(db: Session) -> List[models.Event]:
    return db.query(models.Event).order_by(models.Event.created_at.desc()).all()


def get_event(db: Session, event_id: uuid.UUID) -> Optional[models.Event]:
    return db.query(models.Event).filter(models.Event.id == event_id).first()


def create_event(db: Session, event: schemas.EventCreate) -> models.Event:
    db_event = models.Event(**event.model_dump())
    db.add(db_event)
    db.commit()
    db.refresh(db_event)
    return db_event


def update_event(db: Session, event_id: uuid.UUID, event: schemas.EventUpdate) -> Optional[models.Event]:
    db_event = db.query(models.Event).filter(models.Event.id == event_id).first()
    if db_event:
        changes = event.model_dump(exclude_unset=True)
        if changes:
            for key, value in changes.items():
                setattr(db_event, key, value)
            db.commit()
            db.refresh(db_event)
    return db_event


def delete_event(db: Session, event_id: uuid.UUID) -> bool:
    deleted = (
        db.query(models.Event)
        .filter(models.Event.id == event_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
