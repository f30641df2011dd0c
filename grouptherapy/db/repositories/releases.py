"""
Release repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


def get_releases(db: Session) -> List[models.Release]:
    return db.query(models.Release).order_by(models.Release.created_at.desc()).all()


def get_release(db: Session, release_id: uuid.UUID) -> Optional[models.Release]:
    return db.query(models.Release).filter(models.Release.id == release_id).first()


def create_release(db: Session, release: schemas.ReleaseCreate) -> models.Release:
    db_release = models.Release(**release.model_dump())
    db.add(db_release)
    db.commit()
    db.refresh(db_release)
    return db_release


def update_release(db: Session, release_id: uuid.UUID, release: schemas.ReleaseUpdate) -> Optional[models.Release]:
    db_release = db.query(models.Release).filter(models.Release.id == release_id).first()
    if db_release:
        changes = release.model_dump(exclude_unset=True)
        if changes:
            for key, value in changes.items():
                setattr(db_release, key, value)
            db.commit()
            db.refresh(db_release)
    return db_release


def delete_release(db: Session, release_id: uuid.UUID) -> bool:
    deleted = (
        db.query(models.Release)
        .filter(models.Release.id == release_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
