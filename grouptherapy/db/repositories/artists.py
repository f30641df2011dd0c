"""
Artist roster repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


def get_artists(db: Session) -> List[models.Artist]:
    return db.query(models.Artist).order_by(models.Artist.created_at.desc()).all()


def get_artist(db: Session, artist_id: uuid.UUID) -> Optional[models.Artist]:
    return db.query(models.Artist).filter(models.Artist.id == artist_id).first()


def create_artist(db: Session, artist: schemas.ArtistCreate) -> models.Artist:
    db_artist = models.Artist(**artist.model_dump())
    db.add(db_artist)
    db.commit()
    db.refresh(db_artist)
    return db_artist


def update_artist(db: Session, artist_id: uuid.UUID, artist: schemas.ArtistUpdate) -> Optional[models.Artist]:
    db_artist = db.query(models.Artist).filter(models.Artist.id == artist_id).first()
    if db_artist:
        changes = artist.model_dump(exclude_unset=True)
        if changes:
            for key, value in changes.items():
                setattr(db_artist, key, value)
            db.commit()
            db.refresh(db_artist)
    return db_artist


def delete_artist(db: Session, artist_id: uuid.UUID) -> bool:
    deleted = (
        db.query(models.Artist)
        .filter(models.Artist.id == artist_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
