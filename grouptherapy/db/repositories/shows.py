"""
Radio show and playlist repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


# Radio shows
def get_radio_shows(db: Session) -> List[models.RadioShow]:
    return db.query(models.RadioShow).order_by(models.RadioShow.created_at.desc()).all()


def get_radio_show(db: Session, show_id: uuid.UUID) -> Optional[models.RadioShow]:
    return db.query(models.RadioShow).filter(models.RadioShow.id == show_id).first()


def create_radio_show(db: Session, show: schemas.RadioShowCreate) -> models.RadioShow:
    db_show = models.RadioShow(**show.model_dump())
    db.add(db_show)
    db.commit()
    db.refresh(db_show)
    return db_show


def update_radio_show(db: Session, show_id: uuid.UUID, show: schemas.RadioShowUpdate) -> Optional[models.RadioShow]:
    db_show = db.query(models.RadioShow).filter(models.RadioShow.id == show_id).first()
    if db_show:
        changes = show.model_dump(exclude_unset=True)
        if changes:
            for key, value in changes.items():
                setattr(db_show, key, value)
            db.commit()
            db.refresh(db_show)
    return db_show


def delete_radio_show(db: Session, show_id: uuid.UUID) -> bool:
    deleted = (
        db.query(models.RadioShow)
        .filter(models.RadioShow.id == show_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


# Playlists
def get_playlists(db: Session) -> List[models.Playlist]:
    return db.query(models.Playlist).order_by(models.Playlist.created_at.desc()).all()


def get_playlist(db: Session, playlist_id: uuid.UUID) -> Optional[models.Playlist]:
    return db.query(models.Playlist).filter(models.Playlist.id == playlist_id).first()


def create_playlist(db: Session, playlist: schemas.PlaylistCreate) -> models.Playlist:
    db_playlist = models.Playlist(**playlist.model_dump())
    db.add(db_playlist)
    db.commit()
    db.refresh(db_playlist)
    return db_playlist


def update_playlist(db: Session, playlist_id: uuid.UUID, playlist: schemas.PlaylistUpdate) -> Optional[models.Playlist]:
    db_playlist = db.query(models.Playlist).filter(models.Playlist.id == playlist_id).first()
    if db_playlist:
        changes = playlist.model_dump(exclude_unset=True)
        if changes:
            for key, value in changes.items():
                setattr(db_playlist, key, value)
            db.commit()
            db.refresh(db_playlist)
    return db_playlist


def delete_playlist(db: Session, playlist_id: uuid.UUID) -> bool:
    deleted = (
        db.query(models.Playlist)
        .filter(models.Playlist.id == playlist_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
