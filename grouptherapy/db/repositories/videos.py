"""
Video repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


def get_videos(db: Session) -> List[models.Video]:
    return db.query(models.Video).order_by(models.Video.created_at.desc()).all()


def get_video(db: Session, video_id: uuid.UUID) -> Optional[models.Video]:
    return db.query(models.Video).filter(models.Video.id == video_id).first()


def create_video(db: Session, video: schemas.VideoCreate) -> models.Video:
    db_video = models.Video(**video.model_dump())
    db.add(db_video)
    db.commit()
    db.refresh(db_video)
    return db_video


def update_video(db: Session, video_id: uuid.UUID, video: schemas.VideoUpdate) -> Optional[models.Video]:
    db_video = db.query(models.Video).filter(models.Video.id == video_id).first()
    if db_video:
        changes = video.model_dump(exclude_unset=True)
        if changes:
            for key, value in changes.items():
                setattr(db_video, key, value)
            db.commit()
            db.refresh(db_video)
    return db_video


def delete_video(db: Session, video_id: uuid.UUID) -> bool:
    deleted = (
        db.query(models.Video)
        .filter(models.Video.id == video_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
