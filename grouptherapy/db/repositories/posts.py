"""
Blog post repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


def get_posts(db: Session) -> List[models.Post]:
    return db.query(models.Post).order_by(models.Post.created_at.desc()).all()


def get_post(db: Session, post_id: uuid.UUID) -> Optional[models.Post]:
    return db.query(models.Post).filter(models.Post.id == post_id).first()


def create_post(db: Session, post: schemas.PostCreate) -> models.Post:
    db_post = models.Post(**post.model_dump())
    db.add(db_post)
    db.commit()
    db.refresh(db_post)
    return db_post


def update_post(db: Session, post_id: uuid.UUID, post: schemas.PostUpdate) -> Optional[models.Post]:
    db_post = db.query(models.Post).filter(models.Post.id == post_id).first()
    if db_post:
        changes = post.model_dump(exclude_unset=True)
        if changes:
            for key, value in changes.items():
                setattr(db_post, key, value)
            db.commit()
            db.refresh(db_post)
    return db_post


def delete_post(db: Session, post_id: uuid.UUID) -> bool:
    deleted = (
        db.query(models.Post)
        .filter(models.Post.id == post_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
