import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import reject_null


class VideoBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    video_url: str = Field(min_length=1)
    thumbnail_url: str | None = None
    duration_seconds: int | None = Field(default=None, ge=0)
    artist_id: uuid.UUID | None = None
    published_at: datetime | None = None
    is_published: bool = False


class VideoCreate(VideoBase):
    pass


class VideoUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    video_url: str | None = Field(default=None, min_length=1)
    thumbnail_url: str | None = None
    duration_seconds: int | None = Field(default=None, ge=0)
    artist_id: uuid.UUID | None = None
    published_at: datetime | None = None
    is_published: bool | None = None

    @field_validator("title", "video_url", "is_published")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class Video(VideoBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
