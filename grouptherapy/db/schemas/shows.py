import uuid
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import reject_null


class RadioShowBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    episode_number: int | None = Field(default=None, ge=0)
    host: str | None = None
    description: str | None = None
    air_date: datetime | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    audio_url: str | None = None
    cover_url: str | None = None
    tracklist: List[str] = Field(default_factory=list)
    is_published: bool = False


class RadioShowCreate(RadioShowBase):
    pass


class RadioShowUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    episode_number: int | None = Field(default=None, ge=0)
    host: str | None = None
    description: str | None = None
    air_date: datetime | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    audio_url: str | None = None
    cover_url: str | None = None
    tracklist: List[str] | None = None
    is_published: bool | None = None

    @field_validator("title", "tracklist", "is_published")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class RadioShow(RadioShowBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class PlaylistBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    cover_url: str | None = None
    spotify_url: str | None = None
    apple_music_url: str | None = None
    track_count: int = Field(default=0, ge=0)
    is_featured: bool = False


class PlaylistCreate(PlaylistBase):
    pass


class PlaylistUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    cover_url: str | None = None
    spotify_url: str | None = None
    apple_music_url: str | None = None
    track_count: int | None = Field(default=None, ge=0)
    is_featured: bool | None = None

    @field_validator("title", "track_count", "is_featured")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class Playlist(PlaylistBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
