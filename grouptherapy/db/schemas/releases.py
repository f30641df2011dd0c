import uuid
from datetime import date, datetime
from typing import Dict, List, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import reject_null

ReleaseType = Literal['single', 'ep', 'album', 'compilation']


class ReleaseBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    artist_name: str = Field(min_length=1, max_length=255)
    artist_id: uuid.UUID | None = None
    release_type: ReleaseType = 'single'
    release_date: date | None = None
    catalog_number: str | None = None
    cover_url: str | None = None
    description: str | None = None
    tracklist: List[str] = Field(default_factory=list)
    streaming_links: Dict[str, str] = Field(default_factory=dict)
    is_published: bool = False


class ReleaseCreate(ReleaseBase):
    pass


class ReleaseUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    artist_name: str | None = Field(default=None, min_length=1, max_length=255)
    artist_id: uuid.UUID | None = None
    release_type: ReleaseType | None = None
    release_date: date | None = None
    catalog_number: str | None = None
    cover_url: str | None = None
    description: str | None = None
    tracklist: List[str] | None = None
    streaming_links: Dict[str, str] | None = None
    is_published: bool | None = None

    @field_validator("title", "artist_name", "release_type", "tracklist", "streaming_links", "is_published")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class Release(ReleaseBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
