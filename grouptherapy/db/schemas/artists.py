import uuid
from datetime import datetime
from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import reject_null


class ArtistBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    bio: str | None = None
    image_url: str | None = None
    genres: List[str] = Field(default_factory=list)
    social_links: Dict[str, str] = Field(default_factory=dict)
    is_featured: bool = False


class ArtistCreate(ArtistBase):
    pass


class ArtistUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255)
    bio: str | None = None
    image_url: str | None = None
    genres: List[str] | None = None
    social_links: Dict[str, str] | None = None
    is_featured: bool | None = None

    @field_validator("name", "slug", "genres", "social_links", "is_featured")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class Artist(ArtistBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
