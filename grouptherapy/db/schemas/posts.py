import uuid
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import reject_null


class PostBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    excerpt: str | None = None
    content: str
    cover_url: str | None = None
    author: str | None = None
    category: str | None = None
    tags: List[str] = Field(default_factory=list)
    is_published: bool = False
    published_at: datetime | None = None


class PostCreate(PostBase):
    pass


class PostUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255)
    excerpt: str | None = None
    content: str | None = None
    cover_url: str | None = None
    author: str | None = None
    category: str | None = None
    tags: List[str] | None = None
    is_published: bool | None = None
    published_at: datetime | None = None

    @field_validator("title", "slug", "content", "tags", "is_published")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class Post(PostBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
