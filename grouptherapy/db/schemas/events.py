import uuid
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import reject_null


class EventBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    venue: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=120)
    country: str | None = None
    starts_at: datetime
    ends_at: datetime | None = None
    ticket_url: str | None = None
    image_url: str | None = None
    description: str | None = None
    lineup: List[str] = Field(default_factory=list)
    is_published: bool = False


class EventCreate(EventBase):
    pass


class EventUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    venue: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=120)
    country: str | None = None
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    ticket_url: str | None = None
    image_url: str | None = None
    description: str | None = None
    lineup: List[str] | None = None
    is_published: bool | None = None

    @field_validator("title", "venue", "city", "starts_at", "lineup", "is_published")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class Event(EventBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
