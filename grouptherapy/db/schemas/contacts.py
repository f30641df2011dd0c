import uuid
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import reject_null

ContactCategory = Literal['general', 'demo', 'booking', 'press']
ContactStatus = Literal['new', 'read', 'replied', 'archived']


class ContactBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    subject: str | None = None
    message: str = Field(min_length=1)
    category: ContactCategory = 'general'


class ContactCreate(ContactBase):
    pass


class ContactUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    subject: str | None = None
    message: str | None = Field(default=None, min_length=1)
    category: ContactCategory | None = None
    status: ContactStatus | None = None

    @field_validator("name", "email", "message", "category", "status")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class Contact(ContactBase):
    id: uuid.UUID
    status: ContactStatus
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
