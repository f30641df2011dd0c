import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import clip

USERNAME_MAX_LENGTH = 100
IP_ADDRESS_MAX_LENGTH = 64


class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class User(UserBase):
    id: uuid.UUID
    password: str
    model_config = ConfigDict(from_attributes=True)


class UserPublic(UserBase):
    id: uuid.UUID
    model_config = ConfigDict(from_attributes=True)


class AdminUserBase(BaseModel):
    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)
    email: str | None = None
    role: str = 'admin'
    is_active: bool = True


class AdminUserCreate(AdminUserBase):
    password_hash: str = Field(min_length=1)


class AdminUser(AdminUserBase):
    id: uuid.UUID
    password_hash: str
    last_login_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class AdminUserPublic(AdminUserBase):
    id: uuid.UUID
    last_login_at: datetime | None = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class AdminLoginRequest(BaseModel):
    username: str = Field(max_length=USERNAME_MAX_LENGTH)
    password: str


class LoginAttemptBase(BaseModel):
    username: str
    ip_address: str | None = None
    user_agent: str | None = None
    success: bool = False

    @field_validator("username", mode="before")
    @classmethod
    def _clip_username(cls, v):
        return clip(v, USERNAME_MAX_LENGTH)

    @field_validator("ip_address", mode="before")
    @classmethod
    def _clip_ip_address(cls, v):
        return clip(v, IP_ADDRESS_MAX_LENGTH)


class LoginAttemptCreate(LoginAttemptBase):
    pass


class LoginAttempt(LoginAttemptBase):
    id: uuid.UUID
    attempted_at: datetime
    model_config = ConfigDict(from_attributes=True)
