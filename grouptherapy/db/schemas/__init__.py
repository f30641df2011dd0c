"""
Domain-split Pydantic schemas with a flat re-export surface.

Callers use `grouptherapy.db.schemas.<Name>` regardless of which module
defines the schema.
"""

from .users import (
    USERNAME_MAX_LENGTH,
    IP_ADDRESS_MAX_LENGTH,
    UserBase,
    UserCreate,
    User,
    UserPublic,
    AdminUserBase,
    AdminUserCreate,
    AdminUser,
    AdminUserPublic,
    AdminLoginRequest,
    LoginAttemptBase,
    LoginAttemptCreate,
    LoginAttempt,
)
from .artists import ArtistBase, ArtistCreate, ArtistUpdate, Artist
from .releases import ReleaseType, ReleaseBase, ReleaseCreate, ReleaseUpdate, Release
from .events import EventBase, EventCreate, EventUpdate, Event
from .posts import PostBase, PostCreate, PostUpdate, Post
from .contacts import (
    ContactCategory,
    ContactStatus,
    ContactBase,
    ContactCreate,
    ContactUpdate,
    Contact,
)
from .shows import (
    RadioShowBase,
    RadioShowCreate,
    RadioShowUpdate,
    RadioShow,
    PlaylistBase,
    PlaylistCreate,
    PlaylistUpdate,
    Playlist,
)
from .videos import VideoBase, VideoCreate, VideoUpdate, Video

__all__ = [
    # accounts
    "USERNAME_MAX_LENGTH",
    "IP_ADDRESS_MAX_LENGTH",
    "UserBase",
    "UserCreate",
    "User",
    "UserPublic",
    "AdminUserBase",
    "AdminUserCreate",
    "AdminUser",
    "AdminUserPublic",
    "AdminLoginRequest",
    "LoginAttemptBase",
    "LoginAttemptCreate",
    "LoginAttempt",
    # artists
    "ArtistBase",
    "ArtistCreate",
    "ArtistUpdate",
    "Artist",
    # releases
    "ReleaseType",
    "ReleaseBase",
    "ReleaseCreate",
    "ReleaseUpdate",
    "Release",
    # events
    "EventBase",
    "EventCreate",
    "EventUpdate",
    "Event",
    # posts
    "PostBase",
    "PostCreate",
    "PostUpdate",
    "Post",
    # contacts
    "ContactCategory",
    "ContactStatus",
    "ContactBase",
    "ContactCreate",
    "ContactUpdate",
    "Contact",
    # radio shows / playlists
    "RadioShowBase",
    "RadioShowCreate",
    "RadioShowUpdate",
    "RadioShow",
    "PlaylistBase",
    "PlaylistCreate",
    "PlaylistUpdate",
    "Playlist",
    # videos
    "VideoBase",
    "VideoCreate",
    "VideoUpdate",
    "Video",
]
