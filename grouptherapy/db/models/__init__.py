"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and every ORM class so callers can import from
`grouptherapy.db.models` without knowing the module layout.
"""

from .base import Base, now_utc  # re-export

from .users import User, AdminUser, LoginAttempt
from .artists import Artist
from .releases import Release
from .events import Event
from .posts import Post
from .contacts import Contact
from .shows import RadioShow, Playlist
from .videos import Video

__all__ = [
    # base
    "Base",
    "now_utc",
    # accounts
    "User",
    "AdminUser",
    "LoginAttempt",
    # content
    "Artist",
    "Release",
    "Event",
    "Post",
    "Contact",
    "RadioShow",
    "Playlist",
    "Video",
]
