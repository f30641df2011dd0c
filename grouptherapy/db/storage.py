"""
Storage facade over the repository layer.

`Storage` is the interface the API and services program against.
`DatabaseStorage` owns a pooled engine; every method opens a session,
performs a single repository call, and returns detached pydantic schemas so
results stay usable once the session is closed.
"""
from __future__ import annotations

import abc
import logging
import uuid
from contextlib import contextmanager
from typing import Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas
from grouptherapy.db.database import create_db_engine, make_session_factory
from grouptherapy.db.repositories import artists as repo_artists
from grouptherapy.db.repositories import contacts as repo_contacts
from grouptherapy.db.repositories import events as repo_events
from grouptherapy.db.repositories import posts as repo_posts
from grouptherapy.db.repositories import releases as repo_releases
from grouptherapy.db.repositories import shows as repo_shows
from grouptherapy.db.repositories import users as repo_users
from grouptherapy.db.repositories import videos as repo_videos

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class Storage(abc.ABC):
    """Data-access interface for the CMS backend."""

    # Users
    @abc.abstractmethod
    def get_user(self, user_id: uuid.UUID) -> Optional[schemas.User]: ...

    @abc.abstractmethod
    def get_user_by_username(self, username: str) -> Optional[schemas.User]: ...

    @abc.abstractmethod
    def create_user(self, user: schemas.UserCreate) -> schemas.User: ...

    # Admin users
    @abc.abstractmethod
    def get_admin_user_by_username(self, username: str) -> Optional[schemas.AdminUser]: ...

    @abc.abstractmethod
    def create_admin_user(self, admin: schemas.AdminUserCreate) -> schemas.AdminUser: ...

    @abc.abstractmethod
    def update_admin_last_login(self, username: str) -> None: ...

    # Login attempts
    @abc.abstractmethod
    def record_login_attempt(self, attempt: schemas.LoginAttemptCreate) -> schemas.LoginAttempt: ...

    @abc.abstractmethod
    def get_recent_login_attempts(self, username: str, minutes: int) -> List[schemas.LoginAttempt]: ...

    # Releases
    @abc.abstractmethod
    def get_all_releases(self) -> List[schemas.Release]: ...

    @abc.abstractmethod
    def get_release_by_id(self, release_id: uuid.UUID) -> Optional[schemas.Release]: ...

    @abc.abstractmethod
    def create_release(self, release: schemas.ReleaseCreate) -> schemas.Release: ...

    @abc.abstractmethod
    def update_release(self, release_id: uuid.UUID, update: schemas.ReleaseUpdate) -> Optional[schemas.Release]: ...

    @abc.abstractmethod
    def delete_release(self, release_id: uuid.UUID) -> bool: ...

    # Events
    @abc.abstractmethod
    def get_all_events(self) -> List[schemas.Event]: ...

    @abc.abstractmethod
    def get_event_by_id(self, event_id: uuid.UUID) -> Optional[schemas.Event]: ...

    @abc.abstractmethod
    def create_event(self, event: schemas.EventCreate) -> schemas.Event: ...

    @abc.abstractmethod
    def update_event(self, event_id: uuid.UUID, update: schemas.EventUpdate) -> Optional[schemas.Event]: ...

    @abc.abstractmethod
    def delete_event(self, event_id: uuid.UUID) -> bool: ...

    # Posts
    @abc.abstractmethod
    def get_all_posts(self) -> List[schemas.Post]: ...

    @abc.abstractmethod
    def get_post_by_id(self, post_id: uuid.UUID) -> Optional[schemas.Post]: ...

    @abc.abstractmethod
    def create_post(self, post: schemas.PostCreate) -> schemas.Post: ...

    @abc.abstractmethod
    def update_post(self, post_id: uuid.UUID, update: schemas.PostUpdate) -> Optional[schemas.Post]: ...

    @abc.abstractmethod
    def delete_post(self, post_id: uuid.UUID) -> bool: ...

    # Contacts
    @abc.abstractmethod
    def get_all_contacts(self) -> List[schemas.Contact]: ...

    @abc.abstractmethod
    def get_contact_by_id(self, contact_id: uuid.UUID) -> Optional[schemas.Contact]: ...

    @abc.abstractmethod
    def create_contact(self, contact: schemas.ContactCreate) -> schemas.Contact: ...

    @abc.abstractmethod
    def update_contact(self, contact_id: uuid.UUID, update: schemas.ContactUpdate) -> Optional[schemas.Contact]: ...

    @abc.abstractmethod
    def delete_contact(self, contact_id: uuid.UUID) -> bool: ...

    # Artists
    @abc.abstractmethod
    def get_all_artists(self) -> List[schemas.Artist]: ...

    @abc.abstractmethod
    def get_artist_by_id(self, artist_id: uuid.UUID) -> Optional[schemas.Artist]: ...

    @abc.abstractmethod
    def create_artist(self, artist: schemas.ArtistCreate) -> schemas.Artist: ...

    @abc.abstractmethod
    def update_artist(self, artist_id: uuid.UUID, update: schemas.ArtistUpdate) -> Optional[schemas.Artist]: ...

    @abc.abstractmethod
    def delete_artist(self, artist_id: uuid.UUID) -> bool: ...

    # Radio shows
    @abc.abstractmethod
    def get_all_radio_shows(self) -> List[schemas.RadioShow]: ...

    @abc.abstractmethod
    def get_radio_show_by_id(self, show_id: uuid.UUID) -> Optional[schemas.RadioShow]: ...

    @abc.abstractmethod
    def create_radio_show(self, show: schemas.RadioShowCreate) -> schemas.RadioShow: ...

    @abc.abstractmethod
    def update_radio_show(self, show_id: uuid.UUID, update: schemas.RadioShowUpdate) -> Optional[schemas.RadioShow]: ...

    @abc.abstractmethod
    def delete_radio_show(self, show_id: uuid.UUID) -> bool: ...

    # Playlists
    @abc.abstractmethod
    def get_all_playlists(self) -> List[schemas.Playlist]: ...

    @abc.abstractmethod
    def get_playlist_by_id(self, playlist_id: uuid.UUID) -> Optional[schemas.Playlist]: ...

    @abc.abstractmethod
    def create_playlist(self, playlist: schemas.PlaylistCreate) -> schemas.Playlist: ...

    @abc.abstractmethod
    def update_playlist(self, playlist_id: uuid.UUID, update: schemas.PlaylistUpdate) -> Optional[schemas.Playlist]: ...

    @abc.abstractmethod
    def delete_playlist(self, playlist_id: uuid.UUID) -> bool: ...

    # Videos
    @abc.abstractmethod
    def get_all_videos(self) -> List[schemas.Video]: ...

    @abc.abstractmethod
    def get_video_by_id(self, video_id: uuid.UUID) -> Optional[schemas.Video]: ...

    @abc.abstractmethod
    def create_video(self, video: schemas.VideoCreate) -> schemas.Video: ...

    @abc.abstractmethod
    def update_video(self, video_id: uuid.UUID, update: schemas.VideoUpdate) -> Optional[schemas.Video]: ...

    @abc.abstractmethod
    def delete_video(self, video_id: uuid.UUID) -> bool: ...


def _one(schema: Type[SchemaT], row) -> Optional[SchemaT]:
    return schema.model_validate(row) if row is not None else None


def _many(schema: Type[SchemaT], rows) -> List[SchemaT]:
    return [schema.model_validate(r) for r in rows]


class DatabaseStorage(Storage):
    """`Storage` backed by a pooled SQLAlchemy engine."""

    def __init__(self, database_url: Optional[str] = None):
        self.engine = create_db_engine(database_url)
        self._session_factory = make_session_factory(self.engine)

    @contextmanager
    def _session(self, op: str) -> Iterator[Session]:
        logger.debug("storage_op: %s", op)
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError:
            logger.exception("storage_op_failed: %s", op)
            db.rollback()
            raise
        finally:
            db.close()

    def create_schema(self) -> None:
        """Create any missing tables. Deployed databases are managed by Alembic."""
        models.Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()

    # Users
    def get_user(self, user_id: uuid.UUID) -> Optional[schemas.User]:
        with self._session("users.get") as db:
            return _one(schemas.User, repo_users.get_user(db, user_id))

    def get_user_by_username(self, username: str) -> Optional[schemas.User]:
        with self._session("users.get_by_username") as db:
            return _one(schemas.User, repo_users.get_user_by_username(db, username))

    def create_user(self, user: schemas.UserCreate) -> schemas.User:
        with self._session("users.create") as db:
            return schemas.User.model_validate(repo_users.create_user(db, user))

    # Admin users
    def get_admin_user_by_username(self, username: str) -> Optional[schemas.AdminUser]:
        with self._session("admin_users.get_by_username") as db:
            return _one(schemas.AdminUser, repo_users.get_admin_user_by_username(db, username))

    def create_admin_user(self, admin: schemas.AdminUserCreate) -> schemas.AdminUser:
        with self._session("admin_users.create") as db:
            return schemas.AdminUser.model_validate(repo_users.create_admin_user(db, admin))

    def update_admin_last_login(self, username: str) -> None:
        with self._session("admin_users.update_last_login") as db:
            repo_users.update_admin_last_login(db, username)

    # Login attempts
    def record_login_attempt(self, attempt: schemas.LoginAttemptCreate) -> schemas.LoginAttempt:
        with self._session("login_attempts.create") as db:
            return schemas.LoginAttempt.model_validate(repo_users.record_login_attempt(db, attempt))

    def get_recent_login_attempts(self, username: str, minutes: int) -> List[schemas.LoginAttempt]:
        with self._session("login_attempts.recent") as db:
            return _many(schemas.LoginAttempt, repo_users.get_recent_login_attempts(db, username, minutes))

    # Releases
    def get_all_releases(self) -> List[schemas.Release]:
        with self._session("releases.list") as db:
            return _many(schemas.Release, repo_releases.get_releases(db))

    def get_release_by_id(self, release_id: uuid.UUID) -> Optional[schemas.Release]:
        with self._session("releases.get") as db:
            return _one(schemas.Release, repo_releases.get_release(db, release_id))

    def create_release(self, release: schemas.ReleaseCreate) -> schemas.Release:
        with self._session("releases.create") as db:
            return schemas.Release.model_validate(repo_releases.create_release(db, release))

    def update_release(self, release_id: uuid.UUID, update: schemas.ReleaseUpdate) -> Optional[schemas.Release]:
        with self._session("releases.update") as db:
            return _one(schemas.Release, repo_releases.update_release(db, release_id, update))

    def delete_release(self, release_id: uuid.UUID) -> bool:
        with self._session("releases.delete") as db:
            return repo_releases.delete_release(db, release_id)

    # Events
    def get_all_events(self) -> List[schemas.Event]:
        with self._session("events.list") as db:
            return _many(schemas.Event, repo_events.get_events(db))

    def get_event_by_id(self, event_id: uuid.UUID) -> Optional[schemas.Event]:
        with self._session("events.get") as db:
            return _one(schemas.Event, repo_events.get_event(db, event_id))

    def create_event(self, event: schemas.EventCreate) -> schemas.Event:
        with self._session("events.create") as db:
            return schemas.Event.model_validate(repo_events.create_event(db, event))

    def update_event(self, event_id: uuid.UUID, update: schemas.EventUpdate) -> Optional[schemas.Event]:
        with self._session("events.update") as db:
            return _one(schemas.Event, repo_events.update_event(db, event_id, update))

    def delete_event(self, event_id: uuid.UUID) -> bool:
        with self._session("events.delete") as db:
            return repo_events.delete_event(db, event_id)

    # Posts
    def get_all_posts(self) -> List[schemas.Post]:
        with self._session("posts.list") as db:
            return _many(schemas.Post, repo_posts.get_posts(db))

    def get_post_by_id(self, post_id: uuid.UUID) -> Optional[schemas.Post]:
        with self._session("posts.get") as db:
            return _one(schemas.Post, repo_posts.get_post(db, post_id))

    def create_post(self, post: schemas.PostCreate) -> schemas.Post:
        with self._session("posts.create") as db:
            return schemas.Post.model_validate(repo_posts.create_post(db, post))

    def update_post(self, post_id: uuid.UUID, update: schemas.PostUpdate) -> Optional[schemas.Post]:
        with self._session("posts.update") as db:
            return _one(schemas.Post, repo_posts.update_post(db, post_id, update))

    def delete_post(self, post_id: uuid.UUID) -> bool:
        with self._session("posts.delete") as db:
            return repo_posts.delete_post(db, post_id)

    # Contacts
    def get_all_contacts(self) -> List[schemas.Contact]:
        with self._session("contacts.list") as db:
            return _many(schemas.Contact, repo_contacts.get_contacts(db))

    def get_contact_by_id(self, contact_id: uuid.UUID) -> Optional[schemas.Contact]:
        with self._session("contacts.get") as db:
            return _one(schemas.Contact, repo_contacts.get_contact(db, contact_id))

    def create_contact(self, contact: schemas.ContactCreate) -> schemas.Contact:
        with self._session("contacts.create") as db:
            return schemas.Contact.model_validate(repo_contacts.create_contact(db, contact))

    def update_contact(self, contact_id: uuid.UUID, update: schemas.ContactUpdate) -> Optional[schemas.Contact]:
        with self._session("contacts.update") as db:
            return _one(schemas.Contact, repo_contacts.update_contact(db, contact_id, update))

    def delete_contact(self, contact_id: uuid.UUID) -> bool:
        with self._session("contacts.delete") as db:
            return repo_contacts.delete_contact(db, contact_id)

    # Artists
    def get_all_artists(self) -> List[schemas.Artist]:
        with self._session("artists.list") as db:
            return _many(schemas.Artist, repo_artists.get_artists(db))

    def get_artist_by_id(self, artist_id: uuid.UUID) -> Optional[schemas.Artist]:
        with self._session("artists.get") as db:
            return _one(schemas.Artist, repo_artists.get_artist(db, artist_id))

    def create_artist(self, artist: schemas.ArtistCreate) -> schemas.Artist:
        with self._session("artists.create") as db:
            return schemas.Artist.model_validate(repo_artists.create_artist(db, artist))

    def update_artist(self, artist_id: uuid.UUID, update: schemas.ArtistUpdate) -> Optional[schemas.Artist]:
        with self._session("artists.update") as db:
            return _one(schemas.Artist, repo_artists.update_artist(db, artist_id, update))

    def delete_artist(self, artist_id: uuid.UUID) -> bool:
        with self._session("artists.delete") as db:
            return repo_artists.delete_artist(db, artist_id)

    # Radio shows
    def get_all_radio_shows(self) -> List[schemas.RadioShow]:
        with self._session("radio_shows.list") as db:
            return _many(schemas.RadioShow, repo_shows.get_radio_shows(db))

    def get_radio_show_by_id(self, show_id: uuid.UUID) -> Optional[schemas.RadioShow]:
        with self._session("radio_shows.get") as db:
            return _one(schemas.RadioShow, repo_shows.get_radio_show(db, show_id))

    def create_radio_show(self, show: schemas.RadioShowCreate) -> schemas.RadioShow:
        with self._session("radio_shows.create") as db:
            return schemas.RadioShow.model_validate(repo_shows.create_radio_show(db, show))

    def update_radio_show(self, show_id: uuid.UUID, update: schemas.RadioShowUpdate) -> Optional[schemas.RadioShow]:
        with self._session("radio_shows.update") as db:
            return _one(schemas.RadioShow, repo_shows.update_radio_show(db, show_id, update))

    def delete_radio_show(self, show_id: uuid.UUID) -> bool:
        with self._session("radio_shows.delete") as db:
            return repo_shows.delete_radio_show(db, show_id)

    # Playlists
    def get_all_playlists(self) -> List[schemas.Playlist]:
        with self._session("playlists.list") as db:
            return _many(schemas.Playlist, repo_shows.get_playlists(db))

    def get_playlist_by_id(self, playlist_id: uuid.UUID) -> Optional[schemas.Playlist]:
        with self._session("playlists.get") as db:
            return _one(schemas.Playlist, repo_shows.get_playlist(db, playlist_id))

    def create_playlist(self, playlist: schemas.PlaylistCreate) -> schemas.Playlist:
        with self._session("playlists.create") as db:
            return schemas.Playlist.model_validate(repo_shows.create_playlist(db, playlist))

    def update_playlist(self, playlist_id: uuid.UUID, update: schemas.PlaylistUpdate) -> Optional[schemas.Playlist]:
        with self._session("playlists.update") as db:
            return _one(schemas.Playlist, repo_shows.update_playlist(db, playlist_id, update))

    def delete_playlist(self, playlist_id: uuid.UUID) -> bool:
        with self._session("playlists.delete") as db:
            return repo_shows.delete_playlist(db, playlist_id)

    # Videos
    def get_all_videos(self) -> List[schemas.Video]:
        with self._session("videos.list") as db:
            return _many(schemas.Video, repo_videos.get_videos(db))

    def get_video_by_id(self, video_id: uuid.UUID) -> Optional[schemas.Video]:
        with self._session("videos.get") as db:
            return _one(schemas.Video, repo_videos.get_video(db, video_id))

    def create_video(self, video: schemas.VideoCreate) -> schemas.Video:
        with self._session("videos.create") as db:
            return schemas.Video.model_validate(repo_videos.create_video(db, video))

    def update_video(self, video_id: uuid.UUID, update: schemas.VideoUpdate) -> Optional[schemas.Video]:
        with self._session("videos.update") as db:
            return _one(schemas.Video, repo_videos.update_video(db, video_id, update))

    def delete_video(self, video_id: uuid.UUID) -> bool:
        with self._session("videos.delete") as db:
            return repo_videos.delete_video(db, video_id)
