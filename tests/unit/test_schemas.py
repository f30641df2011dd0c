import pytest
from pydantic import ValidationError

from grouptherapy.db import schemas


@pytest.mark.parametrize(
    "model,field",
    [
        (schemas.ReleaseUpdate, "title"),
        (schemas.ReleaseUpdate, "tracklist"),
        (schemas.ArtistUpdate, "slug"),
        (schemas.EventUpdate, "starts_at"),
        (schemas.PostUpdate, "content"),
        (schemas.RadioShowUpdate, "is_published"),
        (schemas.PlaylistUpdate, "track_count"),
        (schemas.VideoUpdate, "video_url"),
        (schemas.ContactUpdate, "status"),
    ],
)
def test_update_rejects_null_for_required_columns(model, field):
    with pytest.raises(ValidationError):
        model(**{field: None})


def test_update_allows_null_for_nullable_columns():
    update = schemas.ReleaseUpdate(catalog_number=None, artist_id=None)
    assert update.model_dump(exclude_unset=True) == {"catalog_number": None, "artist_id": None}


def test_update_keeps_create_constraints():
    with pytest.raises(ValidationError):
        schemas.ReleaseUpdate(title="")
    with pytest.raises(ValidationError):
        schemas.EventUpdate(city="x" * 121)
    with pytest.raises(ValidationError):
        schemas.ContactUpdate(email="nobody")


def test_omitted_fields_stay_unset():
    assert schemas.PostUpdate().model_dump(exclude_unset=True) == {}


def test_login_attempt_clips_to_column_widths():
    attempt = schemas.LoginAttemptCreate(username="u" * 200, ip_address="1" * 100, success=False)
    assert len(attempt.username) == schemas.USERNAME_MAX_LENGTH
    assert len(attempt.ip_address) == schemas.IP_ADDRESS_MAX_LENGTH


def test_login_request_bounds_username():
    with pytest.raises(ValidationError):
        schemas.AdminLoginRequest(username="u" * 101, password="pw")
