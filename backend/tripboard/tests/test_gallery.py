"""
Tests for the gallery service.
"""
import os

import pytest
from sqlalchemy.exc import SQLAlchemyError

from tripboard.core.config import settings
from tripboard.core.errors import PayloadTooLarge, ValidationError
from tripboard.models.photo import Photo
from tripboard.services.gallery_service import (
    allowed_extension, generate_storage_name, ingest_photo, list_photos
)

BASE_URL = "http://trip.local:3001/"
MiB = 1024 * 1024


@pytest.mark.parametrize("filename,expected", [
    ("beach.jpg", ".jpg"),
    ("beach.JPEG", ".jpeg"),
    ("Beach.Png", ".png"),
    ("archive.tar.png", ".png"),
    ("beach.gif", None),
    ("notes.txt", None),
    ("beach", None),
    (".png", None),
])
def test_allowed_extension(filename, expected):
    assert allowed_extension(filename) == expected


def test_storage_names_are_unique_and_keep_extension():
    names = {generate_storage_name("IMG_0001.JPG") for _ in range(500)}

    assert len(names) == 500
    assert all(name.endswith(".jpg") for name in names)
    assert not any("IMG_0001" in name for name in names)


@pytest.mark.parametrize("filename", ["beach.gif", "notes.txt", "beach"])
def test_ingest_rejects_invalid_file_type(db_session, stored_files, filename):
    with pytest.raises(ValidationError, match="Invalid file type"):
        ingest_photo(filename, b"data", BASE_URL, db_session)

    assert db_session.query(Photo).count() == 0
    assert stored_files() == []


@pytest.mark.parametrize("filename,content", [(None, None), ("", b"data"), ("beach.png", None)])
def test_ingest_rejects_missing_file(db_session, stored_files, filename, content):
    with pytest.raises(ValidationError, match="No file uploaded"):
        ingest_photo(filename, content, BASE_URL, db_session)

    assert stored_files() == []


@pytest.mark.parametrize("filename", ["a.jpg", "b.JPG", "c.jpeg", "d.PNG"])
def test_ingest_accepts_image_extensions(db_session, stored_files, filename):
    photo = ingest_photo(filename, b"\x89PNG", BASE_URL, db_session)

    assert photo.filename == filename
    assert stored_files() == [photo.storage_name]


def test_ingest_accepts_exactly_max_size(db_session):
    content = b"x" * settings.MAX_UPLOAD_SIZE

    photo = ingest_photo("big.jpg", content, BASE_URL, db_session)

    path = os.path.join(settings.UPLOAD_DIR, photo.storage_name)
    assert os.path.getsize(path) == 5 * MiB


def test_ingest_rejects_one_byte_over_max_size(db_session, stored_files):
    content = b"x" * (settings.MAX_UPLOAD_SIZE + 1)

    with pytest.raises(PayloadTooLarge):
        ingest_photo("big.jpg", content, BASE_URL, db_session)

    assert db_session.query(Photo).count() == 0
    assert stored_files() == []


def test_ingest_builds_absolute_url(db_session):
    photo = ingest_photo("beach.png", b"png", BASE_URL, db_session)

    assert photo.url == f"http://trip.local:3001/uploads/{photo.storage_name}"
    assert photo.uploaded_at is not None


def test_list_photos_newest_first_and_stable(db_session):
    assert list_photos(db_session) == []

    ids = [
        ingest_photo(f"p{i}.jpg", b"jpg", BASE_URL, db_session).id
        for i in range(3)
    ]

    first = [p.id for p in list_photos(db_session)]
    second = [p.id for p in list_photos(db_session)]
    assert first == list(reversed(ids))
    assert first == second


def test_failed_insert_removes_stored_file(db_session, stored_files, monkeypatch):
    def broken_commit():
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(db_session, "commit", broken_commit)

    with pytest.raises(SQLAlchemyError):
        ingest_photo("beach.png", b"png", BASE_URL, db_session)

    assert stored_files() == []
