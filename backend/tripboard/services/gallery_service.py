"""
Gallery service for photo ingest and listing.

The upload directory is owned by this module: it is created on demand and
nothing else writes into it. Files are written before the metadata row is
inserted; if the insert fails the file is removed again so every stored
file stays reachable from a Photo row.
"""
from sqlalchemy.orm import Session
from typing import List, Optional
from tripboard.core.config import settings
from tripboard.core.errors import PayloadTooLarge, ValidationError
from tripboard.core.utils import build_public_url
from tripboard.models.photo import Photo
import logging
import os
import time
import uuid

logger = logging.getLogger(__name__)


def ensure_upload_dir() -> str:
    """Create the upload directory if absent. Returns its path."""
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    return settings.UPLOAD_DIR


def list_photos(db: Session) -> List[Photo]:
    """Get all photos, newest first."""
    return db.query(Photo).order_by(
        Photo.uploaded_at.desc(),
        Photo.id.desc()
    ).all()


def allowed_extension(filename: str) -> Optional[str]:
    """Return the lower-cased extension if it is an accepted image type, else None."""
    ext = os.path.splitext(filename)[1].lower()
    if ext and ext in settings.ALLOWED_IMAGE_EXTENSIONS:
        return ext
    return None


def generate_storage_name(filename: str) -> str:
    """Build a collision-free on-disk name keeping only the original extension."""
    ext = os.path.splitext(filename)[1].lower()
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex}{ext}"


def validate_upload(filename: Optional[str], size: int) -> str:
    """Check an upload against the ingest policy. Returns the normalized extension."""
    if not filename:
        raise ValidationError("No file uploaded")

    ext = allowed_extension(filename)
    if ext is None:
        raise ValidationError("Invalid file type")

    if size > settings.MAX_UPLOAD_SIZE:
        raise PayloadTooLarge(
            f"File too large (max {settings.MAX_UPLOAD_SIZE} bytes)"
        )
    return ext


def _remove_orphan(file_path: str) -> None:
    try:
        os.remove(file_path)
    except OSError as e:
        logger.error(
            f"Orphaned upload left on disk, manual cleanup required: {file_path} ({e})"
        )


def ingest_photo(
    filename: Optional[str],
    content: Optional[bytes],
    base_url: str,
    db: Session
) -> Photo:
    """
    Validate, store and record one uploaded image.

    base_url is the request's scheme://host used to build the absolute URL.
    """
    if content is None:
        raise ValidationError("No file uploaded")
    validate_upload(filename, len(content))

    storage_name = generate_storage_name(filename)
    file_path = os.path.join(ensure_upload_dir(), storage_name)

    # "x" mode refuses to overwrite an existing file
    with open(file_path, "xb") as buffer:
        buffer.write(content)

    url = build_public_url(base_url, settings.UPLOAD_URL_PREFIX, storage_name)
    photo = Photo(filename=filename, storage_name=storage_name, url=url)
    try:
        db.add(photo)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Failed to record upload {storage_name}, removing file", exc_info=True)
        _remove_orphan(file_path)
        raise
    db.refresh(photo)

    logger.info(f"Stored photo {photo.id} '{filename}' as {storage_name} ({len(content)} bytes)")
    return photo
