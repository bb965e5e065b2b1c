"""
Photo model for gallery uploads.
"""
from sqlalchemy import Column, String, DateTime
from tripboard.db.base import BaseModel, utcnow


class Photo(BaseModel):
    """Metadata for one uploaded image."""
    __tablename__ = "photos"

    filename = Column(String(255), nullable=False)  # name supplied by the uploader
    storage_name = Column(String(255), unique=True, nullable=False)
    url = Column(String(1024), nullable=False)
    uploaded_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
