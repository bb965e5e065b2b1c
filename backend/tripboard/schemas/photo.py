"""
Pydantic schemas for Photo entity.
"""
from pydantic import BaseModel
from datetime import datetime


class PhotoResponse(BaseModel):
    """Schema for gallery listing."""
    id: int
    filename: str
    url: str
    uploaded_at: datetime

    class Config:
        from_attributes = True


class PhotoUploadResponse(BaseModel):
    """Schema returned after a successful ingest."""
    id: int
    url: str

    class Config:
        from_attributes = True
