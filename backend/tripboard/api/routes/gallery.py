"""
Gallery routes for photo listing and upload.
"""
from fastapi import APIRouter, Depends, File, Request, UploadFile
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from typing import List, Optional
from tripboard.core.config import settings
from tripboard.db.session import get_db
from tripboard.schemas.photo import PhotoResponse, PhotoUploadResponse
from tripboard.services import gallery_service

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get("", response_model=List[PhotoResponse])
def list_gallery(db: Session = Depends(get_db)):
    """List all photos, newest first."""
    return gallery_service.list_photos(db)


@router.post("/upload", response_model=PhotoUploadResponse)
async def upload_photo(
    request: Request,
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """Upload ONE image (jpg/jpeg/png, max 5MB) under the multipart field `photo`."""
    filename = None
    content = None
    if photo is not None:
        filename = photo.filename
        # Read one byte past the limit so oversize files are detected without buffering them whole
        content = await photo.read(settings.MAX_UPLOAD_SIZE + 1)
        await photo.close()

    # Disk write and commit block, keep them off the event loop
    return await run_in_threadpool(
        gallery_service.ingest_photo,
        filename,
        content,
        str(request.base_url),
        db
    )
