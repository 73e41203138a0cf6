import logging
from typing import Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.core.config import DEFAULT_AVATAR_URL
from app.services.storage_service import StorageService

logger = logging.getLogger(__name__)


def require_storage(storage: Optional[StorageService]) -> StorageService:
    if storage is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="File storage is not configured"
        )
    return storage


async def upload_image(file: UploadFile, folder: str, storage: Optional[StorageService]) -> str:
    """Upload `file` to `folder` and return its URL; bad images are a 400"""
    storage = require_storage(storage)
    try:
        return await storage.upload_file(file, folder)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


async def replace_image(
    db: Session,
    record,
    field: str,
    file: UploadFile,
    folder: str,
    storage: Optional[StorageService],
) -> bool:
    """
    Upload `file` to `folder` and store its URL on `record.<field>`.
    The previous blob is deleted once the new URL is saved.
    """
    url = await upload_image(file, folder, storage)

    previous = getattr(record, field)
    setattr(record, field, url)
    db.commit()

    if previous and previous not in (url, DEFAULT_AVATAR_URL):
        storage.delete_image(previous)
    logger.info(f"Stored new {field} for {record.__tablename__} {record.id}")
    return True


def reset_image(
    db: Session,
    record,
    field: str,
    default: Optional[str],
    storage: Optional[StorageService],
) -> bool:
    """Point `record.<field>` back at `default` and drop the uploaded blob"""
    previous = getattr(record, field)
    setattr(record, field, default)
    db.commit()

    if storage is not None and previous and previous != default:
        storage.delete_image(previous)
    logger.info(f"Reset {field} for {record.__tablename__} {record.id}")
    return True
