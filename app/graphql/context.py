from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.dependencies import get_optional_principal, get_storage_service
from app.database import get_db
from app.policies.ability import Principal
from app.services.storage_service import StorageService


async def get_context(
    db: Session = Depends(get_db),
    principal: Optional[Principal] = Depends(get_optional_principal),
    storage: Optional[StorageService] = Depends(get_storage_service),
) -> dict:
    """
    Build the resolver context. Strawberry adds "request" and "response"
    (the response is used to set and clear the auth cookie).
    """
    return {
        "db": db,
        "principal": principal,
        "storage": storage,
    }
