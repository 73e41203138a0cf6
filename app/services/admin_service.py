import logging
from typing import List, Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import ADMIN_AVATAR_FOLDER, DEFAULT_AVATAR_URL
from app.core.security import hash_password, verify_password
from app.models.admin import Admin
from app.schemas.admin import AdminCreate, AdminLogin, AdminUpdate
from app.services.storage_service import StorageService
from app.services.uploads import replace_image, reset_image

logger = logging.getLogger(__name__)


def register_admin(db: Session, admin_data: AdminCreate) -> Admin:
    """Create an admin account; every new admin opens a new business"""
    existing_admin = db.query(Admin).filter(Admin.email == admin_data.email).first()
    if existing_admin:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    db_admin = Admin(
        first_name=admin_data.first_name,
        last_name=admin_data.last_name,
        user_name=admin_data.user_name or admin_data.first_name,
        email=admin_data.email,
        phone=admin_data.phone,
        password=hash_password(admin_data.password),
    )
    try:
        db.add(db_admin)
        db.commit()
        db.refresh(db_admin)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    logger.info(f"Admin account created: {db_admin.email} (ID: {db_admin.id}, Business ID: {db_admin.business_id})")
    return db_admin


def login_admin(db: Session, login_data: AdminLogin) -> Admin:
    db_admin = db.query(Admin).filter(Admin.email == login_data.email).first()
    if not db_admin:
        logger.warning(f"Admin login failed, unknown email: {login_data.email}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No record found for this email")

    if not verify_password(login_data.password, db_admin.password):
        logger.warning(f"Admin login failed, wrong password: {login_data.email}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid password")

    logger.info(f"Admin logged in: {db_admin.email}")
    return db_admin


def get_admins(db: Session, business_id: str) -> List[Admin]:
    return db.query(Admin).filter(Admin.business_id == business_id).order_by(Admin.created_at).all()


def get_admin(db: Session, admin_id: str, business_id: Optional[str] = None) -> Admin:
    query = db.query(Admin).filter(Admin.id == admin_id)
    if business_id is not None:
        query = query.filter(Admin.business_id == business_id)
    db_admin = query.first()
    if db_admin is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return db_admin


def update_admin(db: Session, admin_id: str, admin_update: AdminUpdate, business_id: str) -> Admin:
    db_admin = get_admin(db, admin_id, business_id)

    # Check if email is being changed and if it's already taken
    if admin_update.email and admin_update.email != db_admin.email:
        email_exists = db.query(Admin).filter(Admin.email == admin_update.email).first()
        if email_exists:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    update_data = admin_update.model_dump(exclude_unset=True, exclude_none=True)

    # Handle password separately if provided
    if update_data.get("password"):
        update_data["password"] = hash_password(update_data["password"])
    else:
        update_data.pop("password", None)

    for field, value in update_data.items():
        setattr(db_admin, field, value)

    db.commit()
    db.refresh(db_admin)
    return db_admin


async def update_admin_avatar(
    db: Session,
    admin_id: str,
    avatar: UploadFile,
    storage: Optional[StorageService],
    business_id: str,
) -> bool:
    db_admin = get_admin(db, admin_id, business_id)
    return await replace_image(db, db_admin, "avatar", avatar, ADMIN_AVATAR_FOLDER, storage)


def delete_admin_avatar(
    db: Session,
    admin_id: str,
    storage: Optional[StorageService],
    business_id: str,
) -> bool:
    db_admin = get_admin(db, admin_id, business_id)
    return reset_image(db, db_admin, "avatar", DEFAULT_AVATAR_URL, storage)


def delete_admin(db: Session, admin_id: str, business_id: str) -> bool:
    db_admin = get_admin(db, admin_id, business_id)
    db.delete(db_admin)
    db.commit()
    logger.info(f"Admin deleted: {admin_id}")
    return True
