import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from app.core.config import DEFAULT_AVATAR_URL
from app.database import Base


class Admin(Base):
    """
    Admin account. Registering an admin opens a business; business_id is the
    tenant key shared by the employees, products and sales the admin manages.
    """
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    business_id = Column(String(36), nullable=False, index=True, default=lambda: str(uuid.uuid4()))
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)
    user_name = Column(String(100), nullable=True)
    email = Column(String(100), unique=True, index=True, nullable=False)
    phone = Column(String(20), nullable=True)
    role = Column(String(20), nullable=False, default="ADMIN")
    avatar = Column(String(500), nullable=False, default=DEFAULT_AVATAR_URL)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
