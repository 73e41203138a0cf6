import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.config import DEFAULT_AVATAR_URL
from app.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    business_id = Column(String(36), nullable=False, index=True)
    first_name = Column(String(100), index=True, nullable=False)
    last_name = Column(String(100), nullable=True)
    email = Column(String(100), index=True, nullable=False)  # Not unique globally, one business may share inboxes
    phone = Column(String(20), nullable=True)
    position = Column(String(100), nullable=True)
    salary = Column(Float, nullable=True)
    avatar = Column(String(500), nullable=False, default=DEFAULT_AVATAR_URL)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    attendance = relationship(
        "Attendance",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="Attendance.clock_in",
    )


class Attendance(Base):
    __tablename__ = "attendance"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    employee_id = Column(String(36), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    clock_in = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    clock_out = Column(DateTime(timezone=True), nullable=True)
    note = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    employee = relationship("Employee", back_populates="attendance")
