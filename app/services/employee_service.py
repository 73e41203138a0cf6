import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.core.config import DEFAULT_AVATAR_URL, EMPLOYEE_AVATAR_FOLDER
from app.models.employees import Attendance, Employee
from app.schemas.employees import AttendanceCreate, AttendanceUpdate, EmployeeCreate, EmployeeUpdate
from app.services.storage_service import StorageService
from app.services.uploads import replace_image, reset_image, upload_image

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; treat them as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def create_employee(
    db: Session,
    employee_data: EmployeeCreate,
    business_id: str,
    avatar_url: Optional[str] = None,
) -> Employee:
    db_employee = Employee(business_id=business_id, **employee_data.model_dump())
    if avatar_url:
        db_employee.avatar = avatar_url
    db.add(db_employee)
    db.commit()
    db.refresh(db_employee)
    logger.info(f"Employee created: {db_employee.first_name} (ID: {db_employee.id}, Business ID: {business_id})")
    return db_employee


async def register_employee(
    db: Session,
    employee_data: EmployeeCreate,
    business_id: str,
    avatar: Optional[UploadFile],
    storage: Optional[StorageService],
) -> Employee:
    """Create an employee, uploading the avatar first so a failed upload leaves no record behind"""
    avatar_url = await upload_image(avatar, EMPLOYEE_AVATAR_FOLDER, storage) if avatar is not None else None
    return create_employee(db, employee_data, business_id, avatar_url)


def get_employees(db: Session, business_id: str) -> List[Employee]:
    return (
        db.query(Employee)
        .filter(Employee.business_id == business_id)
        .order_by(Employee.created_at)
        .all()
    )


def get_employee(db: Session, employee_id: str, business_id: str) -> Employee:
    db_employee = db.query(Employee).filter(
        Employee.id == employee_id,
        Employee.business_id == business_id
    ).first()
    if db_employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return db_employee


def update_employee(db: Session, employee_id: str, employee_update: EmployeeUpdate, business_id: str) -> Employee:
    db_employee = get_employee(db, employee_id, business_id)

    for field, value in employee_update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_employee, field, value)

    db.commit()
    db.refresh(db_employee)
    return db_employee


async def update_employee_avatar(
    db: Session,
    employee_id: str,
    avatar: UploadFile,
    storage: Optional[StorageService],
    business_id: str,
) -> bool:
    db_employee = get_employee(db, employee_id, business_id)
    return await replace_image(db, db_employee, "avatar", avatar, EMPLOYEE_AVATAR_FOLDER, storage)


def delete_employee_avatar(
    db: Session,
    employee_id: str,
    storage: Optional[StorageService],
    business_id: str,
) -> bool:
    db_employee = get_employee(db, employee_id, business_id)
    return reset_image(db, db_employee, "avatar", DEFAULT_AVATAR_URL, storage)


def delete_employee(db: Session, employee_id: str, business_id: str) -> bool:
    db_employee = get_employee(db, employee_id, business_id)
    db.delete(db_employee)
    db.commit()
    logger.info(f"Employee deleted: {employee_id}")
    return True


# Attendance

def clock_in(db: Session, employee_id: str, attendance_data: AttendanceCreate, business_id: str) -> Employee:
    db_employee = get_employee(db, employee_id, business_id)
    db_employee.attendance.append(
        Attendance(
            clock_in=attendance_data.clock_in or datetime.now(timezone.utc),
            note=attendance_data.note,
        )
    )
    db.commit()
    db.refresh(db_employee)
    return db_employee


def clock_out(
    db: Session,
    employee_id: str,
    attendance_id: str,
    attendance_update: AttendanceUpdate,
    business_id: str,
) -> Employee:
    db_employee = get_employee(db, employee_id, business_id)
    db_attendance = db.query(Attendance).filter(
        Attendance.id == attendance_id,
        Attendance.employee_id == db_employee.id
    ).first()
    if db_attendance is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Attendance not found")

    clock_out_time = attendance_update.clock_out or datetime.now(timezone.utc)
    if _as_utc(clock_out_time) < _as_utc(db_attendance.clock_in):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Clock-out time cannot be before clock-in time"
        )

    db_attendance.clock_out = clock_out_time
    if attendance_update.note is not None:
        db_attendance.note = attendance_update.note

    db.commit()
    db.refresh(db_employee)
    return db_employee


def get_attendance(db: Session, business_id: str) -> List[Attendance]:
    return (
        db.query(Attendance)
        .join(Employee)
        .filter(Employee.business_id == business_id)
        .order_by(Attendance.clock_in)
        .all()
    )


def get_attendance_by_id(db: Session, attendance_id: str, business_id: str) -> Attendance:
    db_attendance = (
        db.query(Attendance)
        .join(Employee)
        .filter(Attendance.id == attendance_id, Employee.business_id == business_id)
        .first()
    )
    if db_attendance is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Attendance not found")
    return db_attendance
