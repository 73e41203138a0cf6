import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from app.core.dependencies import check_policies, get_storage_service
from app.core.pubsub import EMPLOYEE_UPDATED, pubsub
from app.database import get_db
from app.graphql.types import EmployeeType
from app.policies.ability import Principal
from app.policies.handlers import UpdateEmployeePolicyHandler
from app.services import employee_service
from app.services.storage_service import StorageService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/{employee_id}/avatar", status_code=status.HTTP_200_OK)
async def upload_employee_avatar(
    employee_id: str,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: Optional[StorageService] = Depends(get_storage_service),
    principal: Principal = Depends(check_policies(UpdateEmployeePolicyHandler())),
):
    """Upload an employee avatar as multipart form data - requires update Employee policy"""
    await employee_service.update_employee_avatar(db, employee_id, file, storage, principal.business_id)
    db_employee = employee_service.get_employee(db, employee_id, principal.business_id)
    pubsub.publish(EMPLOYEE_UPDATED, EmployeeType.from_model(db_employee))
    logger.info(f"Avatar uploaded for employee {employee_id} by {principal.email}")
    return {"id": db_employee.id, "avatar": db_employee.avatar}


@router.delete("/{employee_id}/avatar", status_code=status.HTTP_200_OK)
def delete_employee_avatar(
    employee_id: str,
    db: Session = Depends(get_db),
    storage: Optional[StorageService] = Depends(get_storage_service),
    principal: Principal = Depends(check_policies(UpdateEmployeePolicyHandler())),
):
    """Reset an employee avatar to the default image - requires update Employee policy"""
    employee_service.delete_employee_avatar(db, employee_id, storage, principal.business_id)
    db_employee = employee_service.get_employee(db, employee_id, principal.business_id)
    pubsub.publish(EMPLOYEE_UPDATED, EmployeeType.from_model(db_employee))
    return {"id": db_employee.id, "avatar": db_employee.avatar}
