from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session
from starlette.requests import HTTPConnection

from app.database import get_db
from app.models.admin import Admin
from app.models.customer import Customer
from app.core.security import decode_token, get_token_from_connection, is_access_token
from app.policies.ability import Principal, Role, define_ability_for
from app.services.storage_service import StorageService, storage_service


def load_principal(db: Session, token: Optional[str]) -> Optional[Principal]:
    """
    Resolve an access token to the account it was issued for.
    Returns None for a missing or invalid token, or when the account is gone.
    """
    if not token:
        return None

    payload = decode_token(token)
    if not is_access_token(payload):
        return None

    account_id = str(payload.get("sub"))
    role = payload.get("role")
    if role == Role.ADMIN.value:
        admin = db.query(Admin).filter(Admin.id == account_id).first()
        if admin:
            return Principal(id=admin.id, role=admin.role, email=admin.email, business_id=admin.business_id)
    elif role == Role.CUSTOMER.value:
        customer = db.query(Customer).filter(Customer.id == account_id).first()
        if customer:
            return Principal(id=customer.id, role=customer.role, email=customer.email)
    return None


def get_optional_principal(
    connection: HTTPConnection,
    db: Session = Depends(get_db),
) -> Optional[Principal]:
    return load_principal(db, get_token_from_connection(connection))


def get_current_principal(
    principal: Optional[Principal] = Depends(get_optional_principal),
) -> Principal:
    """
    Dependency to get the authenticated caller.
    Validates the access token cookie (or bearer header) and loads the account.
    """
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return principal


def check_policies(*handlers):
    """
    Dependency factory to check the caller's ability against policy handlers.
    Usage: Depends(check_policies(UpdateEmployeePolicyHandler()))
    """
    def policy_checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        ability = define_ability_for(principal)
        if not all(handler.handle(ability) for handler in handlers):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden resource",
            )
        return principal
    return policy_checker


def get_storage_service() -> Optional[StorageService]:
    return storage_service
