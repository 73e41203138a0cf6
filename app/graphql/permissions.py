from typing import Any, Type

from fastapi import HTTPException, status
from strawberry.permission import BasePermission
from strawberry.types import Info

from app.policies.ability import Action, Principal, Subject, define_ability_for
from app.policies.handlers import PolicyHandler


def current_principal(info: Info) -> Principal:
    principal = info.context.get("principal")
    if principal is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return principal


class IsAuthenticated(BasePermission):
    message = "Unauthorized"

    def has_permission(self, source: Any, info: Info, **kwargs) -> bool:
        current_principal(info)
        return True


class PolicyPermission(BasePermission):
    message = "Forbidden resource"
    handler: PolicyHandler

    def has_permission(self, source: Any, info: Info, **kwargs) -> bool:
        ability = define_ability_for(current_principal(info))
        if not self.handler.handle(ability):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=self.message)
        return True


def check_policies(handler_class: Type[PolicyHandler]) -> Type[BasePermission]:
    """Wrap a policy handler as a strawberry permission class"""
    return type(
        f"{handler_class.__name__}Permission",
        (PolicyPermission,),
        {"handler": handler_class()},
    )


def guarded(handler_class: Type[PolicyHandler]) -> list:
    """Permission classes for a resolver: authenticated caller plus one policy"""
    return [IsAuthenticated, check_policies(handler_class)]


def authorize(info: Info, action: Action, subject: Subject, record: Any) -> None:
    """Check the caller's ability against a concrete record"""
    if define_ability_for(current_principal(info)).cannot(action, subject, record):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden resource")
