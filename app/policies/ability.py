"""
Role based abilities.

Each role maps to a static list of rules. A rule grants an action on a
subject, optionally narrowed by a condition evaluated against a concrete
record. `manage` matches every action and `all` matches every subject.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple


class Role(str, Enum):
    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"


class Action(str, Enum):
    MANAGE = "manage"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class Subject(str, Enum):
    ALL = "all"
    ADMIN = "Admin"
    CUSTOMER = "Customer"
    CART = "Cart"
    EMPLOYEE = "Employee"
    ATTENDANCE = "Attendance"
    PRODUCT = "Product"
    SALE = "Sale"


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, as loaded from the access token"""
    id: str
    role: str
    email: str
    business_id: Optional[str] = None


Condition = Callable[[Principal, Any], bool]


@dataclass(frozen=True)
class Rule:
    action: Action
    subject: Subject
    condition: Optional[Condition] = field(default=None, compare=False)

    def matches(self, action: Action, subject: Subject) -> bool:
        return (
            self.action in (action, Action.MANAGE)
            and self.subject in (subject, Subject.ALL)
        )


def _is_self(principal: Principal, record: Any) -> bool:
    return getattr(record, "id", None) == principal.id


def _owns_cart(principal: Principal, record: Any) -> bool:
    return getattr(record, "customer_id", None) == principal.id


RULES: Dict[Role, Tuple[Rule, ...]] = {
    Role.ADMIN: (
        Rule(Action.MANAGE, Subject.ALL),
    ),
    Role.CUSTOMER: (
        Rule(Action.READ, Subject.CUSTOMER, _is_self),
        Rule(Action.UPDATE, Subject.CUSTOMER, _is_self),
        Rule(Action.DELETE, Subject.CUSTOMER, _is_self),
        Rule(Action.CREATE, Subject.CART, _owns_cart),
        Rule(Action.READ, Subject.CART, _owns_cart),
        Rule(Action.UPDATE, Subject.CART, _owns_cart),
        Rule(Action.DELETE, Subject.CART, _owns_cart),
        Rule(Action.READ, Subject.PRODUCT),
    ),
}


class Ability:
    def __init__(self, principal: Principal, rules: Tuple[Rule, ...]):
        self.principal = principal
        self.rules = rules

    def can(self, action: Action, subject: Subject, record: Any = None) -> bool:
        """
        Check whether the principal may perform `action` on `subject`.

        Without a record, a conditional rule is enough to pass: the caller
        may act on at least some records of that subject. With a record the
        rule's condition must hold for it.
        """
        for rule in self.rules:
            if not rule.matches(action, subject):
                continue
            if record is None or rule.condition is None:
                return True
            if rule.condition(self.principal, record):
                return True
        return False

    def cannot(self, action: Action, subject: Subject, record: Any = None) -> bool:
        return not self.can(action, subject, record)


def define_ability_for(principal: Principal) -> Ability:
    try:
        role = Role(principal.role)
    except ValueError:
        return Ability(principal, ())
    return Ability(principal, RULES.get(role, ()))
