from datetime import datetime
from typing import Optional, Type, TypeVar

import strawberry
from pydantic import BaseModel

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def to_schema(schema_cls: Type[SchemaT], data) -> SchemaT:
    """
    Validate a GraphQL input object with its pydantic schema.
    Fields left UNSET are omitted so update schemas only see what was sent.
    """
    values = {key: value for key, value in vars(data).items() if value is not strawberry.UNSET}
    return schema_cls(**values)


# Admin

@strawberry.input
class CreateAdminInput:
    first_name: str
    email: str
    password: str
    last_name: Optional[str] = None
    user_name: Optional[str] = None
    phone: Optional[str] = None


@strawberry.input
class LoginAdminInput:
    email: str
    password: str


@strawberry.input
class UpdateAdminInput:
    first_name: Optional[str] = strawberry.UNSET
    last_name: Optional[str] = strawberry.UNSET
    user_name: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    phone: Optional[str] = strawberry.UNSET
    password: Optional[str] = strawberry.UNSET


# Customer

@strawberry.input
class CreateCustomerInput:
    first_name: str
    email: str
    password: str
    last_name: Optional[str] = None
    user_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


@strawberry.input
class LoginCustomerInput:
    email: str
    password: str


@strawberry.input
class UpdateCustomerInput:
    first_name: Optional[str] = strawberry.UNSET
    last_name: Optional[str] = strawberry.UNSET
    user_name: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    phone: Optional[str] = strawberry.UNSET
    address: Optional[str] = strawberry.UNSET
    password: Optional[str] = strawberry.UNSET


@strawberry.input
class CreateCartInput:
    product_id: Optional[strawberry.ID] = None
    quantity: int = 1


@strawberry.input
class UpdateCartInput:
    product_id: Optional[strawberry.ID] = strawberry.UNSET
    quantity: Optional[int] = strawberry.UNSET


# Employee

@strawberry.input
class CreateEmployeeInput:
    first_name: str
    email: str
    last_name: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[float] = None


@strawberry.input
class UpdateEmployeeInput:
    first_name: Optional[str] = strawberry.UNSET
    last_name: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    phone: Optional[str] = strawberry.UNSET
    position: Optional[str] = strawberry.UNSET
    salary: Optional[float] = strawberry.UNSET


@strawberry.input
class CreateAttendanceInput:
    clock_in: Optional[datetime] = strawberry.UNSET
    note: Optional[str] = strawberry.UNSET


@strawberry.input
class UpdateAttendanceInput:
    clock_out: Optional[datetime] = strawberry.UNSET
    note: Optional[str] = strawberry.UNSET


# Product

@strawberry.input
class CreateProductInput:
    name: str
    price: float
    quantity: int = 0
    description: Optional[str] = None
    category: Optional[str] = None
    sku: Optional[str] = None


@strawberry.input
class UpdateProductInput:
    name: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    price: Optional[float] = strawberry.UNSET
    quantity: Optional[int] = strawberry.UNSET
    category: Optional[str] = strawberry.UNSET
    sku: Optional[str] = strawberry.UNSET


# Sale

@strawberry.input
class CreateSaleInput:
    employee_id: strawberry.ID
    product_id: strawberry.ID
    amount: float
    quantity: int


@strawberry.input
class UpdateSaleInput:
    employee_id: Optional[strawberry.ID] = strawberry.UNSET
    product_id: Optional[strawberry.ID] = strawberry.UNSET
    amount: Optional[float] = strawberry.UNSET
    quantity: Optional[int] = strawberry.UNSET
