from datetime import datetime
from typing import List, Optional

import strawberry

# Resolvers return ORM rows; strawberry reads these fields off them by attribute.
# Secret columns (password hashes) are simply not part of any type.


@strawberry.type(name="Admin")
class AdminType:
    id: strawberry.ID
    business_id: strawberry.ID
    first_name: str
    last_name: Optional[str]
    user_name: Optional[str]
    email: str
    phone: Optional[str]
    role: str
    avatar: str
    created_at: datetime
    updated_at: datetime


@strawberry.type(name="Cart")
class CartType:
    id: strawberry.ID
    customer_id: strawberry.ID
    product_id: Optional[strawberry.ID]
    quantity: int
    created_at: datetime
    updated_at: datetime


@strawberry.type(name="Customer")
class CustomerType:
    id: strawberry.ID
    first_name: str
    last_name: Optional[str]
    user_name: Optional[str]
    email: str
    phone: Optional[str]
    address: Optional[str]
    role: str
    avatar: str
    created_at: datetime
    updated_at: datetime
    carts: List[CartType]


@strawberry.type(name="Attendance")
class AttendanceType:
    id: strawberry.ID
    employee_id: strawberry.ID
    clock_in: datetime
    clock_out: Optional[datetime]
    note: Optional[str]
    employee: Optional["EmployeeType"] = None


@strawberry.type(name="Employee")
class EmployeeType:
    id: strawberry.ID
    business_id: strawberry.ID
    first_name: str
    last_name: Optional[str]
    email: str
    phone: Optional[str]
    position: Optional[str]
    salary: Optional[float]
    avatar: str
    created_at: datetime
    updated_at: datetime
    attendance: List[AttendanceType]

    @classmethod
    def from_model(cls, employee) -> "EmployeeType":
        """Detached copy of an employee row, safe to hand to subscribers after the session closes"""
        return cls(
            id=employee.id,
            business_id=employee.business_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            phone=employee.phone,
            position=employee.position,
            salary=employee.salary,
            avatar=employee.avatar,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
            attendance=[
                AttendanceType(
                    id=record.id,
                    employee_id=record.employee_id,
                    clock_in=record.clock_in,
                    clock_out=record.clock_out,
                    note=record.note,
                )
                for record in employee.attendance
            ],
        )


@strawberry.type(name="EmployeeDeleted")
class EmployeeDeletedType:
    id: strawberry.ID
    business_id: strawberry.ID


@strawberry.type(name="Product")
class ProductType:
    id: strawberry.ID
    business_id: strawberry.ID
    name: str
    description: Optional[str]
    price: float
    quantity: int
    category: Optional[str]
    sku: Optional[str]
    image: Optional[str]
    created_at: datetime
    updated_at: datetime
    updated_by: Optional[strawberry.ID]


@strawberry.type(name="Sale")
class SaleType:
    id: strawberry.ID
    business_id: strawberry.ID
    employee_id: Optional[strawberry.ID]
    product_id: Optional[strawberry.ID]
    quantity: int
    amount: float
    created_at: datetime
    updated_at: datetime
    employee: Optional[EmployeeType]
    product: Optional[ProductType]
