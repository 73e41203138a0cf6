from pydantic import BaseModel, Field, EmailStr, field_validator
from typing import Optional
from datetime import datetime


class EmployeeBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100, description="First name (required, max 100 characters)")
    last_name: Optional[str] = Field(None, max_length=100, description="Last name (optional)")
    email: EmailStr = Field(..., description="Employee email address (required)")
    phone: Optional[str] = Field(None, max_length=20, description="Phone number (optional, max 20 characters)")
    position: Optional[str] = Field(None, max_length=100, description="Job title (optional)")
    salary: Optional[float] = Field(None, ge=0, description="Salary (optional, 0 or greater)")

    @field_validator('first_name')
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        if not v or not v.strip():
            raise ValueError(f'{info.field_name} cannot be empty or whitespace only')
        return v.strip()


class EmployeeCreate(EmployeeBase):
    class Config:
        json_schema_extra = {
            "example": {
                "first_name": "John",
                "last_name": "Doe",
                "email": "john@example.com",
                "phone": "1234567890",
                "position": "Cashier",
                "salary": 2500
            }
        }


class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    position: Optional[str] = Field(None, max_length=100)
    salary: Optional[float] = Field(None, ge=0)


class AttendanceCreate(BaseModel):
    clock_in: Optional[datetime] = Field(None, description="Clock-in time, defaults to now")
    note: Optional[str] = Field(None, max_length=255)


class AttendanceUpdate(BaseModel):
    clock_out: Optional[datetime] = Field(None, description="Clock-out time, defaults to now")
    note: Optional[str] = Field(None, max_length=255)
