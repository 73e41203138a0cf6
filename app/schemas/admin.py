from pydantic import BaseModel, Field, EmailStr, field_validator
from typing import Optional


class AdminLogin(BaseModel):
    email: EmailStr = Field(..., description="Admin email address")
    password: str = Field(..., min_length=1, description="Admin password")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "admin@example.com",
                "password": "myPassword123"
            }
        }


class AdminBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100, description="First name (required, max 100 characters)")
    last_name: Optional[str] = Field(None, max_length=100, description="Last name (optional)")
    user_name: Optional[str] = Field(None, max_length=100, description="Display name, defaults to the first name")
    email: EmailStr = Field(..., description="Admin email address (required)")
    phone: Optional[str] = Field(None, max_length=20, description="Phone number (optional, max 20 characters)")

    @field_validator('first_name')
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        if not v or not v.strip():
            raise ValueError(f'{info.field_name} cannot be empty or whitespace only')
        return v.strip()


class AdminCreate(AdminBase):
    password: str = Field(
        min_length=8,
        description="Password (minimum 8 characters)",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "first_name": "Jane",
                "last_name": "Doe",
                "email": "jane@example.com",
                "phone": "1234567890",
                "password": "myPassword123"
            }
        }


class AdminUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    user_name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    password: Optional[str] = Field(None, min_length=8)
