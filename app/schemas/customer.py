from pydantic import BaseModel, Field, EmailStr, field_validator
from typing import Optional


class CustomerLogin(BaseModel):
    email: EmailStr = Field(..., description="Customer email address")
    password: str = Field(..., min_length=1, description="Customer password")


class CustomerBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100, description="First name (required, max 100 characters)")
    last_name: Optional[str] = Field(None, max_length=100, description="Last name (optional)")
    user_name: Optional[str] = Field(None, max_length=100, description="Display name, defaults to the first name")
    email: EmailStr = Field(..., description="Customer email address (required)")
    phone: Optional[str] = Field(None, max_length=20, description="Phone number (optional, max 20 characters)")
    address: Optional[str] = Field(None, max_length=255, description="Delivery address (optional)")

    @field_validator('first_name')
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        if not v or not v.strip():
            raise ValueError(f'{info.field_name} cannot be empty or whitespace only')
        return v.strip()


class CustomerCreate(CustomerBase):
    password: str = Field(
        min_length=8,
        description="Password (minimum 8 characters)",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "first_name": "Ama",
                "email": "ama@example.com",
                "address": "12 High Street",
                "password": "myPassword123"
            }
        }


class CustomerUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    user_name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, min_length=8)


class CartCreate(BaseModel):
    product_id: Optional[str] = Field(None, max_length=36, description="Product placed in the cart")
    quantity: int = Field(1, ge=1, le=10000, description="Quantity (at least 1)")


class CartUpdate(BaseModel):
    product_id: Optional[str] = Field(None, max_length=36)
    quantity: Optional[int] = Field(None, ge=1, le=10000)
