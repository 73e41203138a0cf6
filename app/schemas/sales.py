from pydantic import BaseModel, Field
from typing import Optional


class SaleBase(BaseModel):
    employee_id: str = Field(..., min_length=1, description="Employee who made the sale")
    product_id: str = Field(..., min_length=1, description="Product sold")
    # pydantic coerces numeric strings: amount to float, quantity to int
    amount: float = Field(..., ge=0, description="Total amount of the sale")
    quantity: int = Field(..., ge=1, description="Number of units sold")


class SaleCreate(SaleBase):
    class Config:
        json_schema_extra = {
            "example": {
                "employee_id": "5b0f6a52-6c1f-4a53-9df4-0c1f3f5e8a11",
                "product_id": "0e6a2c1d-3b4f-4c5d-8e9f-a1b2c3d4e5f6",
                "amount": 49.98,
                "quantity": 2
            }
        }


class SaleUpdate(BaseModel):
    employee_id: Optional[str] = Field(None, min_length=1)
    product_id: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0)
    quantity: Optional[int] = Field(None, ge=1)
