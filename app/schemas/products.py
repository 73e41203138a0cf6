from pydantic import BaseModel, Field, field_validator
from typing import Optional

MAX_PRICE = 999999.99


def _check_price(v: Optional[float]) -> Optional[float]:
    if v is None:
        return v
    if v > MAX_PRICE:
        raise ValueError('Price cannot exceed 999,999.99')
    # Prices are stored with cent precision and must stay above zero once rounded
    v = round(v, 2)
    if v <= 0:
        raise ValueError('Price must be at least 0.01')
    return v


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Product name", examples=["Laptop"])
    description: Optional[str] = Field(None, max_length=255, description="Product description (optional)")
    price: float = Field(..., gt=0, description="Unit price, greater than 0", examples=[1499.99])
    quantity: int = Field(0, ge=0, description="Units in stock, 0 or greater")
    category: Optional[str] = Field(None, max_length=50, description="Category (optional)")
    sku: Optional[str] = Field(None, max_length=50, description="Stock Keeping Unit (optional)")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('name cannot be empty or whitespace only')
        return v.strip()

    @field_validator('price')
    @classmethod
    def validate_price(cls, v: float) -> float:
        return _check_price(v)


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=255)
    price: Optional[float] = Field(None, gt=0)
    quantity: Optional[int] = Field(None, ge=0)
    category: Optional[str] = Field(None, max_length=50)
    sku: Optional[str] = Field(None, max_length=50)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError('name cannot be empty or whitespace only')
        return v.strip() if v else v

    @field_validator('price')
    @classmethod
    def validate_price(cls, v: Optional[float]) -> Optional[float]:
        return _check_price(v)
