"""Pydantic DTOs (Data Transfer Objects) for the Order feature."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

Status = Literal["pending", "processing", "shipped", "delivered", "cancelled"]


class AddressSchema(BaseModel):
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)

    model_config = {"from_attributes": True}


class OrderItemCreate(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=1)


class OrderCreate(BaseModel):
    """Schema for creating a new order: prices are looked up server-side."""

    user_id: str
    items: list[OrderItemCreate] = Field(..., min_length=1)
    shipping_address: AddressSchema


class OrderUpdate(BaseModel):
    """Schema for updating an order: items and total are immutable."""

    status: Status | None = None
    shipping_address: AddressSchema | None = None


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    price: float

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    user_id: str
    items: list[OrderItemResponse]
    total: float
    status: Status
    shipping_address: AddressSchema
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
