"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating a new product."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Yoga Mat Premium"])
    description: str = Field("", examples=["Non-slip yoga mat made from eco-friendly materials."])
    price: float = Field(..., ge=0, examples=[39.99])
    category: str = Field(..., min_length=1, max_length=100, examples=["Sports & Fitness"])
    stock: int = Field(0, ge=0)
    image_url: str | None = None


class ProductUpdate(BaseModel):
    """Schema for updating an existing product: all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1, max_length=100)
    stock: int | None = Field(None, ge=0)
    image_url: str | None = None


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    description: str
    price: float
    category: str
    stock: int
    image_url: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
