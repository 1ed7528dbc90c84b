"""Pydantic DTOs for dashboard statistics."""

from pydantic import BaseModel

from .order import OrderResponse
from .product import ProductResponse


class TopProductResponse(BaseModel):
    product: ProductResponse
    ordered_quantity: int

    model_config = {"from_attributes": True}


class DashboardStatsResponse(BaseModel):
    total_users: int
    total_products: int
    total_orders: int
    total_revenue: float
    recent_orders: list[OrderResponse]
    top_products: list[TopProductResponse]

    model_config = {"from_attributes": True}
