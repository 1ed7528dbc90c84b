"""Domain value object for dashboard statistics."""

from dataclasses import dataclass, field

from .order import Order
from .product import Product


@dataclass
class TopProduct:
    product: Product
    ordered_quantity: int


@dataclass
class DashboardStats:
    total_users: int
    total_products: int
    total_orders: int
    total_revenue: float
    recent_orders: list[Order] = field(default_factory=list)
    top_products: list[TopProduct] = field(default_factory=list)
