"""Domain entities for orders: line items carry a price snapshot."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal
from uuid import uuid4

OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]

ORDER_STATUSES: tuple[str, ...] = (
    "pending",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
)


@dataclass
class Address:
    """Shipping address attached to an order."""

    street: str
    city: str
    state: str
    zip_code: str
    country: str


@dataclass
class OrderItem:
    """A single order line.

    ``price`` is the product price captured when the order was created and
    is never re-read from the catalogue afterwards.
    """

    product_id: str
    quantity: int
    price: float
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@dataclass
class Order:
    """Core domain entity for a customer order."""

    user_id: str
    items: list[OrderItem]
    total: float
    shipping_address: Address
    status: OrderStatus = "pending"
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        status: OrderStatus | None = None,
        shipping_address: Address | None = None,
    ) -> None:
        """Update status/address and refresh the updated_at timestamp.

        Items and total are fixed at creation time.
        """
        if status is not None:
            self.status = status
        if shipping_address is not None:
            self.shipping_address = shipping_address
        self.updated_at = datetime.now(timezone.utc)
