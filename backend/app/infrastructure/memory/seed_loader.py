"""Loads the demo catalogue (users, products, orders) from a YAML file."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from app.domain.entities import Address, Order, OrderItem, Product, User

logger = logging.getLogger(__name__)


@dataclass
class SeedData:
    users: list[User] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)


class SeedLoader:
    """Reads ``seed.yaml`` and builds domain entities from it.

    Expected structure::

        addresses:
          home: {street: ..., city: ..., state: ..., zip_code: ..., country: ...}
        users:
          - {id: "1", name: ..., email: ..., role: admin, created_at: 2024-01-15T10:00:00Z}
        products:
          - {id: "1", name: ..., price: 199.99, ...}
        orders:
          - {id: "1", user_id: "2", address: home, items: [{product_id: "1", quantity: 1}], ...}

    Order item prices are taken from the product list unless given
    explicitly; totals are computed from the items.
    """

    def __init__(self, seed_file: str | Path):
        self._path = Path(seed_file)

    def load(self) -> SeedData:
        if not self._path.exists():
            logger.warning("Seed file %s not found, starting with empty collections", self._path)
            return SeedData()

        with open(self._path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        return self.parse(raw)

    @classmethod
    def parse(cls, raw: dict[str, Any]) -> SeedData:
        addresses = {
            key: Address(**value) for key, value in (raw.get("addresses") or {}).items()
        }
        users = [cls._parse_user(u) for u in raw.get("users") or []]
        products = [cls._parse_product(p) for p in raw.get("products") or []]
        prices = {p.id: p.price for p in products}
        orders = [cls._parse_order(o, addresses, prices) for o in raw.get("orders") or []]

        logger.info(
            "Loaded seed data: %d users, %d products, %d orders",
            len(users), len(products), len(orders),
        )
        return SeedData(users=users, products=products, orders=orders)

    @staticmethod
    def _parse_user(data: dict[str, Any]) -> User:
        created_at = _as_datetime(data["created_at"])
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            role=data.get("role", "user"),
            avatar=data.get("avatar"),
            created_at=created_at,
            updated_at=_as_datetime(data.get("updated_at", created_at)),
        )

    @staticmethod
    def _parse_product(data: dict[str, Any]) -> Product:
        created_at = _as_datetime(data["created_at"])
        return Product(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description", ""),
            price=float(data["price"]),
            category=data["category"],
            stock=int(data.get("stock", 0)),
            image_url=data.get("image_url"),
            created_at=created_at,
            updated_at=_as_datetime(data.get("updated_at", created_at)),
        )

    @staticmethod
    def _parse_order(
        data: dict[str, Any],
        addresses: dict[str, Address],
        prices: dict[str, float],
    ) -> Order:
        order_id = str(data["id"])
        items = []
        for index, item in enumerate(data.get("items") or []):
            product_id = str(item["product_id"])
            items.append(
                OrderItem(
                    id=str(item.get("id", f"item-{product_id}-{index}")),
                    product_id=product_id,
                    quantity=int(item["quantity"]),
                    price=float(item.get("price", prices[product_id])),
                )
            )

        address = data["address"]
        shipping_address = addresses[address] if isinstance(address, str) else Address(**address)

        created_at = _as_datetime(data["created_at"])
        return Order(
            id=order_id,
            user_id=str(data["user_id"]),
            items=items,
            total=round(sum(i.line_total for i in items), 2),
            status=data.get("status", "pending"),
            shipping_address=shipping_address,
            created_at=created_at,
            updated_at=_as_datetime(data.get("updated_at", created_at)),
        )


def _as_datetime(value: Any) -> datetime:
    # PyYAML already parses unquoted ISO timestamps.
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
