"""Unit tests for the DashboardService."""

from datetime import datetime, timedelta, timezone

import pytest

from app.application.services import DashboardService
from app.domain.entities import Address, Order, OrderItem, Product, User
from app.infrastructure.memory import InMemoryRecordRepository

_ADDRESS = Address(street="1 St", city="Pune", state="MH", zip_code="411001", country="India")
_T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _order(order_id: str, day: int, items: list[tuple[str, int, float]]) -> Order:
    line_items = [OrderItem(product_id=p, quantity=q, price=price) for p, q, price in items]
    return Order(
        id=order_id,
        user_id="u1",
        items=line_items,
        total=round(sum(i.line_total for i in line_items), 2),
        shipping_address=_ADDRESS,
        created_at=_T0 + timedelta(days=day),
    )


@pytest.fixture
def service() -> DashboardService:
    users = InMemoryRecordRepository([User(id="u1", name="A", email="a@example.com")])
    products = InMemoryRecordRepository(
        [
            Product(id=f"p{i}", name=f"Product {i}", description="", price=10.0 * i, category="c")
            for i in range(1, 8)
        ]
    )
    orders = InMemoryRecordRepository(
        [
            _order("o1", 1, [("p1", 1, 10.0)]),
            _order("o2", 2, [("p2", 5, 20.0), ("p3", 1, 30.0)]),
            _order("o3", 3, [("p3", 2, 30.0)]),
            _order("o4", 4, [("p4", 4, 40.0)]),
            _order("o5", 5, [("p5", 1, 50.0)]),
            _order("o6", 6, [("p6", 2, 60.0)]),
        ]
    )
    return DashboardService(users, products, orders)


@pytest.mark.asyncio
async def test_totals(service: DashboardService):
    stats = await service.get_stats()
    assert stats.total_users == 1
    assert stats.total_products == 7
    assert stats.total_orders == 6
    assert stats.total_revenue == pytest.approx(10 + 130 + 60 + 160 + 50 + 120)


@pytest.mark.asyncio
async def test_recent_orders_are_the_five_newest(service: DashboardService):
    stats = await service.get_stats()
    assert [o.id for o in stats.recent_orders] == ["o6", "o5", "o4", "o3", "o2"]


@pytest.mark.asyncio
async def test_top_products_by_ordered_quantity(service: DashboardService):
    stats = await service.get_stats()
    assert [t.product.id for t in stats.top_products] == ["p2", "p4", "p3", "p6", "p1"]
    assert [t.ordered_quantity for t in stats.top_products] == [5, 4, 3, 2, 1]
