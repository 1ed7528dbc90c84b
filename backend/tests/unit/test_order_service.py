"""Unit tests for the OrderService: price snapshots, totals, and search."""

import pytest

from app.application.schemas import (
    AddressSchema,
    OrderCreate,
    OrderItemCreate,
    OrderUpdate,
    ProductUpdate,
)
from app.application.services import OrderService, ProductService
from app.domain.entities import Address, Order, OrderItem, Product, QueryParams, User
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.memory import InMemoryRecordRepository

ADDRESS = AddressSchema(
    street="123 Main St", city="New York", state="NY", zip_code="10001", country="USA"
)


@pytest.fixture
def products() -> InMemoryRecordRepository[Product]:
    return InMemoryRecordRepository(
        [
            Product(id="1", name="Headphones", description="", price=199.99, category="Electronics"),
            Product(id="4", name="Coffee Beans", description="", price=24.99, category="Food"),
        ]
    )


@pytest.fixture
def users() -> InMemoryRecordRepository[User]:
    return InMemoryRecordRepository(
        [
            User(id="2", name="Jane Smith", email="jane.smith@example.com"),
            User(id="3", name="Mike Johnson", email="mike.johnson@example.com"),
        ]
    )


@pytest.fixture
def orders() -> InMemoryRecordRepository[Order]:
    return InMemoryRecordRepository(
        [
            Order(
                id="1",
                user_id="2",
                items=[OrderItem(product_id="1", quantity=1, price=199.99)],
                total=199.99,
                status="delivered",
                shipping_address=Address(**ADDRESS.model_dump()),
            ),
            Order(
                id="2",
                user_id="3",
                items=[OrderItem(product_id="4", quantity=2, price=24.99)],
                total=49.98,
                status="pending",
                shipping_address=Address(**ADDRESS.model_dump()),
            ),
        ]
    )


@pytest.fixture
def service(orders, products, users) -> OrderService:
    return OrderService(orders, products, users)


@pytest.mark.asyncio
async def test_create_order_snapshots_prices_and_computes_total(service: OrderService):
    order = await service.create_record(
        OrderCreate(
            user_id="2",
            items=[
                OrderItemCreate(product_id="1", quantity=1),
                OrderItemCreate(product_id="4", quantity=2),
            ],
            shipping_address=ADDRESS,
        )
    )

    assert order.status == "pending"
    assert [i.price for i in order.items] == [199.99, 24.99]
    assert order.total == pytest.approx(249.97)


@pytest.mark.asyncio
async def test_later_price_change_does_not_touch_existing_orders(service: OrderService, products):
    order = await service.create_record(
        OrderCreate(
            user_id="3",
            items=[OrderItemCreate(product_id="1", quantity=2)],
            shipping_address=ADDRESS,
        )
    )

    await ProductService(products).update_record("1", ProductUpdate(price=149.99))

    stored = await service.get_record(order.id)
    assert stored.items[0].price == 199.99
    assert stored.total == pytest.approx(399.98)


@pytest.mark.asyncio
async def test_unknown_product_is_reported(service: OrderService):
    with pytest.raises(EntityNotFoundError) as exc_info:
        await service.create_record(
            OrderCreate(
                user_id="2",
                items=[OrderItemCreate(product_id="999", quantity=1)],
                shipping_address=ADDRESS,
            )
        )
    assert exc_info.value.entity_type == "Product"
    assert exc_info.value.entity_id == "999"


@pytest.mark.asyncio
async def test_unknown_user_is_reported(service: OrderService):
    with pytest.raises(EntityNotFoundError) as exc_info:
        await service.create_record(
            OrderCreate(
                user_id="nobody",
                items=[OrderItemCreate(product_id="1", quantity=1)],
                shipping_address=ADDRESS,
            )
        )
    assert exc_info.value.entity_type == "User"


@pytest.mark.asyncio
async def test_status_filter(service: OrderService):
    page = await service.list_records(QueryParams(status="PENDING"))
    assert [o.id for o in page.items] == ["2"]


@pytest.mark.asyncio
async def test_search_matches_customer_name_and_email(service: OrderService):
    page = await service.list_records(QueryParams(search="jane"))
    assert [o.id for o in page.items] == ["1"]

    page = await service.list_records(QueryParams(search="mike.johnson@"))
    assert [o.id for o in page.items] == ["2"]


@pytest.mark.asyncio
async def test_update_status_keeps_items_and_total(service: OrderService):
    updated = await service.update_record("2", OrderUpdate(status="shipped"))
    assert updated.status == "shipped"
    assert updated.total == 49.98
    assert len(updated.items) == 1


@pytest.mark.asyncio
async def test_update_shipping_address(service: OrderService):
    new_address = AddressSchema(
        street="789 Pine Rd", city="Chicago", state="IL", zip_code="60601", country="USA"
    )
    updated = await service.update_record("1", OrderUpdate(shipping_address=new_address))
    assert updated.shipping_address.city == "Chicago"
    assert updated.status == "delivered"
