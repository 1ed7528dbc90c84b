"""Unit tests for the YAML seed loader."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from app.infrastructure.memory import SeedLoader

SEED_FILE = Path(__file__).resolve().parents[2] / "data" / "seed.yaml"


def test_bundled_seed_file_loads():
    data = SeedLoader(SEED_FILE).load()

    assert [u.id for u in data.users] == ["1", "2", "3", "4"]
    assert [p.id for p in data.products] == ["1", "2", "3", "4", "5"]
    assert [o.id for o in data.orders] == ["1", "2", "3", "4"]
    assert data.users[0].role == "admin"
    assert data.users[0].created_at == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


def test_order_items_and_totals_are_derived_from_products():
    data = SeedLoader(SEED_FILE).load()
    orders = {o.id: o for o in data.orders}

    first = orders["1"]
    assert [(i.id, i.product_id, i.quantity, i.price) for i in first.items] == [
        ("item-1-0", "1", 1, 199.99),
        ("item-4-1", "4", 2, 24.99),
    ]
    assert first.total == 249.97
    assert first.shipping_address.city == "New York"
    assert orders["4"].total == 774.94


def test_missing_updated_at_defaults_to_created_at():
    data = SeedLoader(SEED_FILE).load()
    order = next(o for o in data.orders if o.id == "3")
    assert order.updated_at == order.created_at


def test_missing_file_gives_empty_collections(tmp_path):
    data = SeedLoader(tmp_path / "absent.yaml").load()
    assert data.users == [] and data.products == [] and data.orders == []


def test_parse_accepts_inline_address_and_explicit_item_price():
    raw = {
        "products": [
            {"id": 7, "name": "Mug", "price": 10, "category": "Home", "created_at": "2024-02-01T00:00:00Z"},
        ],
        "orders": [
            {
                "id": 1,
                "user_id": 2,
                "address": {"street": "1 Lane", "city": "Pune", "state": "MH", "zip_code": "411001", "country": "India"},
                "items": [{"product_id": 7, "quantity": 3, "price": 8.5}],
                "created_at": "2024-02-02T00:00:00Z",
            }
        ],
    }

    data = SeedLoader.parse(raw)

    [order] = data.orders
    assert order.items[0].price == 8.5
    assert order.total == 25.5
    assert order.shipping_address.city == "Pune"
    assert order.user_id == "2"
    assert order.status == "pending"


def test_unknown_product_in_order_is_an_error():
    raw = {"orders": [{"id": 1, "user_id": 1, "address": {}, "items": [{"product_id": 99, "quantity": 1}], "created_at": "2024-02-02T00:00:00Z"}]}
    with pytest.raises(KeyError):
        SeedLoader.parse(raw)
