"""Application service for the admin dashboard statistics."""

from collections import Counter

from app.application.interfaces import RecordRepository
from app.application.services.fault_injection import NO_FAULTS, FaultInjector
from app.domain.entities import DashboardStats, Order, Product, TopProduct, User

_RECENT_ORDERS = 5
_TOP_PRODUCTS = 5


class DashboardService:
    """Aggregates revenue, recent orders, and best-selling products."""

    def __init__(
        self,
        user_repository: RecordRepository[User],
        product_repository: RecordRepository[Product],
        order_repository: RecordRepository[Order],
        fault_injector: FaultInjector = NO_FAULTS,
    ):
        self._users = user_repository
        self._products = product_repository
        self._orders = order_repository
        self._faults = fault_injector

    async def get_stats(self) -> DashboardStats:
        await self._faults.maybe_fail("Failed to fetch dashboard stats")

        users = await self._users.list_all()
        products = await self._products.list_all()
        orders = await self._orders.list_all()

        ordered_quantity: Counter[str] = Counter()
        for order in orders:
            for item in order.items:
                ordered_quantity[item.product_id] += item.quantity

        top_products = sorted(
            (TopProduct(product=p, ordered_quantity=ordered_quantity[p.id]) for p in products),
            key=lambda t: t.ordered_quantity,
            reverse=True,
        )[:_TOP_PRODUCTS]

        recent_orders = sorted(orders, key=lambda o: o.created_at, reverse=True)[:_RECENT_ORDERS]

        return DashboardStats(
            total_users=len(users),
            total_products=len(products),
            total_orders=len(orders),
            total_revenue=round(sum(o.total for o in orders), 2),
            recent_orders=recent_orders,
            top_products=top_products,
        )
