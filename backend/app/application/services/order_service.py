"""Application service (use case) for Order operations.

Order creation snapshots each product's current price into the line item;
totals are computed once and never recalculated.
"""

from app.application.interfaces import RecordRepository
from app.application.schemas import OrderCreate, OrderUpdate
from app.application.services.fault_injection import NO_FAULTS, FaultInjector
from app.application.services.record_query import SearchPredicate, contains_ignore_case
from app.application.services.record_service import RecordService
from app.domain.entities import Address, Order, OrderItem, Product, User
from app.domain.exceptions import EntityNotFoundError


class OrderService(RecordService[Order]):
    """Orchestrates order logic across the order, product, and user repositories."""

    entity_name = "Order"
    record_type = Order
    plural_name = "orders"
    filter_field = "status"

    def __init__(
        self,
        repository: RecordRepository[Order],
        product_repository: RecordRepository[Product],
        user_repository: RecordRepository[User],
        fault_injector: FaultInjector = NO_FAULTS,
    ):
        super().__init__(repository, fault_injector)
        self._products = product_repository
        self._users = user_repository

    async def create_record(self, data: OrderCreate) -> Order:
        await self._faults.maybe_fail("Failed to create order")

        items: list[OrderItem] = []
        for requested in data.items:
            product = await self._products.get_by_id(requested.product_id)
            if product is None:
                raise EntityNotFoundError("Product", requested.product_id)
            items.append(
                OrderItem(
                    product_id=product.id,
                    quantity=requested.quantity,
                    price=product.price,
                )
            )

        if await self._users.get_by_id(data.user_id) is None:
            raise EntityNotFoundError("User", data.user_id)

        order = Order(
            user_id=data.user_id,
            items=items,
            total=round(sum(item.line_total for item in items), 2),
            shipping_address=Address(**data.shipping_address.model_dump()),
        )
        return await self._repository.create(order)

    async def update_record(self, order_id: str, data: OrderUpdate) -> Order:
        await self._faults.maybe_fail("Failed to update order")
        order = await self._require(order_id)
        order.update(
            status=data.status,
            shipping_address=(
                Address(**data.shipping_address.model_dump())
                if data.shipping_address is not None
                else None
            ),
        )
        return await self._repository.update(order)

    async def _search_predicate(self) -> SearchPredicate:
        users = {u.id: u for u in await self._users.list_all()}

        def matches(order: Order, search: str) -> bool:
            user = users.get(order.user_id)
            return contains_ignore_case(
                order.id,
                user.name if user else None,
                user.email if user else None,
            )(search)

        return matches
