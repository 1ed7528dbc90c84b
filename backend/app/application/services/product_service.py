"""Application service (use case) for Product operations."""

from app.application.schemas import ProductCreate, ProductUpdate
from app.application.services.record_query import SearchPredicate, contains_ignore_case
from app.application.services.record_service import RecordService
from app.domain.entities import Product


class ProductService(RecordService[Product]):
    """Orchestrates product CRUD logic. Depends on the repository port (DI)."""

    entity_name = "Product"
    record_type = Product
    plural_name = "products"
    filter_field = "category"

    async def create_record(self, data: ProductCreate) -> Product:
        await self._faults.maybe_fail("Failed to create product")
        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            category=data.category,
            stock=data.stock,
            image_url=data.image_url,
        )
        return await self._repository.create(product)

    async def update_record(self, product_id: str, data: ProductUpdate) -> Product:
        await self._faults.maybe_fail("Failed to update product")
        product = await self._require(product_id)
        product.update(**data.model_dump(exclude_unset=True, exclude_none=True))
        return await self._repository.update(product)

    async def _search_predicate(self) -> SearchPredicate:
        return lambda p, search: contains_ignore_case(p.name, p.description, p.category)(search)
