"""Product CRUD endpoints."""

from dataclasses import replace

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    ApiResponse,
    PaginatedResponse,
    PaginationResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from app.application.services import ProductService
from app.domain.entities import QueryParams
from app.infrastructure.dependencies import get_product_service
from app.presentation.api.v1.endpoints.list_params import list_query_params

router = APIRouter(prefix="/products", tags=["Products"])


def _to_response(product) -> ProductResponse:
    return ProductResponse.model_validate(product, from_attributes=True)


@router.get("", response_model=PaginatedResponse[ProductResponse])
async def list_products(
    params: QueryParams = Depends(list_query_params),
    category: str | None = Query(None, description="Exact category match (case-insensitive)"),
    service: ProductService = Depends(get_product_service),
) -> PaginatedResponse[ProductResponse]:
    """Filter by category, then search name/description/category, sort, and paginate."""
    page = await service.list_records(replace(params, category=category or None))
    return PaginatedResponse[ProductResponse](
        data=[_to_response(p) for p in page.items],
        pagination=PaginationResponse.from_domain(page.pagination),
        message="Products fetched successfully",
    )


@router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    product = await service.get_record(product_id)
    return ApiResponse[ProductResponse](
        data=_to_response(product), message="Product fetched successfully"
    )


@router.post("", response_model=ApiResponse[ProductResponse], status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    product = await service.create_record(data)
    return ApiResponse[ProductResponse](
        data=_to_response(product), message="Product created successfully"
    )


@router.put("/{product_id}", response_model=ApiResponse[ProductResponse])
async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    """Update only the supplied fields. Existing orders keep their price snapshot."""
    product = await service.update_record(product_id, data)
    return ApiResponse[ProductResponse](
        data=_to_response(product), message="Product updated successfully"
    )


@router.delete("/{product_id}", response_model=ApiResponse[None])
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[None]:
    await service.delete_record(product_id)
    return ApiResponse[None](data=None, message="Product deleted successfully")
