"""Order endpoints: items and totals are fixed once an order is created."""

from dataclasses import replace

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    ApiResponse,
    OrderCreate,
    OrderResponse,
    OrderUpdate,
    PaginatedResponse,
    PaginationResponse,
)
from app.application.services import OrderService
from app.domain.entities import QueryParams
from app.infrastructure.dependencies import get_order_service
from app.presentation.api.v1.endpoints.list_params import list_query_params

router = APIRouter(prefix="/orders", tags=["Orders"])


def _to_response(order) -> OrderResponse:
    return OrderResponse.model_validate(order, from_attributes=True)


@router.get("", response_model=PaginatedResponse[OrderResponse])
async def list_orders(
    params: QueryParams = Depends(list_query_params),
    order_status: str | None = Query(None, alias="status", description="Exact status match"),
    service: OrderService = Depends(get_order_service),
) -> PaginatedResponse[OrderResponse]:
    """Filter by status, then search id/customer name/email, sort, and paginate."""
    page = await service.list_records(replace(params, status=order_status or None))
    return PaginatedResponse[OrderResponse](
        data=[_to_response(o) for o in page.items],
        pagination=PaginationResponse.from_domain(page.pagination),
        message="Orders fetched successfully",
    )


@router.get("/{order_id}", response_model=ApiResponse[OrderResponse])
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> ApiResponse[OrderResponse]:
    order = await service.get_record(order_id)
    return ApiResponse[OrderResponse](data=_to_response(order), message="Order fetched successfully")


@router.post("", response_model=ApiResponse[OrderResponse], status_code=status.HTTP_201_CREATED)
async def create_order(
    data: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> ApiResponse[OrderResponse]:
    """Create an order; item prices are copied from the current catalogue."""
    order = await service.create_record(data)
    return ApiResponse[OrderResponse](data=_to_response(order), message="Order created successfully")


@router.put("/{order_id}", response_model=ApiResponse[OrderResponse])
async def update_order(
    order_id: str,
    data: OrderUpdate,
    service: OrderService = Depends(get_order_service),
) -> ApiResponse[OrderResponse]:
    order = await service.update_record(order_id, data)
    return ApiResponse[OrderResponse](data=_to_response(order), message="Order updated successfully")


@router.delete("/{order_id}", response_model=ApiResponse[None])
async def delete_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> ApiResponse[None]:
    await service.delete_record(order_id)
    return ApiResponse[None](data=None, message="Order deleted successfully")
