"""Cash-on-delivery order endpoint used by published landing pages."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import CODOrderRequestSchema, CODOrderResponse
from app.application.services import CODOrderService
from app.infrastructure.dependencies import get_cod_order_service

router = APIRouter(prefix="/cod-orders", tags=["COD Orders"])


@router.post("", response_model=CODOrderResponse, status_code=status.HTTP_201_CREATED)
async def submit_cod_order(
    data: CODOrderRequestSchema,
    service: CODOrderService = Depends(get_cod_order_service),
) -> CODOrderResponse:
    """Validate the order form and place the order.

    All form violations are reported together (422, ``errors`` per field).
    """
    result = await service.submit_order(data.to_domain())
    return CODOrderResponse.model_validate(result, from_attributes=True)
