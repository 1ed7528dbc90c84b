"""Cash-on-delivery order submission."""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import asdict

from app.application.services.landing_page_utils import epoch_millis, random_base36, to_base36
from app.domain.cod_form import COD_FORM_RULES, validate_form
from app.domain.entities import CODOrderRequest, CODOrderResult, FieldRule
from app.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

ORDER_PLACED_MESSAGE = (
    "Order placed successfully! You will receive a confirmation call within 2 hours."
)


def generate_order_id() -> str:
    """``COD-<base36 epoch ms>-<5 base36 chars>``, upper-cased."""
    return f"COD-{to_base36(epoch_millis())}-{random_base36(5)}".upper()


class CODOrderService:
    """Validates an order form and hands the order off for processing."""

    def __init__(
        self,
        processing_delay_seconds: float = 1.0,
        rules: Mapping[str, FieldRule] = COD_FORM_RULES,
    ):
        self._delay = processing_delay_seconds
        self._rules = rules

    async def submit_order(self, request: CODOrderRequest) -> CODOrderResult:
        """Validate and place the order.

        Raises:
            ValidationError: Listing every violated field rule.
        """
        errors = validate_form(asdict(request.form_data), self._rules)
        if errors:
            logger.info(
                "Rejected COD order for landing page %s: %s",
                request.landing_page_id,
                ", ".join(errors),
            )
            raise ValidationError(errors)

        order_id = generate_order_id()
        await self._process_order(order_id, request)

        return CODOrderResult(order_id=order_id, success=True, message=ORDER_PLACED_MESSAGE)

    async def _process_order(self, order_id: str, request: CODOrderRequest) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)

        form = request.form_data
        logger.info(
            "COD order %s placed: landing_page=%s product=%r price=%.2f qty=%s customer=%r city=%s pincode=%s",
            order_id,
            request.landing_page_id,
            request.product_name,
            request.product_price,
            form.quantity,
            form.name,
            form.city,
            form.pincode,
        )
