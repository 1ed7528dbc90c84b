"""Domain entities for cash-on-delivery order submission."""

from dataclasses import dataclass


@dataclass
class CODFormData:
    """Customer details captured by the landing page order form."""

    name: str
    phone: str
    address: str
    city: str
    state: str
    pincode: str
    quantity: int | str | None  # raw form value until validate_form accepts it
    email: str | None = None
    variant: str | None = None


@dataclass
class CODOrderRequest:
    landing_page_id: str
    form_data: CODFormData
    product_name: str
    product_price: float
    variant: str | None = None


@dataclass
class CODOrderResult:
    order_id: str
    success: bool
    message: str
