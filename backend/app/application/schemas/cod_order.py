"""Pydantic DTOs for cash-on-delivery order submission.

Field constraints are loose here: the COD rule table decides
validity so that every violation is reported together.
"""

from pydantic import BaseModel, Field

from app.domain.entities import CODFormData, CODOrderRequest


class CODFormDataSchema(BaseModel):
    name: str = ""
    phone: str = ""
    email: str | None = None
    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    quantity: int | str | None = None  # checked by the rule table, not here
    variant: str | None = None


class CODOrderRequestSchema(BaseModel):
    landing_page_id: str = Field(..., min_length=1)
    form_data: CODFormDataSchema
    product_name: str
    product_price: float = Field(..., ge=0)
    variant: str | None = None

    def to_domain(self) -> CODOrderRequest:
        form = self.form_data
        return CODOrderRequest(
            landing_page_id=self.landing_page_id,
            form_data=CODFormData(
                name=form.name,
                phone=form.phone,
                email=form.email,
                address=form.address,
                city=form.city,
                state=form.state,
                pincode=form.pincode,
                quantity=form.quantity,
                variant=form.variant,
            ),
            product_name=self.product_name,
            product_price=self.product_price,
            variant=self.variant,
        )


class CODOrderResponse(BaseModel):
    order_id: str
    success: bool
    message: str

    model_config = {"from_attributes": True}
