"""Pydantic request/response schemas for the Payments API.

These are external contracts — separate from the PaymentProcessor port's
dataclasses.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CheckoutRequest(BaseModel):
    customer_id: str = Field(min_length=1)
    amount: Decimal = Field(ge=0, decimal_places=2)
    card_number: str = Field(min_length=4)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "a@b.com",
                    "amount": "150.00",
                    "card_number": "4111111111111111",
                }
            ]
        }
    }


class RefundRequest(BaseModel):
    amount: Decimal = Field(ge=0, decimal_places=2)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class PaymentResultResponse(BaseModel):
    success: bool
    transaction_id: str
    message: str


class RefundResponse(BaseModel):
    transaction_id: str
    accepted: bool


class PaymentStatusResponse(BaseModel):
    transaction_id: str
    status: str
