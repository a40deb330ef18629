"""FastAPI routes for the Payments service — checkout, refunds and status.

The PaymentProcessor is built once when the application starts and kept on
`app.state.processor`; every request uses that same instance.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from payments.api.schemas import (
    CheckoutRequest,
    PaymentResultResponse,
    PaymentStatusResponse,
    RefundRequest,
    RefundResponse,
)
from payments.checkout.service import CheckoutService
from payments.processor.port import PaymentProcessor, TranslationError, UnrecognizedStatusError


def get_processor(request: Request) -> PaymentProcessor:
    processor = getattr(request.app.state, "processor", None)
    if processor is None:
        raise HTTPException(status_code=503, detail="Payment processor not configured")
    return processor


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.post("", status_code=201, response_model=PaymentResultResponse)
def complete_order(
    body: CheckoutRequest,
    processor: PaymentProcessor = Depends(get_processor),
) -> PaymentResultResponse:
    """Complete an order. Declines are returned with `success: false`."""
    try:
        result = CheckoutService(processor).complete_order(
            customer_id=body.customer_id,
            amount=body.amount,
            card_number=body.card_number,
        )
    except TranslationError as exc:
        raise HTTPException(status_code=422, detail=exc.messages) from exc
    return PaymentResultResponse(
        success=result.success,
        transaction_id=result.transaction_id,
        message=result.message,
    )


# ---------------------------------------------------------------------------
# Payment Router
# ---------------------------------------------------------------------------
payment_router = APIRouter(prefix="/payments", tags=["payments"])


@payment_router.post("/{transaction_id}/refund", response_model=RefundResponse)
def refund_payment(
    transaction_id: str,
    body: RefundRequest,
    processor: PaymentProcessor = Depends(get_processor),
) -> RefundResponse:
    """Refund (part of) a payment made through the configured backend."""
    try:
        accepted = processor.refund(transaction_id, body.amount)
    except TranslationError as exc:
        raise HTTPException(status_code=422, detail=exc.messages) from exc
    return RefundResponse(transaction_id=transaction_id, accepted=accepted)


@payment_router.get("/{transaction_id}/status", response_model=PaymentStatusResponse)
def payment_status(
    transaction_id: str,
    processor: PaymentProcessor = Depends(get_processor),
) -> PaymentStatusResponse:
    """Return the canonical status of a payment."""
    try:
        status = processor.query_status(transaction_id)
    except UnrecognizedStatusError as exc:
        raise HTTPException(status_code=502, detail=exc.messages) from exc
    return PaymentStatusResponse(transaction_id=transaction_id, status=status.value)
