"""Legacy payment adapter.

Makes the legacy transaction engine satisfy the PaymentProcessor contract
without changing either side:

- the string CVV becomes the integer the engine expects
- amounts in major units become (float) cents
- the engine's two-character response code becomes a success flag
- the engine's status vocabulary becomes PaymentStatus

The adapter keeps no state of its own beyond the engine reference it was
built with, so a single instance can be shared by concurrent callers.
"""

from decimal import Decimal, Inexact, localcontext

import structlog

from payments.legacy.system import APPROVED_RESPONSE_CODE, LegacyPaymentSystem
from payments.processor.port import (
    PaymentProcessor,
    PaymentRequest,
    PaymentResult,
    PaymentStatus,
    TranslationError,
    UnrecognizedStatusError,
)

logger = structlog.get_logger(__name__)

MINOR_UNITS_PER_MAJOR = 100

LEGACY_STATUS_MAP: dict[str, PaymentStatus] = {
    "APPROVED": PaymentStatus.APPROVED,
    "DECLINED": PaymentStatus.DECLINED,
    "PENDING": PaymentStatus.PENDING,
    "REFUNDED": PaymentStatus.REFUNDED,
}


def to_minor_units(amount: Decimal) -> int:
    """Scale an amount in major units to integer minor units (150.00 -> 15000).

    The conversion is exact: amounts that are negative, carry precision
    below the minor unit, or have more digits than the decimal context holds
    cannot be expressed in cents and are rejected.
    """
    if isinstance(amount, float):
        raise TranslationError({"amount": ["Floating-point amounts cannot be converted exactly"]})
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            scaled = Decimal(amount) * MINOR_UNITS_PER_MAJOR
        except Inexact:
            raise TranslationError({"amount": [f"{amount} has too many digits to scale exactly"]}) from None
    if not scaled.is_finite() or scaled < 0:
        raise TranslationError({"amount": [f"Cannot convert {amount} to minor units"]})
    if scaled != scaled.to_integral_value():
        raise TranslationError({"amount": [f"{amount} has precision below the minor currency unit"]})
    return int(scaled)


def to_legacy_amount(amount_in_cents: int) -> float:
    """Cents as the engine's floating-point amount, rejected if the float is inexact."""
    legacy_amount = float(amount_in_cents)
    if int(legacy_amount) != amount_in_cents:
        raise TranslationError({"amount": [f"{amount_in_cents} minor units cannot be sent to the legacy engine exactly"]})
    return legacy_amount


def parse_cvv(cvv: str) -> int:
    """Convert the contract's string CVV to the engine's integer code."""
    if not cvv or not (cvv.isascii() and cvv.isdigit()):
        raise TranslationError({"cvv": ["Verification code must contain digits only"]})
    return int(cvv)


def to_payment_status(legacy_status: str, transaction_id: str = "") -> PaymentStatus:
    """Map an engine status string onto PaymentStatus."""
    try:
        return LEGACY_STATUS_MAP[legacy_status]
    except KeyError:
        raise UnrecognizedStatusError(legacy_status, transaction_id) from None


class LegacyPaymentAdapter(PaymentProcessor):
    """PaymentProcessor backed by the legacy transaction engine."""

    def __init__(self, legacy_system: LegacyPaymentSystem) -> None:
        self._legacy_system = legacy_system

    @property
    def legacy_system(self) -> LegacyPaymentSystem:
        return self._legacy_system

    def submit(self, request: PaymentRequest) -> PaymentResult:
        # Translate everything up front so a bad field never reaches the engine.
        cvv_code = parse_cvv(request.cvv)
        amount_in_cents = to_minor_units(request.amount)
        legacy_amount = to_legacy_amount(amount_in_cents)

        logger.info(
            "legacy_submit",
            customer_id=request.customer_id,
            last4=request.card_number[-4:],
            amount_in_cents=amount_in_cents,
        )
        response = self._legacy_system.authorize_transaction(
            request.card_number,
            cvv_code,
            request.expiration.month,
            request.expiration.year,
            legacy_amount,
            request.customer_id,
        )

        success = response.response_code == APPROVED_RESPONSE_CODE
        message = response.response_message
        if not success and not message:
            message = f"Declined with response code {response.response_code}"
        if not success:
            logger.warning(
                "legacy_declined",
                transaction_id=response.transaction_ref,
                response_code=response.response_code,
                message=message,
            )

        return PaymentResult(
            success=success,
            transaction_id=response.transaction_ref,
            message=message,
        )

    def refund(self, transaction_id: str, amount: Decimal) -> bool:
        amount_in_cents = to_minor_units(amount)
        legacy_amount = to_legacy_amount(amount_in_cents)
        logger.info("legacy_refund", transaction_id=transaction_id, amount_in_cents=amount_in_cents)
        return bool(self._legacy_system.reverse_transaction(transaction_id, legacy_amount))

    def query_status(self, transaction_id: str) -> PaymentStatus:
        legacy_status = self._legacy_system.query_transaction_status(transaction_id)
        try:
            return to_payment_status(legacy_status, transaction_id)
        except UnrecognizedStatusError:
            logger.error("legacy_unrecognized_status", transaction_id=transaction_id, legacy_status=legacy_status)
            raise
