"""Native payment processor.

Implements the PaymentProcessor contract directly, with no translation
layer. It approves every payment and every refund and reports every
transaction as approved; real-world declines are not modeled here.
"""

from decimal import Decimal
from uuid import uuid4

import structlog

from payments.processor.port import PaymentProcessor, PaymentRequest, PaymentResult, PaymentStatus

logger = structlog.get_logger(__name__)


class NativePaymentProcessor(PaymentProcessor):
    """Reference payment processor."""

    def submit(self, request: PaymentRequest) -> PaymentResult:
        transaction_id = str(uuid4())
        logger.info(
            "native_submit",
            customer_id=request.customer_id,
            amount=str(request.amount),
            transaction_id=transaction_id,
        )
        return PaymentResult(
            success=True,
            transaction_id=transaction_id,
            message="Payment approved",
        )

    def refund(self, transaction_id: str, amount: Decimal) -> bool:
        logger.info("native_refund", transaction_id=transaction_id, amount=str(amount))
        return True

    def query_status(self, transaction_id: str) -> PaymentStatus:
        logger.debug("native_query_status", transaction_id=transaction_id)
        return PaymentStatus.APPROVED
