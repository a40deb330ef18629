"""Checkout service — completes an order through the PaymentProcessor port.

The service never knows which backend it talks to; the processor is handed
in once at construction and kept for the service's lifetime.
"""

from decimal import Decimal

import structlog

from payments.processor.port import CardExpiration, PaymentProcessor, PaymentRequest, PaymentResult
from payments.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)

# Stand-ins until the checkout flow collects real card details.
PLACEHOLDER_CVV = "123"
PLACEHOLDER_EXPIRATION = CardExpiration(year=2026, month=12)
ORDER_DESCRIPTION = "Product purchase"


class CheckoutService:
    def __init__(self, processor: PaymentProcessor) -> None:
        self._processor = processor

    @property
    def processor(self) -> PaymentProcessor:
        return self._processor

    def complete_order(self, customer_id: str, amount: Decimal, card_number: str) -> PaymentResult:
        """Charge the customer for an order and report the outcome.

        `customer_id` and `processor` are bound to the logging context for
        the duration of the call, so backend log lines carry them too.
        """
        add_context(customer_id=customer_id, processor=type(self._processor).__name__)
        try:
            logger.info("checkout_started", amount=str(amount))

            request = PaymentRequest(
                customer_id=customer_id,
                amount=amount,
                card_number=card_number,
                cvv=PLACEHOLDER_CVV,
                expiration=PLACEHOLDER_EXPIRATION,
                description=ORDER_DESCRIPTION,
            )
            result = self._processor.submit(request)

            if result.success:
                logger.info("order_approved", transaction_id=result.transaction_id)
            else:
                logger.warning("payment_declined", reason=result.message)
            return result
        finally:
            clear_context()
