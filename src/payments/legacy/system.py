"""Legacy transaction system (external collaborator).

The legacy engine's call shape is fixed: integer CVV, separate expiry
month/year, amounts as floating-point cents and its own status vocabulary.
This module simulates it without any external calls. The default behavior
approves everything; `configure()` switches it to declines, rejected
reversals or arbitrary status strings so the adapter can be exercised
against every answer the real engine can give. Calls are kept in `calls`
only when the engine is built with `record_calls=True`.
"""

import time
from dataclasses import dataclass
from uuid import uuid4

import structlog

logger = structlog.get_logger(__name__)

APPROVED_RESPONSE_CODE = "00"


@dataclass(frozen=True)
class LegacyTransactionResponse:
    auth_code: str
    response_code: str
    response_message: str
    transaction_ref: str


class LegacyPaymentSystem:
    """Simulated legacy payment engine."""

    def __init__(self, record_calls: bool = False) -> None:
        self.record_calls: bool = record_calls
        self.response_code: str = APPROVED_RESPONSE_CODE
        self.response_message: str = "TRANSACTION APPROVED"
        self.reversal_accepted: bool = True
        self.status: str = "APPROVED"
        self.calls: list[dict] = []

    def configure(
        self,
        response_code: str = APPROVED_RESPONSE_CODE,
        response_message: str = "TRANSACTION APPROVED",
        reversal_accepted: bool = True,
        status: str = "APPROVED",
    ) -> None:
        """Configure engine answers at runtime."""
        self.response_code = response_code
        self.response_message = response_message
        self.reversal_accepted = reversal_accepted
        self.status = status

    def _record(self, call: dict) -> None:
        if self.record_calls:
            self.calls.append(call)

    def authorize_transaction(
        self,
        card_num: str,
        cvv_code: int,
        exp_month: int,
        exp_year: int,
        amount_in_cents: float,
        customer_info: str,
    ) -> LegacyTransactionResponse:
        self._record(
            {
                "method": "authorize_transaction",
                "card_num": card_num,
                "cvv_code": cvv_code,
                "exp_month": exp_month,
                "exp_year": exp_year,
                "amount_in_cents": amount_in_cents,
                "customer_info": customer_info,
            }
        )
        logger.debug("legacy_authorize", last4=card_num[-4:], amount_in_cents=amount_in_cents)

        return LegacyTransactionResponse(
            auth_code=uuid4().hex[:8].upper(),
            response_code=self.response_code,
            response_message=self.response_message,
            transaction_ref=f"LEG{time.time_ns()}",
        )

    def reverse_transaction(self, trans_ref: str, amount_in_cents: float) -> bool:
        self._record(
            {
                "method": "reverse_transaction",
                "trans_ref": trans_ref,
                "amount_in_cents": amount_in_cents,
            }
        )
        logger.debug("legacy_reverse", trans_ref=trans_ref, amount_in_cents=amount_in_cents)
        return self.reversal_accepted

    def query_transaction_status(self, trans_ref: str) -> str:
        self._record({"method": "query_transaction_status", "trans_ref": trans_ref})
        logger.debug("legacy_query_status", trans_ref=trans_ref)
        return self.status
