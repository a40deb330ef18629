"""Payment processor port (abstract interface).

Defines the contract that every payment backend must implement. Checkout
code depends on this module only, so the native backend and the legacy
adapter can be swapped at startup without touching any caller.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from protean.exceptions import ValidationError


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class PaymentProcessorError(ValidationError):
    """Base class for infrastructure-level failures raised by a backend.

    Business declines are never raised; they come back as an unsuccessful
    PaymentResult (or a False refund).
    """


class TranslationError(PaymentProcessorError):
    """Input that cannot be mapped onto a backend's native call shape."""


class UnrecognizedStatusError(PaymentProcessorError):
    """A backend reported a status outside the canonical PaymentStatus set."""

    def __init__(self, raw_status: str, transaction_id: str = "") -> None:
        self.raw_status = raw_status
        self.transaction_id = transaction_id
        super().__init__({"status": [f"Unrecognized status {raw_status!r} for transaction {transaction_id!r}"]})


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------
class PaymentStatus(Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    DECLINED = "Declined"
    REFUNDED = "Refunded"


@dataclass(frozen=True)
class CardExpiration:
    """Card expiration as a (year, month) pair."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValidationError({"month": [f"Expiration month must be between 1 and 12, got {self.month}"]})


@dataclass(frozen=True)
class PaymentRequest:
    """A payment to submit, with the amount in major currency units."""

    customer_id: str
    amount: Decimal
    card_number: str
    cvv: str
    expiration: CardExpiration
    description: str = ""

    def __post_init__(self) -> None:
        if not self.customer_id:
            raise ValidationError({"customer_id": ["Customer identifier is required"]})
        # Floats never enter the model; ints are promoted.
        if isinstance(self.amount, bool) or not isinstance(self.amount, (Decimal, int)):
            raise ValidationError({"amount": [f"Amount must be a Decimal, got {type(self.amount).__name__}"]})
        if isinstance(self.amount, int):
            object.__setattr__(self, "amount", Decimal(self.amount))
        if not self.amount.is_finite() or self.amount < 0:
            raise ValidationError({"amount": [f"Amount must be a non-negative value, got {self.amount}"]})


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a submitted payment."""

    success: bool
    transaction_id: str = ""
    message: str = ""

    def __post_init__(self) -> None:
        if not self.success and not self.message:
            raise ValidationError({"message": ["An unsuccessful result must carry a message"]})


# ---------------------------------------------------------------------------
# Contract
# ---------------------------------------------------------------------------
class PaymentProcessor(ABC):
    """Abstract payment processor interface."""

    @abstractmethod
    def submit(self, request: PaymentRequest) -> PaymentResult:
        """Submit a payment. Declines are reported through the result."""
        ...

    @abstractmethod
    def refund(self, transaction_id: str, amount: Decimal) -> bool:
        """Reverse (part of) a payment previously submitted to this backend."""
        ...

    @abstractmethod
    def query_status(self, transaction_id: str) -> PaymentStatus:
        """Return the canonical status of a transaction.

        Raises UnrecognizedStatusError when the backend reports a state
        outside PaymentStatus.
        """
        ...
