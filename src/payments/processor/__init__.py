"""Payment processor factory.

Provides build_processor() to pick an implementation once, at startup:
- NativePaymentProcessor for the native backend
- LegacyPaymentAdapter wrapping the legacy transaction engine

The returned instance is owned by whoever built it; there is no module-level
"current processor" to swap at runtime.
"""

from enum import Enum

from payments.config import payment_backend
from payments.legacy.system import LegacyPaymentSystem
from payments.processor.legacy_adapter import LegacyPaymentAdapter
from payments.processor.native_adapter import NativePaymentProcessor
from payments.processor.port import PaymentProcessor


class Backend(Enum):
    NATIVE = "native"
    LEGACY = "legacy"


def build_processor(
    backend: Backend | str | None = None,
    legacy_system: LegacyPaymentSystem | None = None,
) -> PaymentProcessor:
    """Build the processor for `backend` (defaults to PAYMENT_BACKEND)."""
    if backend is None:
        backend = payment_backend()
    try:
        backend = Backend(backend)
    except ValueError:
        choices = ", ".join(b.value for b in Backend)
        raise ValueError(f"Unknown payment backend {backend!r}; expected one of: {choices}") from None

    if backend is Backend.LEGACY:
        return LegacyPaymentAdapter(legacy_system or LegacyPaymentSystem())
    return NativePaymentProcessor()
