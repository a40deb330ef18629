from decimal import Decimal

import pytest
from payments.legacy.system import LegacyPaymentSystem
from payments.processor.legacy_adapter import LegacyPaymentAdapter
from payments.processor.native_adapter import NativePaymentProcessor
from payments.processor.port import CardExpiration, PaymentRequest


@pytest.fixture()
def legacy_system():
    return LegacyPaymentSystem(record_calls=True)


@pytest.fixture()
def adapter(legacy_system):
    return LegacyPaymentAdapter(legacy_system)


@pytest.fixture()
def native():
    return NativePaymentProcessor()


@pytest.fixture()
def make_request():
    def _make(**overrides):
        defaults = {
            "customer_id": "a@b.com",
            "amount": Decimal("150.00"),
            "card_number": "4111111111111111",
            "cvv": "123",
            "expiration": CardExpiration(year=2026, month=12),
            "description": "Product purchase",
        }
        defaults.update(overrides)
        return PaymentRequest(**defaults)

    return _make
