"""Tests for the native payment processor."""

from decimal import Decimal

from payments.processor.port import PaymentProcessor, PaymentStatus


class TestNativePaymentProcessor:
    def test_is_a_payment_processor(self, native):
        assert isinstance(native, PaymentProcessor)

    def test_submit_succeeds(self, native, make_request):
        result = native.submit(make_request())
        assert result.success is True
        assert result.transaction_id
        assert result.message == "Payment approved"

    def test_transaction_ids_are_unique(self, native, make_request):
        first = native.submit(make_request())
        second = native.submit(make_request())
        assert first.transaction_id != second.transaction_id

    def test_accepts_non_numeric_cvv(self, native, make_request):
        assert native.submit(make_request(cvv="abc")).success is True

    def test_refund_accepted(self, native):
        assert native.refund("txn-123", Decimal("30.00")) is True

    def test_status_is_approved(self, native, make_request):
        result = native.submit(make_request())
        assert native.query_status(result.transaction_id) is PaymentStatus.APPROVED
