"""Tests for amount and CVV translation into the legacy engine's shapes."""

from decimal import Decimal

import pytest
from payments.processor.legacy_adapter import (
    LEGACY_STATUS_MAP,
    parse_cvv,
    to_legacy_amount,
    to_minor_units,
    to_payment_status,
)
from payments.processor.port import PaymentStatus, TranslationError, UnrecognizedStatusError


class TestToMinorUnits:
    def test_scales_by_one_hundred(self):
        assert to_minor_units(Decimal("150.00")) == 15000

    def test_returns_int(self):
        assert isinstance(to_minor_units(Decimal("0.01")), int)

    def test_zero(self):
        assert to_minor_units(Decimal("0")) == 0

    def test_whole_amount(self):
        assert to_minor_units(Decimal("7")) == 700

    @pytest.mark.parametrize(
        "amount",
        ["0.01", "0.10", "0.29", "1.15", "19.99", "150.00", "999999999.99", "12345678901234.57"],
    )
    def test_round_trip(self, amount):
        value = Decimal(amount)
        assert Decimal(to_minor_units(value)) / 100 == value

    def test_extra_trailing_zeros_are_exact(self):
        assert to_minor_units(Decimal("19.9900")) == 1999

    def test_sub_minor_precision_rejected(self):
        with pytest.raises(TranslationError) as exc_info:
            to_minor_units(Decimal("10.005"))
        assert "amount" in exc_info.value.messages

    def test_negative_rejected(self):
        with pytest.raises(TranslationError):
            to_minor_units(Decimal("-0.01"))

    def test_float_rejected(self):
        with pytest.raises(TranslationError):
            to_minor_units(150.0)

    def test_more_digits_than_context_rejected(self):
        with pytest.raises(TranslationError) as exc_info:
            to_minor_units(Decimal("1234567890123456789012345678.91"))
        assert "amount" in exc_info.value.messages

    def test_long_exact_amount_still_scales(self):
        value = Decimal("12345678901234567890123456.78")
        assert Decimal(to_minor_units(value)) / 100 == value


class TestToLegacyAmount:
    def test_exact_float(self):
        assert to_legacy_amount(15000) == 15000.0

    def test_largest_exact_float(self):
        assert to_legacy_amount(2**53) == float(2**53)

    def test_cents_beyond_float_precision_rejected(self):
        with pytest.raises(TranslationError):
            to_legacy_amount(2**53 + 1)


class TestParseCvv:
    def test_digits(self):
        assert parse_cvv("123") == 123

    def test_leading_zero(self):
        assert parse_cvv("012") == 12

    @pytest.mark.parametrize("cvv", ["abc", "", "12a", " 123", "-12", "1_0", "١٢٣"])
    def test_non_numeric_rejected(self, cvv):
        with pytest.raises(TranslationError) as exc_info:
            parse_cvv(cvv)
        assert "cvv" in exc_info.value.messages


class TestStatusMapping:
    @pytest.mark.parametrize(
        "legacy, expected",
        [
            ("APPROVED", PaymentStatus.APPROVED),
            ("DECLINED", PaymentStatus.DECLINED),
            ("PENDING", PaymentStatus.PENDING),
            ("REFUNDED", PaymentStatus.REFUNDED),
        ],
    )
    def test_canonical_strings(self, legacy, expected):
        assert to_payment_status(legacy) is expected

    def test_table_covers_exactly_the_canonical_statuses(self):
        assert set(LEGACY_STATUS_MAP.values()) == set(PaymentStatus)
        assert len(LEGACY_STATUS_MAP) == 4

    @pytest.mark.parametrize("legacy", ["UNKNOWN", "approved", "", "VOIDED"])
    def test_other_strings_raise(self, legacy):
        with pytest.raises(UnrecognizedStatusError) as exc_info:
            to_payment_status(legacy, "LEG1")
        assert exc_info.value.raw_status == legacy
        assert exc_info.value.transaction_id == "LEG1"
        assert "status" in exc_info.value.messages
