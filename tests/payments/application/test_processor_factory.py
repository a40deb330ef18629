"""Tests for startup-time backend selection."""

import pytest
from payments.legacy.system import LegacyPaymentSystem
from payments.processor import Backend, build_processor
from payments.processor.legacy_adapter import LegacyPaymentAdapter
from payments.processor.native_adapter import NativePaymentProcessor


class TestBuildProcessor:
    def test_defaults_to_native(self):
        assert isinstance(build_processor(), NativePaymentProcessor)

    def test_reads_payment_backend_env(self, monkeypatch):
        monkeypatch.setenv("PAYMENT_BACKEND", "legacy")
        assert isinstance(build_processor(), LegacyPaymentAdapter)

    def test_env_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("PAYMENT_BACKEND", " Legacy ")
        assert isinstance(build_processor(), LegacyPaymentAdapter)

    def test_accepts_enum(self):
        assert isinstance(build_processor(Backend.NATIVE), NativePaymentProcessor)

    def test_legacy_creates_engine(self):
        processor = build_processor("legacy")
        assert isinstance(processor.legacy_system, LegacyPaymentSystem)

    def test_legacy_uses_given_engine(self):
        engine = LegacyPaymentSystem()
        processor = build_processor(Backend.LEGACY, legacy_system=engine)
        assert processor.legacy_system is engine

    def test_each_call_builds_a_new_instance(self):
        assert build_processor("legacy") is not build_processor("legacy")

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="stripe"):
            build_processor("stripe")
