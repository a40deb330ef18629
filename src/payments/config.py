"""Environment-driven settings for the payments service."""

import os

DEFAULT_PAYMENT_BACKEND = "native"


def payment_backend() -> str:
    """Name of the payment backend to build at startup (PAYMENT_BACKEND)."""
    return (os.getenv("PAYMENT_BACKEND") or DEFAULT_PAYMENT_BACKEND).strip().lower()


def environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()
