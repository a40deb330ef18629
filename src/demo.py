"""Checkout demonstration across payment backends.

Runs the same order through the native processor and through the legacy
adapter, showing that CheckoutService works unchanged with either.

Usage:
    python src/demo.py                   # Run against both backends
    python src/demo.py --backend legacy  # Run only the legacy adapter
"""

import argparse
from decimal import Decimal

from payments.checkout.service import CheckoutService
from payments.processor import Backend, build_processor
from payments.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

DEMO_CUSTOMER = "cliente@email.com"
DEMO_AMOUNT = Decimal("150.00")
DEMO_CARD = "4111111111111111"


def run_checkout(backend: Backend) -> None:
    processor = build_processor(backend)
    result = CheckoutService(processor).complete_order(DEMO_CUSTOMER, DEMO_AMOUNT, DEMO_CARD)
    if result.success:
        print(f"[{backend.value}] Order approved. ID: {result.transaction_id}")
    else:
        print(f"[{backend.value}] Payment declined: {result.message}")

    status = processor.query_status(result.transaction_id)
    print(f"[{backend.value}] Status: {status.value}")


def main():
    parser = argparse.ArgumentParser(description="Run a demo checkout against the payment backends")
    parser.add_argument(
        "--backend",
        choices=[b.value for b in Backend] + ["all"],
        default="all",
        help="Backend to run the checkout against (default: all)",
    )
    args = parser.parse_args()

    configure_logging()
    backends = list(Backend) if args.backend == "all" else [Backend(args.backend)]
    for backend in backends:
        logger.info("demo_checkout", backend=backend.value)
        run_checkout(backend)


if __name__ == "__main__":
    main()
