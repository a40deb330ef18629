"""Payments FastAPI application.

Builds the payment processor selected by PAYMENT_BACKEND once, at startup,
and serves the checkout / refund / status routes against it.

Usage:
    PAYMENT_BACKEND=legacy uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from payments.api.routes import checkout_router, payment_router
from payments.processor import build_processor
from payments.utils.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.processor = build_processor()
    logger.info("payment_processor_ready", processor=type(app.state.processor).__name__)
    yield


app = FastAPI(
    title="Payments API",
    description="Checkout over a swappable payment backend",
    lifespan=lifespan,
)

app.include_router(checkout_router)
app.include_router(payment_router)


@app.get("/health")
async def health():
    processor = getattr(app.state, "processor", None)
    return JSONResponse(
        content={
            "status": "ok",
            "processor": type(processor).__name__ if processor is not None else None,
        }
    )
