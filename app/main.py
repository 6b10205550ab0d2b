from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.config import get_settings
from app.logger import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(
    title="Payment Processor API",
    description="Charges, refunds and status lookups through a payment gateway, with faults reported as results",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "payment-processor"}


from app.routers import payments  # noqa: E402
app.include_router(payments.router, prefix="/api/v1/payments", tags=["payments"])
