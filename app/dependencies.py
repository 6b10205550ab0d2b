from functools import lru_cache

from app.config import get_settings
from app.gateways.sandbox import SandboxGateway
from app.logger import ConsoleLogger
from app.services.processor import PaymentProcessor


@lru_cache
def get_processor() -> PaymentProcessor:
    """Process-wide facade over the sandbox gateway, built from settings on first use."""
    settings = get_settings()
    gateway = SandboxGateway(
        default_balance=settings.sandbox_default_balance,
        network_error_rate=settings.sandbox_network_error_rate,
        seed=settings.sandbox_seed,
    )
    return PaymentProcessor(gateway, ConsoleLogger(), status_policy=settings.status_lookup_policy)
