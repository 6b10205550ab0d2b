"""
Service configuration.

Values come from the environment (prefix PAYMENTS_) or a .env file, e.g.
PAYMENTS_STATUS_LOOKUP_POLICY=raise or PAYMENTS_SANDBOX_NETWORK_ERROR_RATE=0.05.
"""
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StatusLookupPolicy(str, Enum):
    """What get_payment_status does with an empty transaction id."""

    RETURN_FAILED = "return_failed"
    RAISE = "raise"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAYMENTS_", env_file=".env", extra="ignore")

    status_lookup_policy: StatusLookupPolicy = StatusLookupPolicy.RETURN_FAILED
    log_level: str = "INFO"

    sandbox_default_balance: float = Field(default=1000.0, ge=0)
    sandbox_network_error_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    sandbox_seed: Optional[int] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
