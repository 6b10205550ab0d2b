from enum import Enum
from pydantic import BaseModel, ConfigDict


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class TransactionResult(BaseModel):
    """Outcome of a charge or refund. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    success: bool
    transaction_id: str = ""
    message: str = ""

    @classmethod
    def failure(cls, message: str = "") -> "TransactionResult":
        return cls(success=False, transaction_id="", message=message)
