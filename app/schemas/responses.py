from pydantic import BaseModel

from app.models import TransactionStatus


class TransactionResponse(BaseModel):
    success: bool
    transaction_id: str
    message: str


class StatusResponse(BaseModel):
    transaction_id: str
    status: TransactionStatus
