from fastapi import APIRouter, Depends

from app.dependencies import get_processor
from app.schemas.requests import ChargeRequest
from app.schemas.responses import TransactionResponse, StatusResponse
from app.services.processor import PaymentProcessor

router = APIRouter()


@router.post("", response_model=TransactionResponse)
def charge(request: ChargeRequest, processor: PaymentProcessor = Depends(get_processor)):
    """
    Charge a user through the configured gateway.

    Always answers 200: validation failures, declined charges and gateway
    faults are reported in the body with success=false.
    """
    result = processor.process_payment(request.user_id, request.amount)
    return TransactionResponse(**result.model_dump())


@router.post("/{transaction_id}/refund", response_model=TransactionResponse)
def refund(transaction_id: str, processor: PaymentProcessor = Depends(get_processor)):
    result = processor.refund_payment(transaction_id)
    return TransactionResponse(**result.model_dump())


@router.get("/{transaction_id}/status", response_model=StatusResponse)
def status(transaction_id: str, processor: PaymentProcessor = Depends(get_processor)):
    """
    Unknown ids and gateway network faults both report FAILED.

    The path segment is never empty, so the empty-id policy of the
    processor does not come into play here.
    """
    result = processor.get_payment_status(transaction_id)
    return StatusResponse(transaction_id=transaction_id, status=result)
