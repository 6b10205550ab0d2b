from pydantic import BaseModel


class ChargeRequest(BaseModel):
    # Empty ids and non-positive amounts are accepted here on purpose:
    # PaymentProcessor answers them with a failed result, not a 422.
    user_id: str
    amount: float
