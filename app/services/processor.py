"""
Payment processor facade.

Every operation does a single pass:
1. Validate input (no gateway call on failure)
2. Delegate to the gateway
3. Normalize faults into a failed result / FAILED status
4. Report the outcome through the logger (one entry per call)
"""
from typing import Optional

from app.config import StatusLookupPolicy
from app.exceptions import InvalidTransactionIdError, NetworkError, PaymentError, RefundError
from app.gateways.base import PaymentGateway
from app.logger import Logger
from app.models import TransactionResult, TransactionStatus


USER_ID_MISSING = "userId not provided"
AMOUNT_NOT_POSITIVE = "Amount negative or zero"
TRANSACTION_ID_MISSING = "Transaction ID not provided"


def _fault_message(error: Exception) -> str:
    return f"{type(error).__name__}: {error}"


class PaymentProcessor:
    def __init__(
        self,
        gateway: PaymentGateway,
        logger: Optional[Logger] = None,
        status_policy: StatusLookupPolicy = StatusLookupPolicy.RETURN_FAILED,
    ):
        self._gateway = gateway
        self._logger = logger
        self._status_policy = StatusLookupPolicy(status_policy)

    def _log(self, message: str):
        if self._logger is not None:
            self._logger.log(message)

    def process_payment(self, user_id: str, amount: float) -> TransactionResult:
        """
        Charge `amount` to `user_id`.

        Insufficient funds come back from the gateway as an ordinary failed
        result (with a transaction id) and are passed through unchanged.
        """
        if not user_id:
            self._log(USER_ID_MISSING)
            return TransactionResult.failure(USER_ID_MISSING)
        # NaN fails this comparison too
        if not amount > 0:
            self._log(AMOUNT_NOT_POSITIVE)
            return TransactionResult.failure(AMOUNT_NOT_POSITIVE)

        try:
            result = self._gateway.charge(user_id, amount)
        except (NetworkError, PaymentError) as e:
            self._log(f"ProcessPayment {type(e).__name__}")
            return TransactionResult.failure(_fault_message(e))

        self._log("ProcessPayment successful" if result.success else "ProcessPayment failed")
        return result

    def refund_payment(self, transaction_id: str) -> TransactionResult:
        """Refund a prior charge. Unknown ids are a failed result from the gateway."""
        if not transaction_id:
            self._log(TRANSACTION_ID_MISSING)
            return TransactionResult.failure(TRANSACTION_ID_MISSING)

        try:
            result = self._gateway.refund(transaction_id)
        except (NetworkError, RefundError) as e:
            self._log(f"RefundPayment {type(e).__name__}")
            return TransactionResult.failure(_fault_message(e))

        self._log("RefundPayment successful" if result.success else "RefundPayment failed")
        return result

    def get_payment_status(self, transaction_id: str) -> TransactionStatus:
        """
        Look up the gateway status of a transaction.

        Raises:
            InvalidTransactionIdError: if transaction_id is empty and the
                processor was built with StatusLookupPolicy.RAISE
        """
        if not transaction_id:
            self._log(TRANSACTION_ID_MISSING)
            if self._status_policy is StatusLookupPolicy.RAISE:
                raise InvalidTransactionIdError(TRANSACTION_ID_MISSING)
            return TransactionStatus.FAILED

        try:
            status = self._gateway.get_status(transaction_id)
        except NetworkError as e:
            self._log(f"GetPaymentStatus {type(e).__name__}")
            return TransactionStatus.FAILED

        self._log("GetPaymentStatus successful")
        return status
