import logging
import random
import uuid
from typing import Dict, Optional

from app.exceptions import NetworkError
from app.gateways.base import PaymentGateway
from app.models import TransactionResult, TransactionStatus

logger = logging.getLogger(__name__)


class SandboxTransaction:
    def __init__(self, user_id: str, amount: float, transaction_id: str, status: TransactionStatus):
        self.user_id = user_id
        self.amount = amount
        self.transaction_id = transaction_id
        self.status = status
        self.refunded = False


class SandboxGateway(PaymentGateway):
    """
    In-memory gateway mock.
    Balances: per user, users without an entry start at default_balance
    Transaction ids: UUID4
    Error rate: network_error_rate (0.0 by default)
    """

    def __init__(
        self,
        balances: Optional[Dict[str, float]] = None,
        default_balance: float = 1000.0,
        network_error_rate: float = 0.0,
        seed: Optional[int] = None,
    ):
        if not 0.0 <= network_error_rate <= 1.0:
            raise ValueError(f"network_error_rate must be between 0.0 and 1.0, got {network_error_rate}")
        self.balances: Dict[str, float] = dict(balances or {})
        self.default_balance = default_balance
        self.network_error_rate = network_error_rate
        self.transactions: Dict[str, SandboxTransaction] = {}
        self._random = random.Random(seed)

    @property
    def gateway_name(self) -> str:
        return "sandbox"

    def balance_of(self, user_id: str) -> float:
        return self.balances.get(user_id, self.default_balance)

    def _maybe_fail(self):
        if self._random.random() < self.network_error_rate:
            raise NetworkError("Provider network problem")

    def charge(self, user_id: str, amount: float) -> TransactionResult:
        self._maybe_fail()

        transaction_id = str(uuid.uuid4())
        txn = SandboxTransaction(user_id, amount, transaction_id, TransactionStatus.PENDING)
        self.transactions[transaction_id] = txn

        balance = self.balance_of(user_id)
        if amount > balance:
            txn.status = TransactionStatus.FAILED
            logger.debug("Charge %s declined: %s has %.2f, needs %.2f", transaction_id, user_id, balance, amount)
            return TransactionResult(
                success=False,
                transaction_id=transaction_id,
                message="Not enough money in the account",
            )

        self.balances[user_id] = balance - amount
        txn.status = TransactionStatus.COMPLETED
        logger.debug("Charge %s completed for %s (%.2f)", transaction_id, user_id, amount)
        return TransactionResult(success=True, transaction_id=transaction_id, message="Charge success")

    def refund(self, transaction_id: str) -> TransactionResult:
        self._maybe_fail()

        txn = self.transactions.get(transaction_id)
        if txn is None:
            return TransactionResult.failure(f"Transaction {transaction_id} does not exist")

        # Only money that was actually debited goes back, and only once
        if txn.status is TransactionStatus.COMPLETED and not txn.refunded:
            self.balances[txn.user_id] = self.balance_of(txn.user_id) + txn.amount
        txn.refunded = True
        txn.status = TransactionStatus.COMPLETED
        logger.debug("Refund of %s completed", transaction_id)
        return TransactionResult(success=True, transaction_id=transaction_id, message="Refund success")

    def get_status(self, transaction_id: str) -> TransactionStatus:
        self._maybe_fail()

        txn = self.transactions.get(transaction_id)
        if txn is None:
            return TransactionStatus.FAILED
        return txn.status
