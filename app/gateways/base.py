from abc import ABC, abstractmethod
from app.models import TransactionResult, TransactionStatus


class PaymentGateway(ABC):
    """Abstract base for payment gateways the processor delegates to."""

    @abstractmethod
    def charge(self, user_id: str, amount: float) -> TransactionResult:
        """
        Move `amount` from the user's account.
        May raise NetworkError or PaymentError.
        """
        pass

    @abstractmethod
    def refund(self, transaction_id: str) -> TransactionResult:
        """
        Reverse a prior charge.
        May raise NetworkError or RefundError.
        """
        pass

    @abstractmethod
    def get_status(self, transaction_id: str) -> TransactionStatus:
        """May raise NetworkError."""
        pass

    @property
    @abstractmethod
    def gateway_name(self) -> str:
        pass
