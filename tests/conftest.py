"""
Shared pytest fixtures for all test modules.

GatewaySpy is a mock/stub/spy over the PaymentGateway contract: it counts
calls, captures parameters, raises faults on demand and can be told to
return fixed results. LoggerMock captures every logged message.
"""
import uuid
import pytest
from typing import List, Tuple
from fastapi.testclient import TestClient

from app.dependencies import get_processor
from app.exceptions import NetworkError, PaymentError, RefundError
from app.gateways.base import PaymentGateway
from app.logger import Logger
from app.models import TransactionResult, TransactionStatus
from app.services.processor import PaymentProcessor


USER_ID = "gacek"
AMOUNT = 100.0


class LoggerMock(Logger):
    def __init__(self):
        self.messages: List[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


class GatewaySpy(PaymentGateway):
    def __init__(self):
        self.charge_call_count = 0
        self.refund_call_count = 0
        self.get_status_call_count = 0

        self.charge_parameters: List[Tuple[str, float]] = []
        self.refund_parameters: List[str] = []
        self.get_status_parameters: List[str] = []

        self.should_raise_network_error = False
        self.should_raise_payment_error = False
        self.should_raise_refund_error = False

        self.is_enough_money = True

        # The only transaction id refund/get_status know about
        self.transaction_id_stub = str(uuid.uuid4())

        self.is_fake_result = False
        self.fake_result = TransactionResult(success=False, transaction_id="", message="Simulated default result")
        self.is_fake_status = False
        self.fake_status = TransactionStatus.PENDING

    @property
    def gateway_name(self) -> str:
        return "spy"

    def charge(self, user_id: str, amount: float) -> TransactionResult:
        self.charge_call_count += 1
        self.charge_parameters.append((user_id, amount))

        if self.should_raise_network_error:
            raise NetworkError("Provider network problem")
        if self.should_raise_payment_error:
            raise PaymentError("Provider payment problem")
        if self.is_fake_result:
            return self.fake_result

        transaction_id = str(uuid.uuid4())
        if not self.is_enough_money:
            return TransactionResult(
                success=False, transaction_id=transaction_id, message="Not enough money in the account"
            )
        return TransactionResult(success=True, transaction_id=transaction_id, message="Charge success")

    def refund(self, transaction_id: str) -> TransactionResult:
        self.refund_call_count += 1
        self.refund_parameters.append(transaction_id)

        if self.should_raise_network_error:
            raise NetworkError("Provider network problem")
        if self.should_raise_refund_error:
            raise RefundError("Provider refund problem")
        if self.is_fake_result:
            return self.fake_result

        if transaction_id != self.transaction_id_stub:
            return TransactionResult.failure()
        return TransactionResult(success=True, transaction_id=transaction_id, message="Refund success")

    def get_status(self, transaction_id: str) -> TransactionStatus:
        self.get_status_call_count += 1
        self.get_status_parameters.append(transaction_id)

        if self.should_raise_network_error:
            raise NetworkError("Provider network problem")
        if self.is_fake_status:
            return self.fake_status

        if transaction_id != self.transaction_id_stub:
            return TransactionStatus.FAILED
        return TransactionStatus.COMPLETED


@pytest.fixture
def gateway():
    return GatewaySpy()


@pytest.fixture
def logger_mock():
    return LoggerMock()


@pytest.fixture
def processor(gateway, logger_mock):
    return PaymentProcessor(gateway, logger_mock)


@pytest.fixture
def client(processor):
    """
    FastAPI TestClient with get_processor overridden to the spy-backed
    processor. Not used as a context manager, so the lifespan hook
    (logging setup) is skipped.
    """
    from app.main import app

    app.dependency_overrides[get_processor] = lambda: processor
    yield TestClient(app)
    app.dependency_overrides.clear()
