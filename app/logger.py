"""
Outcome logging for the payment processor.

PaymentProcessor reports one entry per call through the Logger contract.
ConsoleLogger routes those entries into stdlib logging so they share
handlers and format with the rest of the service.
"""
import logging
from abc import ABC, abstractmethod

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Logger(ABC):
    @abstractmethod
    def log(self, message: str) -> None:
        pass


class ConsoleLogger(Logger):
    def __init__(self, name: str = "app.payments"):
        self._logger = logging.getLogger(name)

    def log(self, message: str) -> None:
        self._logger.info(message)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
