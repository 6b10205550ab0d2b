"""
Fault taxonomy.

Gateways raise GatewayError subclasses for infrastructure or rule failures.
PaymentProcessor catches them and converts them into failed results, so they
never reach a caller of the facade. Validation failures, insufficient funds and
unknown transaction ids are ordinary results, not exceptions.
"""


class GatewayError(Exception):
    """Base class for faults raised by a payment gateway."""


class NetworkError(GatewayError):
    """The gateway could not be reached or did not answer."""


class PaymentError(GatewayError):
    """The gateway rejected a charge."""


class RefundError(GatewayError):
    """The gateway rejected a refund."""


class InvalidTransactionIdError(ValueError):
    """Raised by a status lookup with an empty id under the RAISE policy."""
