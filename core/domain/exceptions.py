"""
Domain-level exceptions.

Every failure the order pipeline can surface is a subclass of OrderError so
the API layer can map them to HTTP responses in one place.
"""
from typing import Optional


class OrderError(Exception):
    """Base class for order pipeline errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OrderValidationError(OrderError):
    """Inbound payload violated a field constraint."""

    status_code = 400


class OrderNotFoundError(OrderError):
    """Identifier does not resolve to a stored order."""

    status_code = 404

    def __init__(self, order_id: object, message: str = "Order not found") -> None:
        super().__init__(message)
        self.order_id = order_id


class StoreError(OrderError):
    """
    Unexpected persistence failure.

    The public message is always generic; the underlying cause is kept on
    ``cause`` for logging only.
    """

    status_code = 500

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        super().__init__("Internal Server Error")
        self.operation = operation
        self.cause = cause
