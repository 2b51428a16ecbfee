"""Application layer - services, validation and DTOs."""

from .dtos import OrderDTO, payload_to_fields
from .services import OrderApplicationService
from .validation import (
    OrderPayloadValidator,
    ValidationMode,
    validate_order_payload,
)

__all__ = [
    # DTOs
    "OrderDTO",
    "payload_to_fields",
    # Services
    "OrderApplicationService",
    # Validation
    "OrderPayloadValidator",
    "ValidationMode",
    "validate_order_payload",
]
