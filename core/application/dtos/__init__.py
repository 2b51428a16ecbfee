"""Application DTOs."""

from .order_dto import PAYLOAD_FIELDS, OrderDTO, payload_to_fields

__all__ = ["OrderDTO", "PAYLOAD_FIELDS", "payload_to_fields"]
