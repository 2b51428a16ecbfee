"""
Payload validation for order writes.

Each field carries an ordered list of checks. Fields are visited in
declaration order and the first failing check wins, so the error message for
a given payload is always the same.
"""
import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from core.domain.enums import OrderStatus
from core.domain.exceptions import OrderValidationError


class ValidationMode(str, Enum):
    """Which schema to validate against."""

    CREATE = "create"
    UPDATE = "update"


# A check returns an error message, or None if the value is acceptable.
Check = Callable[[str, Any], Optional[str]]


def _is_string(label: str, value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return f'"{label}" must be a string'
    return None


def _not_empty(label: str, value: str) -> Optional[str]:
    if value == "":
        return f'"{label}" is not allowed to be empty'
    return None


def _min_length(limit: int) -> Check:
    def check(label: str, value: str) -> Optional[str]:
        if len(value) < limit:
            return f'"{label}" length must be at least {limit} characters long'
        return None
    return check


def _is_number(label: str, value: Any) -> Optional[str]:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f'"{label}" must be a number'
    # JSON integers are unbounded; anything past the float range is unusable
    if isinstance(value, int):
        if abs(value) > sys.float_info.max:
            return f'"{label}" must be a number'
    elif not math.isfinite(value):
        return f'"{label}" must be a number'
    return None


def _positive(label: str, value: float) -> Optional[str]:
    if value <= 0:
        return f'"{label}" must be a positive number'
    return None


def _one_of(allowed: List[str]) -> Check:
    def check(label: str, value: Any) -> Optional[str]:
        if not isinstance(value, str) or value not in allowed:
            return f'"{label}" must be one of [{", ".join(allowed)}]'
        return None
    return check


def _list_of_objects(label: str, value: Any) -> Optional[str]:
    if not isinstance(value, list):
        return f'"{label}" must be an array'
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            return f'"{label}[{index}]" must be of type object'
    return None


@dataclass(frozen=True)
class FieldRule:
    """Constraint list for one payload field."""

    name: str
    required_on_create: bool
    checks: Tuple[Check, ...]

    def first_error(self, value: Any) -> Optional[str]:
        for check in self.checks:
            message = check(self.name, value)
            if message:
                return message
        return None


ORDER_FIELD_RULES: Tuple[FieldRule, ...] = (
    FieldRule(
        name="customerName",
        required_on_create=True,
        checks=(_is_string, _not_empty, _min_length(3)),
    ),
    FieldRule(
        name="totalAmount",
        required_on_create=True,
        checks=(_is_number, _positive),
    ),
    FieldRule(
        name="status",
        required_on_create=False,
        checks=(_one_of(OrderStatus.values()),),
    ),
    FieldRule(
        name="items",
        required_on_create=False,
        checks=(_list_of_objects,),
    ),
)


class OrderPayloadValidator:
    """
    Validates create and partial-update payloads.

    The validator never mutates its input; on success it returns a shallow
    copy containing only the declared fields.
    """

    def __init__(self, rules: Tuple[FieldRule, ...] = ORDER_FIELD_RULES) -> None:
        self._rules = rules
        self._known = {rule.name for rule in rules}

    def validate(self, payload: Any, mode: ValidationMode) -> Dict[str, Any]:
        """
        Check payload against the schema for ``mode``.

        Args:
            payload: Decoded JSON body
            mode: CREATE or UPDATE

        Returns:
            Accepted payload

        Raises:
            OrderValidationError: First violated constraint
        """
        if not isinstance(payload, dict):
            raise OrderValidationError('"value" must be of type object')

        for rule in self._rules:
            if rule.name not in payload:
                if mode is ValidationMode.CREATE and rule.required_on_create:
                    raise OrderValidationError(f'"{rule.name}" is required')
                continue
            message = rule.first_error(payload[rule.name])
            if message:
                raise OrderValidationError(message)

        for key in payload:
            if key not in self._known:
                raise OrderValidationError(f'"{key}" is not allowed')

        if mode is ValidationMode.UPDATE and not payload:
            raise OrderValidationError('"value" must have at least 1 key')

        return dict(payload)


_default_validator = OrderPayloadValidator()


def validate_order_payload(payload: Any, mode: ValidationMode) -> Dict[str, Any]:
    """Validate with the default order schema."""
    return _default_validator.validate(payload, mode)
