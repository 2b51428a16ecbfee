"""Search criteria for listing orders."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OrderFilter:
    """
    Optional constraints applied to an order scan.

    ``None`` means "no constraint". An empty string is still a constraint:
    ``customer_name=""`` matches every name (empty substring) while
    ``status=""`` matches no stored order.
    """
    status: Optional[str] = None
    customer_name: Optional[str] = None

    def as_dict(self) -> dict:
        """Supplied criteria only, for logging."""
        criteria = {}
        if self.status is not None:
            criteria["status"] = self.status
        if self.customer_name is not None:
            criteria["customerName"] = self.customer_name
        return criteria
