"""
Subjects evaluated by the bundled rule checkers.

Orders and customers belong to the shop; the engine receives them as
plain read-only values.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from affiliate.models.affiliate import Affiliate


@dataclass(frozen=True)
class Customer:
    """Shop customer."""

    id: int | None
    group: str | None = None
    # Placed orders, including the one being evaluated
    orders_count: int = 0
    # Affiliate whose referral link brought the customer in
    referrer: Affiliate | None = None


@dataclass(frozen=True)
class OrderItem:
    """Order line."""

    product_code: str
    quantity: int
    unit_price: Decimal


@dataclass(frozen=True)
class Order:
    """Shop order. Guest checkouts have no customer."""

    id: int
    total: Decimal
    customer: Customer | None = None
    items: tuple[OrderItem, ...] = field(default_factory=tuple)

    @property
    def items_count(self) -> int:
        """Total quantity across order lines."""
        return sum(item.quantity for item in self.items)
