"""Rule checkers evaluated against shop orders."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from affiliate.models.enums import RuleType
from affiliate.models.subjects import Order
from affiliate.services.eligibility.checkers.base import RuleChecker


class MinOrderTotalConfiguration(BaseModel):
    """Options of the ``min_order_total`` rule."""

    amount: Decimal = Field(ge=0)
    # Whether an order total equal to the amount qualifies
    equal: bool = True


class ItemCountConfiguration(BaseModel):
    """Options of the ``item_count`` rule."""

    count: int = Field(ge=0)
    equal: bool = True


class ContainsProductConfiguration(BaseModel):
    """Options of the ``contains_product`` rule."""

    product_code: str = Field(min_length=1)


class NthOrderConfiguration(BaseModel):
    """Options of the ``nth_order`` rule."""

    nth: int = Field(ge=1)


class OrderRuleChecker(RuleChecker):
    """Common base for checkers that only evaluate orders."""

    def supports(self, subject: Any) -> bool:
        return isinstance(subject, Order)

    def ensure_order(self, subject: Any) -> Order:
        if not isinstance(subject, Order):
            raise self.unsupported(subject)
        return subject


class MinOrderTotalRuleChecker(OrderRuleChecker):
    """Order total must reach a configured amount."""

    rule_type = RuleType.MIN_ORDER_TOTAL

    def is_eligible(self, subject: Any, configuration: Mapping[str, Any]) -> bool:
        order = self.ensure_order(subject)
        options = self.parse_configuration(configuration, MinOrderTotalConfiguration)

        if options.equal:
            return order.total >= options.amount
        return order.total > options.amount


class ItemCountRuleChecker(OrderRuleChecker):
    """Order must contain at least a configured number of items."""

    rule_type = RuleType.ITEM_COUNT

    def is_eligible(self, subject: Any, configuration: Mapping[str, Any]) -> bool:
        order = self.ensure_order(subject)
        options = self.parse_configuration(configuration, ItemCountConfiguration)

        if options.equal:
            return order.items_count >= options.count
        return order.items_count > options.count


class ContainsProductRuleChecker(OrderRuleChecker):
    """Order must contain a given product."""

    rule_type = RuleType.CONTAINS_PRODUCT

    def is_eligible(self, subject: Any, configuration: Mapping[str, Any]) -> bool:
        order = self.ensure_order(subject)
        options = self.parse_configuration(configuration, ContainsProductConfiguration)

        return any(
            item.product_code == options.product_code for item in order.items
        )


class NthOrderRuleChecker(OrderRuleChecker):
    """
    Order must be the customer's nth order.

    Guest orders carry no order history, so they cannot be evaluated.
    """

    rule_type = RuleType.NTH_ORDER

    def is_eligible(self, subject: Any, configuration: Mapping[str, Any]) -> bool:
        order = self.ensure_order(subject)
        if order.customer is None:
            raise self.unsupported(subject)

        options = self.parse_configuration(configuration, NthOrderConfiguration)
        return order.customer.orders_count == options.nth
