"""Rule checkers evaluated against customers and affiliates."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from affiliate.models.affiliate import Affiliate
from affiliate.models.enums import RuleType
from affiliate.models.subjects import Customer, Order
from affiliate.services.eligibility.checkers.base import RuleChecker


class CustomerGroupConfiguration(BaseModel):
    """Options of the ``customer_group`` rule."""

    groups: list[str] = Field(min_length=1)


class ReferrerConfiguration(BaseModel):
    """Options of the ``referrer`` rule."""

    affiliate_id: int


class CustomerGroupRuleChecker(RuleChecker):
    """
    Customer must belong to one of the configured groups.

    Evaluates customers directly, or the customer who placed an order.
    """

    rule_type = RuleType.CUSTOMER_GROUP

    def supports(self, subject: Any) -> bool:
        return isinstance(subject, (Customer, Order))

    def is_eligible(self, subject: Any, configuration: Mapping[str, Any]) -> bool:
        if isinstance(subject, Order):
            customer = subject.customer
        elif isinstance(subject, Customer):
            customer = subject
        else:
            customer = None

        # Guest orders have no group to compare
        if customer is None:
            raise self.unsupported(subject)

        options = self.parse_configuration(configuration, CustomerGroupConfiguration)
        return customer.group in options.groups


class ReferrerRuleChecker(RuleChecker):
    """Goal is restricted to one specific affiliate."""

    rule_type = RuleType.REFERRER

    def supports(self, subject: Any) -> bool:
        return isinstance(subject, Affiliate)

    def is_eligible(self, subject: Any, configuration: Mapping[str, Any]) -> bool:
        if not isinstance(subject, Affiliate):
            raise self.unsupported(subject)

        options = self.parse_configuration(configuration, ReferrerConfiguration)
        return subject.id == options.affiliate_id
