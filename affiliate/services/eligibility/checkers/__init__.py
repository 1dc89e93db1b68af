"""
Rule checkers package.

Contains one checker per rule type:
- order_rules: min_order_total, item_count, contains_product, nth_order
- customer_rules: customer_group, referrer
"""

from affiliate.services.eligibility.checkers.base import RuleChecker
from affiliate.services.eligibility.checkers.customer_rules import (
    CustomerGroupRuleChecker,
    ReferrerRuleChecker,
)
from affiliate.services.eligibility.checkers.order_rules import (
    ContainsProductRuleChecker,
    ItemCountRuleChecker,
    MinOrderTotalRuleChecker,
    NthOrderRuleChecker,
)


__all__ = [
    "RuleChecker",
    # Order rules
    "MinOrderTotalRuleChecker",
    "ItemCountRuleChecker",
    "ContainsProductRuleChecker",
    "NthOrderRuleChecker",
    # Customer rules
    "CustomerGroupRuleChecker",
    "ReferrerRuleChecker",
]
