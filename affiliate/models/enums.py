"""
Enumerations shared by the eligibility engine.
"""

from enum import StrEnum


class EligibilityResult(StrEnum):
    """Outcome of checking one rule against one subject."""

    ELIGIBLE = "eligible"  # Rule applies and its condition holds
    INELIGIBLE = "ineligible"  # Rule applies and its condition fails
    NOT_APPLICABLE = "not_applicable"  # Rule cannot evaluate this subject


class RuleType(StrEnum):
    """Rule types shipped with the engine."""

    MIN_ORDER_TOTAL = "min_order_total"
    ITEM_COUNT = "item_count"
    CONTAINS_PRODUCT = "contains_product"
    NTH_ORDER = "nth_order"
    CUSTOMER_GROUP = "customer_group"
    REFERRER = "referrer"
