"""
Affiliate models.

Exports SQLAlchemy models and subject types for easy imports.
"""

from affiliate.models.affiliate import Affiliate
from affiliate.models.base import Base
from affiliate.models.enums import EligibilityResult, RuleType
from affiliate.models.goal import AffiliateGoal, Rule
from affiliate.models.subjects import Customer, Order, OrderItem


__all__ = [
    "Base",
    # Entities
    "Affiliate",
    "AffiliateGoal",
    "Rule",
    # Subjects
    "Customer",
    "Order",
    "OrderItem",
    # Enums
    "EligibilityResult",
    "RuleType",
]
