"""
Eligibility services package.

Contains the goal eligibility engine:
- checkers: Rule checkers, one per rule type
- registry: Rule type -> checker lookup
- evaluator: Goal eligibility decision
"""

from affiliate.services.eligibility.checkers import RuleChecker
from affiliate.services.eligibility.evaluator import EligibilityEvaluator
from affiliate.services.eligibility.registry import (
    RuleCheckerRegistry,
    build_default_registry,
)


__all__ = [
    "EligibilityEvaluator",
    "RuleChecker",
    "RuleCheckerRegistry",
    "build_default_registry",
]
