"""Registry of rule checkers keyed by rule type.

The registry is filled once while the application starts and is
read-only afterwards, so it can be shared between concurrent evaluations.
"""

from collections.abc import Iterable
from types import MappingProxyType

from loguru import logger

from affiliate.services.eligibility.checkers import (
    ContainsProductRuleChecker,
    CustomerGroupRuleChecker,
    ItemCountRuleChecker,
    MinOrderTotalRuleChecker,
    NthOrderRuleChecker,
    ReferrerRuleChecker,
    RuleChecker,
)
from affiliate.utils.exceptions import UnknownRuleTypeError


__all__ = [
    "RuleCheckerRegistry",
    "build_default_registry",
]


class RuleCheckerRegistry:
    """Immutable mapping of rule types to rule checkers."""

    def __init__(self, checkers: Iterable[RuleChecker]) -> None:
        """Initialize the registry.

        Args:
            checkers: Checker instances; each is registered under its
                ``rule_type``.

        Raises:
            ValueError: Two checkers declare the same rule type.
        """
        checkers_by_type: dict[str, RuleChecker] = {}
        for checker in checkers:
            rule_type = str(checker.rule_type)
            if rule_type in checkers_by_type:
                raise ValueError(
                    f"Rule type '{rule_type}' is already registered to "
                    f"{checkers_by_type[rule_type].__class__.__name__}"
                )
            checkers_by_type[rule_type] = checker

        self._checkers = MappingProxyType(checkers_by_type)
        logger.debug(
            "Rule checker registry initialized",
            extra={"rule_types": self.rule_types()},
        )

    def get(self, rule_type: str) -> RuleChecker:
        """Get the checker for a rule type.

        Raises:
            UnknownRuleTypeError: No checker is registered for ``rule_type``.
        """
        try:
            return self._checkers[rule_type]
        except KeyError:
            raise UnknownRuleTypeError(rule_type) from None

    def has(self, rule_type: str) -> bool:
        """Check if a rule type is registered."""
        return rule_type in self._checkers

    def rule_types(self) -> list[str]:
        """Return all registered rule types, sorted."""
        return sorted(self._checkers)

    def __contains__(self, rule_type: object) -> bool:
        return rule_type in self._checkers

    def __len__(self) -> int:
        return len(self._checkers)


def build_default_registry() -> RuleCheckerRegistry:
    """Create a registry holding every bundled rule checker."""
    return RuleCheckerRegistry(
        [
            # Order rules
            MinOrderTotalRuleChecker(),
            ItemCountRuleChecker(),
            ContainsProductRuleChecker(),
            NthOrderRuleChecker(),
            # Customer rules
            CustomerGroupRuleChecker(),
            ReferrerRuleChecker(),
        ]
    )
