"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- Stub rule checkers with fixed outcomes
- Registry holding the stubs
- Goal factory
"""

from collections.abc import Mapping
from typing import Any

import pytest

from affiliate.models import AffiliateGoal, Rule
from affiliate.services.eligibility import RuleChecker, RuleCheckerRegistry
from affiliate.utils.exceptions import UnsupportedSubjectTypeError


class StubRuleChecker(RuleChecker):
    """
    Rule checker with a fixed outcome that records its calls.

    Outcomes:
    - True / False: returned by is_eligible()
    - "unsupported": is_eligible() raises UnsupportedSubjectTypeError
    - "skip": supports() rejects the subject
    """

    def __init__(self, rule_type: str, outcome: Any) -> None:
        self.rule_type = rule_type
        self.outcome = outcome
        self.calls: list[tuple[Any, Mapping[str, Any]]] = []

    def supports(self, subject: Any) -> bool:
        return self.outcome != "skip"

    def is_eligible(self, subject: Any, configuration: Mapping[str, Any]) -> bool:
        self.calls.append((subject, configuration))
        if self.outcome == "unsupported":
            raise UnsupportedSubjectTypeError(self.rule_type, subject)
        return self.outcome


@pytest.fixture
def stub_checkers():
    """Stub checkers keyed by rule type."""
    return {
        "passes": StubRuleChecker("passes", True),
        "fails": StubRuleChecker("fails", False),
        "unsupported": StubRuleChecker("unsupported", "unsupported"),
        "skipped": StubRuleChecker("skipped", "skip"),
        "passes_again": StubRuleChecker("passes_again", True),
    }


@pytest.fixture
def stub_registry(stub_checkers):
    """Registry holding the stub checkers."""
    return RuleCheckerRegistry(stub_checkers.values())


@pytest.fixture
def make_goal():
    """
    Build an unsaved goal.

    Args:
        rule_types: Rule types attached in order
        **fields: Goal columns (starts_at, ends_at, usage_limit, used)
    """
    def _make_goal(*rule_types: str, **fields: Any) -> AffiliateGoal:
        fields.setdefault("name", "Test goal")
        fields.setdefault("used", 0)
        goal = AffiliateGoal(**fields)
        for position, rule_type in enumerate(rule_types):
            goal.rules.append(
                Rule(type=rule_type, configuration={}, position=position)
            )
        return goal

    return _make_goal
