"""
Referral eligibility evaluator.

Decides whether an affiliate goal is credited for a subject. The decision
is made in a fixed order and stops at the first failing check:

1. the goal's date window
2. the goal's usage limit
3. the goal's rules, in order
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from loguru import logger

from affiliate.config.settings import UnsupportedRulePolicy, settings
from affiliate.models.affiliate import Affiliate
from affiliate.models.enums import EligibilityResult
from affiliate.models.goal import AffiliateGoal, Rule
from affiliate.services.eligibility.registry import RuleCheckerRegistry
from affiliate.utils.datetime_utils import ensure_aware, utc_now


class EligibilityEvaluator:
    """
    Eligibility evaluator for affiliate goals.

    Stateless: the goal and subject are only read, and the clock is read
    once per call. Instances can be shared between concurrent callers.
    """

    def __init__(
        self,
        registry: RuleCheckerRegistry,
        clock: Callable[[], datetime] = utc_now,
        unsupported_rule_policy: UnsupportedRulePolicy | None = None,
    ) -> None:
        """
        Initialize eligibility evaluator.

        Args:
            registry: Rule checkers keyed by rule type
            clock: Source of the current time
            unsupported_rule_policy: "lenient" or "strict"
                (defaults to settings.unsupported_rule_policy)
        """
        self.registry = registry
        self.clock = clock
        self.unsupported_rule_policy = (
            unsupported_rule_policy or settings.unsupported_rule_policy
        )

    def is_eligible(
        self,
        goal: AffiliateGoal,
        affiliate: Affiliate | None,
        subject: Any = None,
    ) -> bool:
        """
        Check if a goal should be credited for a subject.

        Args:
            goal: Goal being tracked
            affiliate: Affiliate that would be credited
            subject: Value tested against the goal's rules (order, customer...)

        Returns:
            True if the goal is credited

        Raises:
            UnknownRuleTypeError: A rule's type has no registered checker
            InvalidRuleConfigurationError: A rule's options are malformed
        """
        if not self.is_eligible_to_dates(goal):
            logger.debug(
                "Goal outside its date window",
                extra={"goal_id": goal.id},
            )
            return False

        if not self.is_eligible_to_usage_limit(goal):
            logger.debug(
                "Goal usage limit reached",
                extra={
                    "goal_id": goal.id,
                    "used": goal.used,
                    "usage_limit": goal.usage_limit,
                },
            )
            return False

        # Affiliate restriction is disabled, see is_eligible_to_affiliate()

        if not goal.has_rules():
            return True

        eligible = True
        any_rule_matched = False

        for rule in goal.rules:
            result = self.check_rule(rule, subject)

            if result is EligibilityResult.INELIGIBLE:
                logger.debug(
                    "Goal rejected by rule",
                    extra={"goal_id": goal.id, "rule_type": rule.type},
                )
                return False

            if result is EligibilityResult.ELIGIBLE:
                any_rule_matched = True
                continue

            # Not applicable
            if self.unsupported_rule_policy == "strict" and not any_rule_matched:
                eligible = False

        decision = eligible or any_rule_matched
        logger.debug(
            "Goal rules evaluated",
            extra={
                "goal_id": goal.id,
                "affiliate_id": affiliate.id if affiliate is not None else None,
                "any_rule_matched": any_rule_matched,
                "eligible": decision,
            },
        )
        return decision

    def check_rule(self, rule: Rule, subject: Any) -> EligibilityResult:
        """
        Check one rule against a subject.

        Args:
            rule: Rule attached to a goal
            subject: Value tested against the rule

        Returns:
            Three-valued rule result

        Raises:
            UnknownRuleTypeError: No checker is registered for the rule type
        """
        checker = self.registry.get(rule.type)
        return checker.check(subject, rule.configuration)

    def is_eligible_to_dates(self, goal: AffiliateGoal) -> bool:
        """
        Check if the current time is inside the goal's date window.

        Args:
            goal: Goal being tracked

        Returns:
            False before starts_at or after ends_at
        """
        now = ensure_aware(self.clock())

        if goal.starts_at is not None and now < ensure_aware(goal.starts_at):
            return False

        if goal.ends_at is not None and now > ensure_aware(goal.ends_at):
            return False

        return True

    def is_eligible_to_usage_limit(self, goal: AffiliateGoal) -> bool:
        """
        Check if the goal can still be credited.

        Args:
            goal: Goal being tracked

        Returns:
            False once used reaches usage_limit
        """
        if goal.usage_limit is None:
            return True

        return (goal.used or 0) < goal.usage_limit

    def is_eligible_to_affiliate(
        self, goal: AffiliateGoal, affiliate: Affiliate
    ) -> bool:
        """
        Check if the goal is restricted to this affiliate.

        A goal is affiliate specific when one of its rules (a "referrer"
        rule) accepts the affiliate. Not consulted by is_eligible().

        Args:
            goal: Goal being tracked
            affiliate: Affiliate that would be credited

        Returns:
            True if some rule accepts the affiliate
        """
        for rule in goal.rules:
            if self.check_rule(rule, affiliate) is EligibilityResult.ELIGIBLE:
                return True

        return False
