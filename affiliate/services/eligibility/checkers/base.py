"""Base class for rule checkers.

A rule checker knows how to test one rule type against the subjects it
supports. The evaluator only talks to checkers through :meth:`RuleChecker.check`,
which folds every way a rule can fail to apply into
:attr:`EligibilityResult.NOT_APPLICABLE`.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from affiliate.models.enums import EligibilityResult
from affiliate.utils.exceptions import (
    InvalidRuleConfigurationError,
    UnsupportedSubjectTypeError,
)


__all__ = [
    "RuleChecker",
]

ConfigurationT = TypeVar("ConfigurationT", bound=BaseModel)


class RuleChecker(ABC):
    """Abstract base class for rule checkers.

    Attributes:
        rule_type: Registry key of the rule type this checker evaluates.
    """

    rule_type: str

    @abstractmethod
    def supports(self, subject: Any) -> bool:
        """Check whether the subject is of a type this checker evaluates."""

    @abstractmethod
    def is_eligible(self, subject: Any, configuration: Mapping[str, Any]) -> bool:
        """Evaluate the rule condition for the subject.

        Raises:
            UnsupportedSubjectTypeError: The subject turned out not to be
                evaluable by this checker.
            InvalidRuleConfigurationError: The options do not match
                the checker's configuration model.
        """

    def check(
        self, subject: Any, configuration: Mapping[str, Any] | None
    ) -> EligibilityResult:
        """Evaluate the rule and report a three-valued result.

        Args:
            subject: Value being tested (order, customer, affiliate, ...).
            configuration: Rule options as stored on the rule.

        Returns:
            ELIGIBLE or INELIGIBLE when the rule applies to the subject,
            NOT_APPLICABLE otherwise.
        """
        if not self.supports(subject):
            return EligibilityResult.NOT_APPLICABLE

        try:
            eligible = self.is_eligible(subject, configuration or {})
        except UnsupportedSubjectTypeError as exc:
            logger.debug(
                "Rule not applicable to subject",
                extra={"rule_type": exc.rule_type, "subject_type": exc.subject_type},
            )
            return EligibilityResult.NOT_APPLICABLE

        if eligible:
            return EligibilityResult.ELIGIBLE
        return EligibilityResult.INELIGIBLE

    def parse_configuration(
        self, configuration: Mapping[str, Any], model: type[ConfigurationT]
    ) -> ConfigurationT:
        """Validate raw rule options against a configuration model."""
        try:
            return model.model_validate(dict(configuration))
        except ValidationError as exc:
            raise InvalidRuleConfigurationError(self.rule_type, str(exc)) from exc

    def unsupported(self, subject: Any) -> UnsupportedSubjectTypeError:
        """Build the error signalling that ``subject`` cannot be evaluated."""
        return UnsupportedSubjectTypeError(self.rule_type, subject)
