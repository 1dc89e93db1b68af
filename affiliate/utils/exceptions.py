"""
Exception types for the affiliate engine.

Configuration errors propagate to the caller. An unsupported subject is
recovered locally by the rule checker and never reaches the evaluator.
"""


class AffiliateError(Exception):
    """Base error for the affiliate extension."""
    pass


class UnknownRuleTypeError(AffiliateError, LookupError):
    """Raised when no rule checker is registered for a rule type."""

    def __init__(self, rule_type: str) -> None:
        self.rule_type = rule_type
        super().__init__(f"No rule checker registered for type '{rule_type}'")


class InvalidRuleConfigurationError(AffiliateError, ValueError):
    """Raised when a rule's configuration cannot be parsed by its checker."""

    def __init__(self, rule_type: str, message: str) -> None:
        self.rule_type = rule_type
        super().__init__(
            f"Invalid configuration for rule '{rule_type}': {message}"
        )


class UnsupportedSubjectTypeError(AffiliateError):
    """Raised by a checker that cannot evaluate the subject it received."""

    def __init__(self, rule_type: str, subject: object) -> None:
        self.rule_type = rule_type
        self.subject_type = type(subject).__name__
        super().__init__(
            f"Rule '{rule_type}' cannot evaluate subject "
            f"of type {self.subject_type}"
        )


# Misconfiguration by an administrator, rendered as a system error
CONFIGURATION_ERRORS = (
    UnknownRuleTypeError,
    InvalidRuleConfigurationError,
)


def is_configuration_error(exc: Exception) -> bool:
    """
    Check if exception indicates a misconfigured goal.

    Args:
        exc: Exception to check

    Returns:
        True if exception comes from goal or rule configuration
    """
    return isinstance(exc, CONFIGURATION_ERRORS)
