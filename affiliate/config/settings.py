"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

import re
from typing import Literal

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


UnsupportedRulePolicy = Literal["lenient", "strict"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "production"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/affiliate.log"
    log_rotation: str = "1 day"
    log_retention: str = "7 days"

    # Referral
    enabled_multi_level: bool = Field(
        default=False,
        description="Attach the customer's own referrer to new affiliates"
    )
    referral_query_parameter: str = Field(
        default="ref",
        min_length=1,
        max_length=32,
        description="Query parameter carrying the referral code in links"
    )
    referral_code_length: int = Field(
        default=10, ge=6, le=20, description="Length of generated referral codes"
    )

    # Eligibility
    unsupported_rule_policy: UnsupportedRulePolicy = Field(
        default="lenient",
        description=(
            "How rules that cannot evaluate a subject affect a goal: "
            "'lenient' ignores them, 'strict' rejects the goal unless "
            "a later rule matches"
        )
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate loguru level name."""
        level = v.upper()
        allowed = {'TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL'}
        if level not in allowed:
            raise ValueError(
                f'Invalid LOG_LEVEL: {v}. Expected one of {sorted(allowed)}'
            )
        return level

    @field_validator('referral_query_parameter')
    @classmethod
    def validate_query_parameter(cls, v: str) -> str:
        """Validate referral query parameter name."""
        if not re.match(r'^[A-Za-z_][A-Za-z0-9_-]*$', v):
            raise ValueError(
                'REFERRAL_QUERY_PARAMETER must start with a letter or underscore '
                'and contain only letters, digits, "_" or "-"'
            )
        return v

    @model_validator(mode='after')
    def validate_production(self) -> 'Settings':
        """Validate production-specific requirements."""
        if self.environment == 'production':
            # DEBUG must be False in production
            if self.debug:
                raise ValueError(
                    'DEBUG must be False in production environment. '
                    'Set DEBUG=false in your .env file.'
                )

            if self.log_level in ('TRACE', 'DEBUG'):
                logger.warning(
                    f'LOG_LEVEL={self.log_level} in production will log '
                    'every eligibility decision.'
                )

        return self


# Global settings instance
settings = Settings()
