"""
Affiliate service.

Builds affiliate accounts for customers and their referral links.
Persisting the returned objects is up to the caller.
"""

import secrets
import string
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from loguru import logger

from affiliate.config.settings import Settings, settings as default_settings
from affiliate.models.affiliate import Affiliate
from affiliate.models.subjects import Customer
from affiliate.utils.datetime_utils import utc_now
from affiliate.utils.exceptions import AffiliateError


REFERRAL_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_referral_code(length: int) -> str:
    """
    Generate a random referral code.

    Args:
        length: Number of characters

    Returns:
        Uppercase alphanumeric code
    """
    if length <= 0:
        raise ValueError(f"Referral code length must be positive, got {length}")
    return "".join(secrets.choice(REFERRAL_CODE_ALPHABET) for _ in range(length))


class AffiliateService:
    """Affiliate signup and referral links."""

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize affiliate service.

        Args:
            settings: Application settings (defaults to global settings)
        """
        self.settings = settings or default_settings

    def create_affiliate(
        self, customer: Customer, referral_code: str | None = None
    ) -> Affiliate:
        """
        Create an affiliate account for a customer.

        With multi-level referrals enabled, the affiliate who referred the
        customer becomes the new affiliate's referrer.

        Args:
            customer: Customer signing up
            referral_code: Code to use instead of a generated one

        Returns:
            New, unsaved affiliate

        Raises:
            AffiliateError: If the customer has not been saved yet
        """
        if customer.id is None:
            raise AffiliateError("Cannot create an affiliate for an unsaved customer")

        affiliate = Affiliate(
            customer_id=customer.id,
            referral_code=referral_code
            or generate_referral_code(self.settings.referral_code_length),
            created_at=utc_now(),
        )

        if self.settings.enabled_multi_level and customer.referrer is not None:
            affiliate.referrer = customer.referrer

        logger.info(
            "Affiliate created",
            extra={
                "customer_id": customer.id,
                "referrer_id": affiliate.referrer.id if affiliate.referrer else None,
            },
        )
        return affiliate

    def build_referral_url(self, base_url: str, affiliate: Affiliate) -> str:
        """
        Build the referral link of an affiliate.

        Existing query parameters are kept; a previous referral code is
        replaced.

        Args:
            base_url: Shop page the link points to
            affiliate: Affiliate owning the link

        Returns:
            URL carrying the referral code

        Raises:
            AffiliateError: If the affiliate has no referral code
        """
        if not affiliate.referral_code:
            raise AffiliateError(
                f"Affiliate {affiliate.id} has no referral code"
            )

        parameter = self.settings.referral_query_parameter
        parts = urlsplit(base_url)
        query = [
            (key, value)
            for key, value in parse_qsl(parts.query, keep_blank_values=True)
            if key != parameter
        ]
        query.append((parameter, affiliate.referral_code))

        return urlunsplit(parts._replace(query=urlencode(query)))
