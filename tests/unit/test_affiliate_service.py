"""
Tests for affiliate signup and referral links.

Covers:
- Referral code generation
- Affiliate creation with and without multi-level referrals
- Referral URL building
"""

import pytest

from affiliate.config.settings import Settings
from affiliate.models import Affiliate, Customer
from affiliate.services.affiliate_service import (
    REFERRAL_CODE_ALPHABET,
    AffiliateService,
    generate_referral_code,
)
from affiliate.utils.exceptions import AffiliateError


@pytest.fixture
def service():
    """Service with multi-level referrals disabled."""
    return AffiliateService(Settings(environment="testing", enabled_multi_level=False))


@pytest.fixture
def multi_level_service():
    """Service with multi-level referrals enabled."""
    return AffiliateService(Settings(environment="testing", enabled_multi_level=True))


class TestGenerateReferralCode:
    """Test referral code generation."""

    def test_length_and_alphabet(self):
        """Code has the requested length and uses the code alphabet."""
        code = generate_referral_code(12)

        assert len(code) == 12
        assert set(code) <= set(REFERRAL_CODE_ALPHABET)

    def test_invalid_length(self):
        """Non-positive length is rejected."""
        with pytest.raises(ValueError):
            generate_referral_code(0)


class TestCreateAffiliate:
    """Test affiliate creation."""

    def test_creates_affiliate_for_customer(self, service):
        """Affiliate belongs to the customer and gets a code."""
        affiliate = service.create_affiliate(Customer(id=42))

        assert affiliate.customer_id == 42
        assert len(affiliate.referral_code) == service.settings.referral_code_length
        assert affiliate.created_at is not None
        assert affiliate.referrer is None

    def test_explicit_referral_code(self, service):
        """Given referral code is kept."""
        affiliate = service.create_affiliate(Customer(id=42), referral_code="SPRING26")

        assert affiliate.referral_code == "SPRING26"

    def test_referrer_ignored_without_multi_level(self, service, sample_affiliate):
        """Customer's referrer is not attached when multi-level is off."""
        customer = Customer(id=42, referrer=sample_affiliate)

        affiliate = service.create_affiliate(customer)

        assert affiliate.referrer is None

    def test_referrer_attached_with_multi_level(self, multi_level_service, sample_affiliate):
        """Customer's referrer becomes the affiliate's referrer."""
        customer = Customer(id=42, referrer=sample_affiliate)

        affiliate = multi_level_service.create_affiliate(customer)

        assert affiliate.referrer is sample_affiliate
        assert affiliate in sample_affiliate.referrals

    def test_unsaved_customer(self, service):
        """Customer without id cannot become an affiliate."""
        with pytest.raises(AffiliateError):
            service.create_affiliate(Customer(id=None))


class TestBuildReferralUrl:
    """Test referral URL building."""

    def test_plain_url(self, service, sample_affiliate):
        """Code is appended as the referral query parameter."""
        url = service.build_referral_url("https://shop.example.com/", sample_affiliate)

        assert url == "https://shop.example.com/?ref=REF7CODE"

    def test_existing_query_kept(self, service, sample_affiliate):
        """Existing parameters are kept and an old code is replaced."""
        url = service.build_referral_url(
            "https://shop.example.com/p?utm_source=mail&ref=OLD", sample_affiliate
        )

        assert url == "https://shop.example.com/p?utm_source=mail&ref=REF7CODE"

    def test_custom_query_parameter(self, sample_affiliate):
        """Query parameter name comes from settings."""
        service = AffiliateService(
            Settings(environment="testing", referral_query_parameter="partner")
        )

        url = service.build_referral_url("https://shop.example.com", sample_affiliate)

        assert url == "https://shop.example.com?partner=REF7CODE"

    def test_affiliate_without_code(self, service):
        """Affiliate without code has no referral link."""
        with pytest.raises(AffiliateError):
            service.build_referral_url("https://shop.example.com", Affiliate(id=1, customer_id=1))
