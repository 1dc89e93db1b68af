"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for tests
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("ENABLED_MULTI_LEVEL", "false")
os.environ.setdefault("UNSUPPORTED_RULE_POLICY", "lenient")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from affiliate.models import Affiliate, Customer, Order, OrderItem


@pytest.fixture
def now():
    """Fixed evaluation time."""
    return datetime(2026, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def clock(now):
    """Clock returning the fixed evaluation time."""
    return lambda: now


@pytest.fixture
def sample_affiliate():
    """Affiliate with an id and referral code."""
    return Affiliate(id=7, customer_id=70, referral_code="REF7CODE")


@pytest.fixture
def sample_customer():
    """Registered customer with two orders."""
    return Customer(id=100, group="wholesale", orders_count=2)


@pytest.fixture
def sample_order(sample_customer):
    """Order of 150.00 with three items."""
    return Order(
        id=1,
        total=Decimal("150.00"),
        customer=sample_customer,
        items=(
            OrderItem(product_code="MUG", quantity=2, unit_price=Decimal("25.00")),
            OrderItem(product_code="TSHIRT", quantity=1, unit_price=Decimal("100.00")),
        ),
    )


@pytest.fixture
def guest_order():
    """Order placed without a customer account."""
    return Order(
        id=2,
        total=Decimal("80.00"),
        items=(
            OrderItem(product_code="MUG", quantity=1, unit_price=Decimal("80.00")),
        ),
    )
