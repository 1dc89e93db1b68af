"""
Affiliate goals.

Referral goal eligibility engine for the affiliate extension.
"""

__version__ = "0.1.0"
