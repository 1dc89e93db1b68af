"""Affiliate services."""
