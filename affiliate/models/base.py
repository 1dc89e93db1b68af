"""
Declarative base for affiliate models.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all affiliate models."""
    pass
