"""
Affiliate model.

Represents a participant who owns a referral code.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from affiliate.models.base import Base


class Affiliate(Base):
    """
    Affiliate entity.

    An affiliate may itself have been referred by another affiliate.
    The referrer link is a back-reference used for attribution; nothing
    guarantees the resulting chain is acyclic.

    Attributes:
        id: Primary key
        customer_id: Customer of the shop that owns this affiliate account
        referral_code: Code carried in referral links
        referrer_id: Affiliate who referred this one
        created_at: When the affiliate signed up
    """

    __tablename__ = "affiliates"

    # Primary key
    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )

    # Owner (customers live in the shop schema)
    customer_id: Mapped[int] = mapped_column(
        Integer, nullable=False, unique=True, index=True
    )
    referral_code: Mapped[str | None] = mapped_column(
        String(20), nullable=True, unique=True, index=True
    )

    # Referral
    referrer_id: Mapped[int | None] = mapped_column(
        ForeignKey("affiliates.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False
    )

    # Relationships
    referrer: Mapped[Optional["Affiliate"]] = relationship(
        "Affiliate",
        remote_side="Affiliate.id",
        back_populates="referrals",
    )
    referrals: Mapped[list["Affiliate"]] = relationship(
        "Affiliate",
        back_populates="referrer",
    )

    def __repr__(self) -> str:
        return (
            f"<Affiliate(id={self.id}, customer_id={self.customer_id}, "
            f"referral_code={self.referral_code!r})>"
        )
