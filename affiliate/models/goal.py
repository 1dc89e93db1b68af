"""
Affiliate goal models.

A goal is a trackable action that credits an affiliate when satisfied.
Rules attached to a goal narrow down which subjects satisfy it.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from affiliate.models.base import Base


class AffiliateGoal(Base):
    """
    AffiliateGoal entity.

    Read-only for the eligibility engine. The engine compares a snapshot
    of ``used`` against ``usage_limit``; the store that credits a goal
    must increment ``used`` with a conditional update
    (``UPDATE ... SET used = used + 1 WHERE used < usage_limit``) so that
    concurrent credits cannot push it past the limit.

    Attributes:
        id: Primary key
        name: Administrator-facing name
        starts_at: Goal is not credited before this moment
        ends_at: Goal is not credited after this moment
        usage_limit: Maximum number of credits (None = unlimited)
        used: Number of credits so far
        rules: Ordered rules evaluated against the subject
    """

    __tablename__ = "affiliate_goals"
    __table_args__ = (
        CheckConstraint(
            'used >= 0', name='check_goal_used_non_negative'
        ),
        CheckConstraint(
            'usage_limit IS NULL OR usage_limit >= 0',
            name='check_goal_usage_limit_non_negative'
        ),
    )

    # Primary key
    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )

    name: Mapped[str] = mapped_column(
        String(255), nullable=False
    )

    # Date window
    starts_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    ends_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    # Usage
    usage_limit: Mapped[int | None] = mapped_column(
        Integer, nullable=True
    )
    used: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False
    )

    # Relationships
    rules: Mapped[list["Rule"]] = relationship(
        "Rule",
        back_populates="goal",
        lazy="selectin",
        order_by="Rule.position",
        cascade="all, delete-orphan",
    )

    def has_rules(self) -> bool:
        """Check whether any rule is attached to the goal."""
        return bool(self.rules)

    def __repr__(self) -> str:
        return (
            f"<AffiliateGoal(id={self.id}, name={self.name!r}, "
            f"used={self.used}, usage_limit={self.usage_limit})>"
        )


class Rule(Base):
    """
    Rule entity.

    Attributes:
        id: Primary key
        goal_id: Owning goal
        type: Key of the rule checker in the registry
        configuration: Checker-specific options
        position: Evaluation order within the goal
    """

    __tablename__ = "affiliate_goal_rules"

    # Primary key
    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )

    goal_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("affiliate_goals.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    type: Mapped[str] = mapped_column(
        String(50), nullable=False
    )
    configuration: Mapped[dict[str, Any]] = mapped_column(
        JSON, default=dict, nullable=False
    )
    position: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False
    )

    # Relationships
    goal: Mapped["AffiliateGoal"] = relationship(
        "AffiliateGoal", back_populates="rules"
    )

    def __repr__(self) -> str:
        return f"<Rule(id={self.id}, type={self.type!r})>"
