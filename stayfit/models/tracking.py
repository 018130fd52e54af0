"""WeightHistoryEntry and DailySummary models - one row per user per day."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Numeric, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from stayfit.db.base import Base


class WeightHistoryEntry(Base):
    """Daily weigh-in; bmi is derived from weight and the user's height."""

    __tablename__ = "weight_history"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_weight_history_user_date"),)

    weight_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    weight: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)
    bmi: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)


class DailySummary(Base):
    """Per-day totals; breakfast + lunch + dinner calories add up to total_calories."""

    __tablename__ = "daily_summary"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_daily_summary_user_date"),)

    summary_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    total_calories: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False, default=0)
    total_protein: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False, default=0)
    goal_achieved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    breakfast_calories: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False, default=0)
    lunch_calories: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False, default=0)
    dinner_calories: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False, default=0)
