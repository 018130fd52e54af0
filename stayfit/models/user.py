"""User, UserGoal and UserSetting models."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stayfit.db.base import Base


class User(Base):
    """Account with the body data the calorie targets are derived from."""

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(10), nullable=True)  # MALE / FEMALE
    height: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)  # cm
    current_weight: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)  # kg
    target_weight: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)  # kg
    activity_level: Mapped[str | None] = mapped_column(String(30), nullable=True)
    role: Mapped[str] = mapped_column(String(10), nullable=False, default="USER")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    goals: Mapped[list["UserGoal"]] = relationship(
        "UserGoal", back_populates="user", cascade="all, delete-orphan"
    )
    settings: Mapped["UserSetting | None"] = relationship(
        "UserSetting", back_populates="user", cascade="all, delete-orphan", uselist=False
    )


class UserGoal(Base):
    """Daily calorie and macro targets; only one goal per user is active."""

    __tablename__ = "user_goals"

    goal_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    daily_calories: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False)
    goal_type: Mapped[str] = mapped_column(String(20), nullable=False)
    protein_grams: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    fat_grams: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    carbs_grams: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped["User"] = relationship("User", back_populates="goals")


class UserSetting(Base):
    __tablename__ = "user_settings"

    setting_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, unique=True
    )
    language: Mapped[str] = mapped_column(String(5), nullable=False, default="uk")
    theme: Mapped[str] = mapped_column(String(10), nullable=False, default="AUTO")
    reminder_food_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    weekly_reports_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="settings")
