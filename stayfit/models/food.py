"""MealType, Product and FoodDiaryEntry models."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, Numeric, String, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stayfit.db.base import Base


class MealType(Base):
    """Canonical meal slot (BREAKFAST, LUNCH, DINNER, SNACK)."""

    __tablename__ = "meal_types"

    meal_type_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Product(Base):
    """Food with macros per 100 g.

    Global products belong to the shared catalog and have no creator;
    custom products are owned by the user who added them.
    """

    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category: Mapped[str | None] = mapped_column(String(20), nullable=True)
    calories_per_100g: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    protein_per_100g: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False, default=0)
    fat_per_100g: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False, default=0)
    carbs_per_100g: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False, default=0)
    is_global: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_by_user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.user_id", ondelete="SET NULL"), nullable=True
    )

    diary_entries: Mapped[list["FoodDiaryEntry"]] = relationship(
        "FoodDiaryEntry", back_populates="product"
    )


class FoodDiaryEntry(Base):
    """One logged portion of a product in a meal slot."""

    __tablename__ = "food_diary"
    __table_args__ = (Index("ix_food_diary_user_date", "user_id", "date"),)

    entry_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.product_id", ondelete="CASCADE"), nullable=False
    )
    meal_type_id: Mapped[int] = mapped_column(
        ForeignKey("meal_types.meal_type_id"), nullable=False
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[dt.time | None] = mapped_column(Time, nullable=True)
    weight_grams: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False)
    calories: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False)
    protein: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)

    product: Mapped["Product"] = relationship("Product", back_populates="diary_entries")
