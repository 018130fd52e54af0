"""Initial schema: users, goals, settings, meal types, products, diary, tracking, sessions, logs.

Revision ID: 001
Revises:
Create Date: 2025-03-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("gender", sa.String(length=10), nullable=True),
        sa.Column("height", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("current_weight", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("target_weight", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("activity_level", sa.String(length=30), nullable=True),
        sa.Column("role", sa.String(length=10), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "meal_types",
        sa.Column("meal_type_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=20), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("meal_type_id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "user_goals",
        sa.Column("goal_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("daily_calories", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.Column("goal_type", sa.String(length=20), nullable=False),
        sa.Column("protein_grams", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column("fat_grams", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column("carbs_grams", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("goal_id"),
    )
    op.create_index(op.f("ix_user_goals_user_id"), "user_goals", ["user_id"], unique=False)

    op.create_table(
        "user_settings",
        sa.Column("setting_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("language", sa.String(length=5), nullable=False),
        sa.Column("theme", sa.String(length=10), nullable=False),
        sa.Column("reminder_food_enabled", sa.Boolean(), nullable=False),
        sa.Column("weekly_reports_enabled", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("setting_id"),
        sa.UniqueConstraint("user_id"),
    )

    op.create_table(
        "products",
        sa.Column("product_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=True),
        sa.Column("calories_per_100g", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("protein_per_100g", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("fat_per_100g", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("carbs_per_100g", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("is_global", sa.Boolean(), nullable=False),
        sa.Column("created_by_user_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["created_by_user_id"], ["users.user_id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("product_id"),
    )
    op.create_index(op.f("ix_products_name"), "products", ["name"], unique=False)

    op.create_table(
        "food_diary",
        sa.Column("entry_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.Column("meal_type_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.Time(), nullable=True),
        sa.Column("weight_grams", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.Column("calories", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.Column("protein", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["product_id"], ["products.product_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["meal_type_id"], ["meal_types.meal_type_id"]),
        sa.PrimaryKeyConstraint("entry_id"),
    )
    op.create_index("ix_food_diary_user_date", "food_diary", ["user_id", "date"], unique=False)

    op.create_table(
        "weight_history",
        sa.Column("weight_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("bmi", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("weight_id"),
        sa.UniqueConstraint("user_id", "date", name="uq_weight_history_user_date"),
    )

    op.create_table(
        "daily_summary",
        sa.Column("summary_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("total_calories", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.Column("total_protein", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("goal_achieved", sa.Boolean(), nullable=False),
        sa.Column("breakfast_calories", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.Column("lunch_calories", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.Column("dinner_calories", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("summary_id"),
        sa.UniqueConstraint("user_id", "date", name="uq_daily_summary_user_date"),
    )

    op.create_table(
        "user_sessions",
        sa.Column("session_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("access_token_hash", sa.String(length=255), nullable=False),
        sa.Column("refresh_token_hash", sa.String(length=255), nullable=True),
        sa.Column("device_info", sa.String(length=500), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("access_token_expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("session_id"),
    )
    op.create_index("ix_user_sessions_user_active", "user_sessions", ["user_id", "is_active"], unique=False)

    op.create_table(
        "password_reset_tokens",
        sa.Column("token_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("token_hash", sa.String(length=255), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("used", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("token_id"),
        sa.UniqueConstraint("token_hash"),
    )

    op.create_table(
        "activity_log",
        sa.Column("log_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("action_type", sa.String(length=30), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=10), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("log_id"),
    )
    op.create_index(op.f("ix_activity_log_user_id"), "activity_log", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_activity_log_user_id"), table_name="activity_log")
    op.drop_table("activity_log")
    op.drop_table("password_reset_tokens")
    op.drop_index("ix_user_sessions_user_active", table_name="user_sessions")
    op.drop_table("user_sessions")
    op.drop_table("daily_summary")
    op.drop_table("weight_history")
    op.drop_index("ix_food_diary_user_date", table_name="food_diary")
    op.drop_table("food_diary")
    op.drop_index(op.f("ix_products_name"), table_name="products")
    op.drop_table("products")
    op.drop_table("user_settings")
    op.drop_index(op.f("ix_user_goals_user_id"), table_name="user_goals")
    op.drop_table("user_goals")
    op.drop_table("meal_types")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
