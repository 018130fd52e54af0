import random
import re
from collections import Counter
from datetime import timedelta
from decimal import Decimal

import pytest
from sqlalchemy import func, select, update

from stayfit.core.errors import SeedingError
from stayfit.core.security import verify_password
from stayfit.models import (
    ActivityLogEntry,
    DailySummary,
    FoodDiaryEntry,
    MealType,
    Product,
    User,
    UserGoal,
    UserSession,
    UserSetting,
    WeightHistoryEntry,
)
from stayfit.services import seeding
from stayfit.services.inspector import count_rows
from stayfit.services.seeding import (
    EMAIL_DOMAINS,
    FEMALE_FIRST_NAMES,
    MALE_FIRST_NAMES,
    SeedContext,
    calc_bmi,
    generate_meal_types,
    generate_users,
    seed_database,
    split_meal_calories,
)

from tests.conftest import NOW


async def _all(session_maker, stmt):
    async with session_maker() as session:
        result = await session.execute(stmt)
        return result.all()


# ── Pure helpers ─────────────────────────────────────────────────────────

def test_calc_bmi():
    assert calc_bmi(70, 175) == round(70 / 1.75**2, 2)


def test_meal_split_adds_up_to_total():
    split = split_meal_calories(2000)
    assert split == {"breakfast_calories": 500.0, "lunch_calories": 700.0, "dinner_calories": 800.0}
    odd = split_meal_calories(1234.57)
    assert abs(sum(odd.values()) - 1234.57) <= 0.015


# ── Full run ─────────────────────────────────────────────────────────────

async def test_report_matches_table_counts(engine, seeded):
    counts = await count_rows(engine)
    for table, inserted in seeded.counts.items():
        assert counts[table] == inserted
    assert counts["password_reset_tokens"] == 0
    assert seeded.counts["users"] == 15
    assert seeded.counts["meal_types"] == 4
    assert seeded.counts["products"] == 30
    assert seeded.counts["activity_log"] == 100
    assert list(seeded.counts) == [
        "users",
        "meal_types",
        "products",
        "user_goals",
        "user_settings",
        "food_diary",
        "weight_history",
        "daily_summary",
        "user_sessions",
        "activity_log",
    ]


async def test_users(session_maker, seeded):
    rows = await _all(
        session_maker,
        select(User.email, User.role, User.current_weight, User.target_weight, User.password_hash)
        .order_by(User.user_id),
    )
    emails = [r.email for r in rows]
    assert len(set(emails)) == len(emails)
    assert rows[0].role == "ADMIN"
    assert verify_password("password123", rows[0].password_hash)
    assert all(r.role == "USER" for r in rows[1:])
    for r in rows:
        assert r.target_weight is None or r.target_weight != r.current_weight
        assert r.password_hash.startswith("$2")


async def test_user_names_follow_gender_and_email_shape(session_maker, seeded):
    rows = await _all(session_maker, select(User.gender, User.first_name, User.last_name, User.email))
    domains = "|".join(re.escape(d) for d in EMAIL_DOMAINS)
    for r in rows:
        pool = MALE_FIRST_NAMES if r.gender == "MALE" else FEMALE_FIRST_NAMES
        assert r.first_name in pool
        pattern = rf"{re.escape(r.first_name.lower())}\.{re.escape(r.last_name.lower())}\d{{5}}@({domains})"
        assert re.fullmatch(pattern, r.email), r.email


class FlatRandom(random.Random):
    """Every uniform() draw returns the same value, so target equals current weight."""

    def uniform(self, a, b):
        return 80.0


async def test_equal_target_weight_is_nudged(session_maker):
    async with session_maker() as session:
        async with session.begin():
            ctx = SeedContext(session=session, rng=FlatRandom(8), now=NOW, password_hash="x")
            await generate_users(ctx, 10)
        targets = [r.target_weight for r in (await session.execute(select(User.target_weight))).all()]

    drawn = [t for t in targets if t is not None]
    assert drawn
    assert all(t == Decimal("81.5") for t in drawn)


async def test_fixed_seed_can_rerun_on_a_populated_database(session_maker):
    first = await seed_database(session_maker, random.Random(17), now=NOW, user_count=10)
    second = await seed_database(session_maker, random.Random(17), now=NOW, user_count=10)

    emails = [r.email for r in await _all(session_maker, select(User.email))]
    assert first.counts["users"] == second.counts["users"] == 10
    assert len(emails) == 20
    assert len(set(emails)) == 20


async def test_products_global_and_custom(session_maker, seeded):
    user_ids = {r.user_id for r in await _all(session_maker, select(User.user_id))}
    products = await _all(session_maker, select(Product.name, Product.is_global, Product.created_by_user_id))
    global_products = [p for p in products if p.is_global]
    custom_products = [p for p in products if not p.is_global]
    assert len(global_products) == 10
    assert len(custom_products) == 20
    assert all(p.created_by_user_id is None for p in global_products)
    assert all(p.created_by_user_id in user_ids for p in custom_products)


async def test_one_goal_and_setting_per_user(session_maker, seeded):
    goals = await _all(session_maker, select(UserGoal.user_id, UserGoal.is_active))
    settings = await _all(session_maker, select(UserSetting.user_id))
    assert sorted(Counter(g.user_id for g in goals).values()) == [1] * 15
    assert all(g.is_active for g in goals)
    assert len({s.user_id for s in settings}) == 15


async def test_per_user_volume_bounds(session_maker, seeded):
    diary = Counter(r.user_id for r in await _all(session_maker, select(FoodDiaryEntry.user_id)))
    weights = Counter(r.user_id for r in await _all(session_maker, select(WeightHistoryEntry.user_id)))
    assert len(diary) == 15
    assert all(5 <= n <= 15 for n in diary.values())
    assert len(weights) == 15
    assert all(5 <= n <= 10 for n in weights.values())


async def test_diary_references_existing_rows(session_maker, seeded):
    product_ids = {r.product_id for r in await _all(session_maker, select(Product.product_id))}
    meal_type_ids = {r.meal_type_id for r in await _all(session_maker, select(MealType.meal_type_id))}
    entries = await _all(
        session_maker, select(FoodDiaryEntry.product_id, FoodDiaryEntry.meal_type_id, FoodDiaryEntry.date)
    )
    for e in entries:
        assert e.product_id in product_ids
        assert e.meal_type_id in meal_type_ids
        assert NOW.date() - timedelta(days=31) <= e.date <= NOW.date()


async def test_bmi_uses_user_height(session_maker, seeded):
    rows = await _all(
        session_maker,
        select(WeightHistoryEntry.weight, WeightHistoryEntry.bmi, User.height)
        .join(User, User.user_id == WeightHistoryEntry.user_id),
    )
    assert rows
    for r in rows:
        expected = round(float(r.weight) / (float(r.height) / 100) ** 2, 2)
        assert abs(float(r.bmi) - expected) <= 0.011
        assert isinstance(r.bmi, Decimal)


async def test_weight_history_dates_unique_per_user(session_maker, seeded):
    rows = await _all(session_maker, select(WeightHistoryEntry.user_id, WeightHistoryEntry.date))
    assert len(rows) == len({(r.user_id, r.date) for r in rows})
    assert max(r.date for r in rows) == NOW.date() - timedelta(days=1)


async def test_daily_summary_split(session_maker, seeded):
    rows = await _all(session_maker, select(DailySummary))
    assert rows
    for (summary,) in rows:
        parts = summary.breakfast_calories + summary.lunch_calories + summary.dinner_calories
        assert abs(float(parts) - float(summary.total_calories)) <= 0.015


async def test_session_expiry(session_maker, seeded):
    rows = await _all(session_maker, select(UserSession))
    assert rows
    for (s,) in rows:
        assert s.access_token_expires_at - s.created_at == timedelta(hours=24)
        assert len(s.access_token_hash) == 64


async def test_sessions_capped_at_twenty_users(session_maker):
    await seed_database(session_maker, random.Random(3), now=NOW, user_count=25)
    rows = await _all(session_maker, select(UserSession.user_id))
    first_twenty = {r.user_id for r in await _all(session_maker, select(User.user_id).order_by(User.user_id).limit(20))}
    with_sessions = {r.user_id for r in rows}
    assert with_sessions == first_twenty
    assert all(1 <= n <= 3 for n in Counter(r.user_id for r in rows).values())


async def test_activity_log_has_anonymous_entries(session_maker, seeded):
    rows = await _all(session_maker, select(ActivityLogEntry.user_id))
    anonymous = sum(1 for r in rows if r.user_id is None)
    assert len(rows) == 100
    assert 0 < anonymous < 30


# ── Meal types ───────────────────────────────────────────────────────────

async def _meal_types(session_maker):
    async with session_maker() as session:
        async with session.begin():
            ctx = SeedContext(session=session, rng=random.Random(0), now=NOW, password_hash="x")
            return await generate_meal_types(ctx)


async def _meal_type_orders(session_maker):
    rows = await _all(session_maker, select(MealType.name, MealType.display_order).order_by(MealType.meal_type_id))
    return [(r.name, r.display_order) for r in rows]


async def test_meal_types_idempotent(session_maker):
    first = await _meal_types(session_maker)
    second = await _meal_types(session_maker)
    assert len(first) == 4
    assert second == first
    assert await _meal_type_orders(session_maker) == [
        ("BREAKFAST", 1),
        ("LUNCH", 2),
        ("DINNER", 3),
        ("SNACK", 4),
    ]


async def test_rerun_leaves_existing_meal_types_untouched(session_maker):
    first = await _meal_types(session_maker)
    async with session_maker() as session:
        async with session.begin():
            await session.execute(update(MealType).where(MealType.name == "LUNCH").values(display_order=9))

    assert await _meal_types(session_maker) == first
    assert ("LUNCH", 9) in await _meal_type_orders(session_maker)


async def test_meal_types_without_upsert_support(session_maker, monkeypatch):
    monkeypatch.setattr(seeding, "_UPSERT_INSERTS", {})

    first = await _meal_types(session_maker)
    second = await _meal_types(session_maker)

    assert second == first
    assert len(set(first)) == 4
    assert await _meal_type_orders(session_maker) == [
        ("BREAKFAST", 1),
        ("LUNCH", 2),
        ("DINNER", 3),
        ("SNACK", 4),
    ]


async def test_reseeding_reuses_meal_types(session_maker, seeded):
    second = await seed_database(session_maker, random.Random(43), now=NOW, user_count=10)
    async with session_maker() as session:
        total = await session.scalar(select(func.count()).select_from(MealType))
    assert total == 4
    assert second.counts["meal_types"] == 4


# ── Failure handling ─────────────────────────────────────────────────────

async def test_failure_rolls_back_everything(engine, session_maker, monkeypatch):
    original = seeding.generate_daily_summaries

    async def duplicate_summaries(ctx, user_ids):
        # Every batch includes yesterday, so the second call violates (user_id, date)
        await original(ctx, user_ids)
        return await original(ctx, user_ids)

    monkeypatch.setattr(seeding, "generate_daily_summaries", duplicate_summaries)

    with pytest.raises(SeedingError) as exc_info:
        await seed_database(session_maker, random.Random(1), now=NOW, user_count=15)

    assert exc_info.value.table == "daily_summary"
    counts = await count_rows(engine)
    assert all(n == 0 for n in counts.values()), counts


async def test_progress_callback_sees_each_table(session_maker):
    seen = []
    await seed_database(
        session_maker, random.Random(5), now=NOW, user_count=10, progress=lambda t, n: seen.append(t)
    )
    assert seen[0] == "users"
    assert seen[-1] == "activity_log"
    assert len(seen) == 10


async def test_random_user_count_range(session_maker):
    report = await seed_database(session_maker, random.Random(9), now=NOW)
    assert 10 <= report.counts["users"] < 20
