"""Test data generation for the StayFit schema.

All generators run inside one session transaction, parents before children:
users -> meal types -> products -> goals -> settings -> food diary ->
weight history -> daily summaries -> sessions -> activity log.
Each generator receives the identifiers produced by the generators it depends
on, so child rows only ever reference rows created (or resolved) in the same
run. Any failure rolls back the whole batch.

Randomness comes from the ``random.Random`` carried in ``SeedContext``; pass a
seeded instance to get a reproducible dataset.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stayfit.core.constants import (
    ACTIVITY_LOG_ENTRIES,
    CUSTOM_PRODUCT_COUNT,
    DIARY_ENTRIES_PER_USER,
    MAX_USERS,
    MAX_USERS_WITH_SESSIONS,
    MEAL_CALORIE_SPLIT,
    MIN_USERS,
    PLACEHOLDER_PASSWORD,
    SESSION_TTL_HOURS,
    SESSIONS_PER_USER,
    SUMMARY_ENTRIES_PER_USER,
    WEIGHT_ENTRIES_PER_USER,
)
from stayfit.core.enums import (
    ActionStatus,
    ActionType,
    ActivityLevel,
    Gender,
    GoalType,
    MealTypeName,
    ProductCategory,
    Role,
    Theme,
)
from stayfit.core.errors import SeedingError
from stayfit.core.security import hash_password, hash_token, random_token
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

logger = logging.getLogger(__name__)

# ── Seed pools ───────────────────────────────────────────────────────────

MALE_FIRST_NAMES = (
    "Andrii", "Serhii", "Maksym", "Volodymyr", "Yurii", "Ivan", "Roman", "Artem", "Bohdan", "Taras",
    "John", "Michael", "David", "Chris", "James", "Robert", "Daniel", "William", "Thomas", "Richard",
)
FEMALE_FIRST_NAMES = (
    "Olena", "Maria", "Nataliia", "Tetiana", "Anna", "Iryna", "Kateryna", "Yuliia", "Svitlana", "Viktoriia",
    "Jessica", "Emily", "Sarah", "Jennifer", "Elizabeth", "Linda", "Patricia", "Susan", "Ashley", "Mary",
)
LAST_NAMES = (
    "Kovalenko", "Shevchenko", "Boiko", "Tkachenko", "Kravchenko", "Melnyk", "Petrenko", "Ivanenko",
    "Kovalchuk", "Ponomarenko", "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller",
    "Davis", "Rodriguez", "Martinez",
)
EMAIL_DOMAINS = ("gmail.com", "ukr.net", "outlook.com", "yahoo.com", "i.ua")

# name -> (calories, protein, fat, carbs) per 100 g
GLOBAL_PRODUCTS: dict[str, tuple[float, float, float, float]] = {
    "Chicken Breast": (165, 31, 3.6, 0),
    "Brown Rice": (370, 7.9, 2.9, 77.2),
    "Broccoli": (34, 2.8, 0.4, 7),
    "Salmon": (208, 20, 13, 0),
    "Greek Yogurt": (59, 10, 0.4, 3.6),
    "Apple": (52, 0.3, 0.2, 14),
    "Banana": (89, 1.1, 0.3, 23),
    "Eggs": (155, 13, 11, 1.1),
    "Oatmeal": (389, 16.9, 6.9, 66.3),
    "Almonds": (579, 21.2, 49.9, 21.6),
}

LANGUAGES = ("uk", "en", "ru")

DEVICE_USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.5 Safari/605.1.15",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_5 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Mobile/15E148",
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0 Mobile Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64; rv:127.0) Gecko/20100101 Firefox/127.0",
    "StayFit/2.3.1 (Android 13; Samsung SM-S911B)",
    "StayFit/2.3.0 (iOS 17.4; iPhone15,2)",
)

ACTION_DESCRIPTIONS: dict[ActionType, tuple[str, ...]] = {
    ActionType.USER_LOGIN: ("Signed in with email and password.", "Signed in from a new device."),
    ActionType.USER_LOGOUT: ("Signed out.", "Session closed after inactivity."),
    ActionType.FOOD_ADDED: ("Added a product to the food diary.", "Logged a meal from recent products."),
    ActionType.WEIGHT_UPDATED: ("Recorded a new weigh-in.", "Corrected yesterday's weight."),
    ActionType.GOAL_UPDATED: ("Changed the daily calorie target.", "Switched goal type."),
    ActionType.PROFILE_UPDATED: ("Updated height and activity level.", "Changed display name."),
}
# SUCCESS is drawn three times as often as the other outcomes
STATUS_POOL = (
    ActionStatus.SUCCESS,
    ActionStatus.SUCCESS,
    ActionStatus.SUCCESS,
    ActionStatus.FAILURE,
    ActionStatus.WARNING,
)

_UPSERT_INSERTS = {"postgresql": postgresql.insert, "sqlite": sqlite.insert}


# ── Run state ────────────────────────────────────────────────────────────

@dataclass
class SeedContext:
    """Everything a generator needs: the open session, the random source and the run clock."""

    session: AsyncSession
    rng: random.Random
    now: datetime
    password_hash: str


@dataclass(frozen=True)
class SeededUser:
    """Identifier plus the body data dependent generators derive values from."""

    user_id: int
    height: float
    current_weight: float


@dataclass
class SeedReport:
    """Rows inserted per table, in generation order."""

    counts: dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


ProgressCallback = Callable[[str, int], None]


def _uniform(rng: random.Random, low: float, high: float) -> float:
    return round(rng.uniform(low, high), 2)


def _count_between(rng: random.Random, bounds: tuple[int, int]) -> int:
    """Inclusive on both ends."""
    return rng.randint(*bounds)


# ── Generators ───────────────────────────────────────────────────────────

async def generate_users(ctx: SeedContext, count: int) -> list[SeededUser]:
    """Insert ``count`` users; the first one is the administrator.

    Emails already in the table count as taken, so a fixed seed can be
    replayed against a database that still holds an earlier run.
    """
    rng = ctx.rng
    emails: set[str] = set(await ctx.session.scalars(select(User.email)))
    users: list[User] = []
    for i in range(count):
        gender = rng.choice(list(Gender))
        pool = MALE_FIRST_NAMES if gender is Gender.MALE else FEMALE_FIRST_NAMES
        first_name = rng.choice(pool)
        last_name = rng.choice(LAST_NAMES)

        email = None
        while email is None or email in emails:
            suffix = f"{rng.randrange(100000):05d}"
            email = f"{first_name}.{last_name}{suffix}@{rng.choice(EMAIL_DOMAINS)}".lower()
        emails.add(email)

        age_days = rng.randint(13 * 365, 60 * 365)
        height = _uniform(rng, 150, 200)
        current_weight = _uniform(rng, 50, 120)
        target_weight = _uniform(rng, 50, 120) if rng.random() < 0.7 else None
        if target_weight is not None and target_weight == current_weight:
            target_weight = round(current_weight + 1.5, 2)

        users.append(
            User(
                email=email,
                password_hash=ctx.password_hash,
                first_name=first_name,
                last_name=last_name,
                date_of_birth=ctx.now.date() - timedelta(days=age_days),
                gender=gender.value,
                height=height,
                current_weight=current_weight,
                target_weight=target_weight,
                activity_level=rng.choice(list(ActivityLevel)).value,
                role=(Role.ADMIN if i == 0 else Role.USER).value,
            )
        )

    ctx.session.add_all(users)
    await ctx.session.flush()
    return [SeededUser(u.user_id, float(u.height), float(u.current_weight)) for u in users]


async def generate_meal_types(ctx: SeedContext) -> list[int]:
    """Upsert the four canonical meal types by name and return their ids.

    Safe to run repeatedly: existing rows are reused, never duplicated.
    """
    session = ctx.session
    insert = _UPSERT_INSERTS.get(session.bind.dialect.name)
    ids: list[int] = []
    for order, meal in enumerate(MealTypeName, start=1):
        if insert is not None:
            stmt = insert(MealType).values(name=meal.value, display_order=order)
            stmt = stmt.on_conflict_do_update(
                index_elements=["name"],
                # no-op update so RETURNING yields the existing row unchanged
                set_={"name": stmt.excluded.name},
            ).returning(MealType.meal_type_id)
            result = await session.execute(stmt)
            ids.append(result.scalar_one())
            continue

        # No upsert on this dialect: insert if missing, then resolve by name
        result = await session.execute(select(MealType.meal_type_id).where(MealType.name == meal.value))
        meal_type_id = result.scalar_one_or_none()
        if meal_type_id is None:
            row = MealType(name=meal.value, display_order=order)
            session.add(row)
            await session.flush()
            meal_type_id = row.meal_type_id
        ids.append(meal_type_id)
    return ids


async def generate_products(ctx: SeedContext, user_ids: list[int]) -> list[int]:
    """Global catalog (no creator) followed by custom products owned by seeded users."""
    rng = ctx.rng
    categories = list(ProductCategory)
    products: list[Product] = []
    for name, (calories, protein, fat, carbs) in GLOBAL_PRODUCTS.items():
        products.append(
            Product(
                name=name,
                category=rng.choice(categories).value,
                calories_per_100g=calories,
                protein_per_100g=protein,
                fat_per_100g=fat,
                carbs_per_100g=carbs,
                is_global=True,
                created_by_user_id=None,
            )
        )
    if user_ids:
        for i in range(CUSTOM_PRODUCT_COUNT):
            products.append(
                Product(
                    name=f"Custom Product {i + 1}",
                    category=rng.choice(categories).value,
                    calories_per_100g=_uniform(rng, 20, 600),
                    protein_per_100g=_uniform(rng, 0, 50),
                    fat_per_100g=_uniform(rng, 0, 40),
                    carbs_per_100g=_uniform(rng, 0, 80),
                    is_global=False,
                    created_by_user_id=rng.choice(user_ids),
                )
            )

    ctx.session.add_all(products)
    await ctx.session.flush()
    return [p.product_id for p in products]


async def generate_user_goals(ctx: SeedContext, user_ids: list[int]) -> int:
    rng = ctx.rng
    goals = [
        UserGoal(
            user_id=user_id,
            daily_calories=_uniform(rng, 1500, 3000),
            goal_type=rng.choice(list(GoalType)).value,
            protein_grams=_uniform(rng, 80, 200),
            fat_grams=_uniform(rng, 40, 100),
            carbs_grams=_uniform(rng, 150, 400),
            is_active=True,
        )
        for user_id in user_ids
    ]
    ctx.session.add_all(goals)
    await ctx.session.flush()
    return len(goals)


async def generate_user_settings(ctx: SeedContext, user_ids: list[int]) -> int:
    rng = ctx.rng
    settings = [
        UserSetting(
            user_id=user_id,
            language=rng.choice(LANGUAGES),
            theme=rng.choice(list(Theme)).value,
            reminder_food_enabled=rng.random() < 0.5,
            weekly_reports_enabled=rng.random() < 0.8,
        )
        for user_id in user_ids
    ]
    ctx.session.add_all(settings)
    await ctx.session.flush()
    return len(settings)


async def generate_food_diary(
    ctx: SeedContext,
    user_ids: list[int],
    product_ids: list[int],
    meal_type_ids: list[int],
) -> int:
    """5-15 entries per user over the last 30 days, logged between 06:00 and 22:00."""
    if not product_ids or not meal_type_ids:
        return 0
    rng = ctx.rng
    entries: list[FoodDiaryEntry] = []
    for user_id in user_ids:
        for _ in range(_count_between(rng, DIARY_ENTRIES_PER_USER)):
            logged_on = (ctx.now - timedelta(seconds=rng.uniform(0, 30 * 86400))).date()
            seconds = rng.randint(6 * 3600, 22 * 3600 - 1)
            entries.append(
                FoodDiaryEntry(
                    user_id=user_id,
                    product_id=rng.choice(product_ids),
                    meal_type_id=rng.choice(meal_type_ids),
                    date=logged_on,
                    time=time(seconds // 3600, seconds % 3600 // 60, seconds % 60),
                    weight_grams=_uniform(rng, 50, 500),
                    calories=_uniform(rng, 50, 800),
                    protein=_uniform(rng, 5, 50),
                )
            )
    ctx.session.add_all(entries)
    await ctx.session.flush()
    return len(entries)


def calc_bmi(weight: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return round(weight / (height_m * height_m), 2)


def _trailing_days(today: date, n: int) -> list[date]:
    """``n`` consecutive days ending yesterday, oldest first."""
    return [today - timedelta(days=n - i) for i in range(n)]


async def generate_weight_history(ctx: SeedContext, users: list[SeededUser]) -> int:
    """Daily weigh-ins drifting +/-2 kg around the user's current weight."""
    rng = ctx.rng
    entries: list[WeightHistoryEntry] = []
    for user in users:
        days = _trailing_days(ctx.now.date(), _count_between(rng, WEIGHT_ENTRIES_PER_USER))
        for day in days:
            weight = round(user.current_weight + rng.uniform(-2, 2), 2)
            entries.append(
                WeightHistoryEntry(
                    user_id=user.user_id,
                    date=day,
                    weight=weight,
                    bmi=calc_bmi(weight, user.height),
                )
            )
    ctx.session.add_all(entries)
    await ctx.session.flush()
    return len(entries)


def split_meal_calories(total_calories: float) -> dict[str, float]:
    """Breakfast/lunch/dinner share of the day's calories."""
    return {
        f"{meal}_calories": round(total_calories * share, 2)
        for meal, share in MEAL_CALORIE_SPLIT.items()
    }


async def generate_daily_summaries(ctx: SeedContext, user_ids: list[int]) -> int:
    rng = ctx.rng
    summaries: list[DailySummary] = []
    for user_id in user_ids:
        for day in _trailing_days(ctx.now.date(), _count_between(rng, SUMMARY_ENTRIES_PER_USER)):
            total_calories = _uniform(rng, 1200, 2800)
            summaries.append(
                DailySummary(
                    user_id=user_id,
                    date=day,
                    total_calories=total_calories,
                    total_protein=_uniform(rng, 60, 180),
                    goal_achieved=rng.random() < 0.6,
                    **split_meal_calories(total_calories),
                )
            )
    ctx.session.add_all(summaries)
    await ctx.session.flush()
    return len(summaries)


async def generate_user_sessions(ctx: SeedContext, user_ids: list[int]) -> int:
    """1-3 sessions for each of the first 20 users, opened within the last week."""
    rng = ctx.rng
    sessions: list[UserSession] = []
    for user_id in user_ids[:MAX_USERS_WITH_SESSIONS]:
        for _ in range(_count_between(rng, SESSIONS_PER_USER)):
            created_at = ctx.now - timedelta(seconds=rng.uniform(0, 7 * 86400))
            sessions.append(
                UserSession(
                    user_id=user_id,
                    access_token_hash=hash_token(random_token(rng)),
                    refresh_token_hash=hash_token(random_token(rng)),
                    device_info=rng.choice(DEVICE_USER_AGENTS),
                    is_active=rng.random() < 0.7,
                    created_at=created_at,
                    access_token_expires_at=created_at + timedelta(hours=SESSION_TTL_HOURS),
                )
            )
    ctx.session.add_all(sessions)
    await ctx.session.flush()
    return len(sessions)


async def generate_activity_log(ctx: SeedContext, user_ids: list[int]) -> int:
    """Audit entries; roughly one in ten has no user attached."""
    rng = ctx.rng
    actions = list(ActionType)
    entries: list[ActivityLogEntry] = []
    for _ in range(ACTIVITY_LOG_ENTRIES):
        action = rng.choice(actions)
        user_id = rng.choice(user_ids) if user_ids and rng.random() < 0.9 else None
        entries.append(
            ActivityLogEntry(
                user_id=user_id,
                action_type=action.value,
                description=rng.choice(ACTION_DESCRIPTIONS[action]),
                status=rng.choice(STATUS_POOL).value,
                created_at=ctx.now - timedelta(seconds=rng.uniform(0, 30 * 86400)),
            )
        )
    ctx.session.add_all(entries)
    await ctx.session.flush()
    return len(entries)


# ── Orchestration ────────────────────────────────────────────────────────

async def seed_database(
    session_maker: async_sessionmaker[AsyncSession],
    rng: random.Random | None = None,
    *,
    now: datetime | None = None,
    user_count: int | None = None,
    progress: ProgressCallback | None = None,
) -> SeedReport:
    """Generate a full dataset in one transaction.

    Raises SeedingError (naming the table being generated) after rolling back
    when any insert fails; nothing from the run is kept.
    """
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    if user_count is None:
        user_count = rng.randrange(MIN_USERS, MAX_USERS)

    report = SeedReport()
    table = "users"

    def record(name: str, count: int) -> None:
        report.counts[name] = count
        logger.info("Seeded %s: %d rows", name, count)
        if progress is not None:
            progress(name, count)

    async with session_maker() as session:
        ctx = SeedContext(session=session, rng=rng, now=now, password_hash=hash_password(PLACEHOLDER_PASSWORD))
        try:
            async with session.begin():
                users = await generate_users(ctx, user_count)
                user_ids = [u.user_id for u in users]
                record(table, len(users))

                table = "meal_types"
                meal_type_ids = await generate_meal_types(ctx)
                record(table, len(meal_type_ids))

                table = "products"
                product_ids = await generate_products(ctx, user_ids)
                record(table, len(product_ids))

                table = "user_goals"
                record(table, await generate_user_goals(ctx, user_ids))

                table = "user_settings"
                record(table, await generate_user_settings(ctx, user_ids))

                table = "food_diary"
                record(table, await generate_food_diary(ctx, user_ids, product_ids, meal_type_ids))

                table = "weight_history"
                record(table, await generate_weight_history(ctx, users))

                table = "daily_summary"
                record(table, await generate_daily_summaries(ctx, user_ids))

                table = "user_sessions"
                record(table, await generate_user_sessions(ctx, user_ids))

                table = "activity_log"
                record(table, await generate_activity_log(ctx, user_ids))
        except Exception as exc:
            logger.exception("Seeding failed while generating %s; transaction rolled back", table)
            raise SeedingError(table, exc) from exc

    return report
