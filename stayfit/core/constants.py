"""Application constants."""

# Display order; also the truncate list
TABLE_NAMES = (
    "users",
    "user_goals",
    "user_settings",
    "meal_types",
    "products",
    "food_diary",
    "weight_history",
    "daily_summary",
    "user_sessions",
    "password_reset_tokens",
    "activity_log",
)

# Inspector
DISPLAY_ROW_LIMIT = 50
COLUMN_WIDTH = 15
TRUNCATED_WIDTH = 12
ELLIPSIS = "..."
NULL_TOKEN = "NULL"

# Seeding volumes (user count is drawn from [MIN_USERS, MAX_USERS))
MIN_USERS = 10
MAX_USERS = 20
CUSTOM_PRODUCT_COUNT = 20
DIARY_ENTRIES_PER_USER = (5, 15)
WEIGHT_ENTRIES_PER_USER = (5, 10)
SUMMARY_ENTRIES_PER_USER = (5, 10)
SESSIONS_PER_USER = (1, 3)
MAX_USERS_WITH_SESSIONS = 20
ACTIVITY_LOG_ENTRIES = 100

# Seeded accounts all share this password
PLACEHOLDER_PASSWORD = "password123"
SESSION_TTL_HOURS = 24

# Daily calorie split across meals (sums to 1)
MEAL_CALORIE_SPLIT = {"breakfast": 0.25, "lunch": 0.35, "dinner": 0.40}
