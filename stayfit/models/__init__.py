"""ORM models - import all so Base.metadata is complete for migrations."""

from stayfit.models.activity_log import ActivityLogEntry
from stayfit.models.auth import PasswordResetToken, UserSession
from stayfit.models.food import FoodDiaryEntry, MealType, Product
from stayfit.models.tracking import DailySummary, WeightHistoryEntry
from stayfit.models.user import User, UserGoal, UserSetting

__all__ = [
    "ActivityLogEntry",
    "DailySummary",
    "FoodDiaryEntry",
    "MealType",
    "PasswordResetToken",
    "Product",
    "User",
    "UserGoal",
    "UserSession",
    "UserSetting",
    "WeightHistoryEntry",
]
