"""Shared enums for models and seed data."""

from enum import Enum


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class ActivityLevel(str, Enum):
    """Self-reported daily activity."""

    SEDENTARY = "SEDENTARY"
    LIGHTLY_ACTIVE = "LIGHTLY_ACTIVE"
    MODERATELY_ACTIVE = "MODERATELY_ACTIVE"
    VERY_ACTIVE = "VERY_ACTIVE"
    EXTRA_ACTIVE = "EXTRA_ACTIVE"


class Role(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class MealTypeName(str, Enum):
    """Canonical meal slots; value order matches display_order."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"


class ProductCategory(str, Enum):
    VEGETABLES = "VEGETABLES"
    FRUITS = "FRUITS"
    MEAT = "MEAT"
    FISH = "FISH"
    DAIRY = "DAIRY"
    GRAINS = "GRAINS"
    SNACKS = "SNACKS"
    BEVERAGES = "BEVERAGES"
    OTHER = "OTHER"


class GoalType(str, Enum):
    WEIGHT_LOSS = "WEIGHT_LOSS"
    WEIGHT_GAIN = "WEIGHT_GAIN"
    MAINTENANCE = "MAINTENANCE"


class Theme(str, Enum):
    LIGHT = "LIGHT"
    DARK = "DARK"
    AUTO = "AUTO"


class ActionType(str, Enum):
    """Kinds of events recorded in activity_log."""

    USER_LOGIN = "USER_LOGIN"
    USER_LOGOUT = "USER_LOGOUT"
    FOOD_ADDED = "FOOD_ADDED"
    WEIGHT_UPDATED = "WEIGHT_UPDATED"
    GOAL_UPDATED = "GOAL_UPDATED"
    PROFILE_UPDATED = "PROFILE_UPDATED"


class ActionStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    WARNING = "WARNING"
