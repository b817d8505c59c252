"""Plan domain entities: a user's weekly meal plan and its 21 (day, meal type, recipe) slots."""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from mealplan.domain.GroceryList import GroceryListItem
from mealplan.domain.Recipe import DietaryPreference, Recipe
from mealplan.utilities.constants import DATE_FORMAT, DAY_NAMES
from mealplan.utilities.decimals import D, decimal_str


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


# Fixed enumeration order within a day
MEAL_TYPE_ORDER = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER)


def _parse_ts(value):
    if value and not isinstance(value, datetime):
        return datetime.fromisoformat(value)
    return value


def _parse_date(value):
    if isinstance(value, datetime):
        return value.date()
    if value and not isinstance(value, date):
        return datetime.strptime(value[:10], DATE_FORMAT).date()
    return value


class MealPlan:
    def __init__(self, id: Optional[int] = None, user_id: str = "",
                 week_start_date: Optional[date] = None,
                 dietary_preference: DietaryPreference = DietaryPreference.VEGETARIAN,
                 weekly_budget: Decimal = Decimal(0), total_estimated_cost: Decimal = Decimal(0),
                 created_at: Optional[datetime] = None):
        self.id = id
        self.user_id = user_id
        self.week_start_date = week_start_date
        self.dietary_preference = DietaryPreference(dietary_preference)
        self.weekly_budget = D(weekly_budget)
        self.total_estimated_cost = D(total_estimated_cost)
        self.created_at = created_at

    def __str__(self) -> str:
        week = self.week_start_date.strftime(DATE_FORMAT) if self.week_start_date else "-"
        return (f"Plan {self.id} - {self.user_id} - week of {week} - {self.dietary_preference.value}"
                f" - Budget: {self.weekly_budget} - Cost: {self.total_estimated_cost}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return MealPlan(
            id=d.get("id"),
            user_id=d.get("user_id", ""),
            week_start_date=_parse_date(d.get("week_start_date")),
            dietary_preference=d["dietary_preference"],
            weekly_budget=d.get("weekly_budget", "0"),
            total_estimated_cost=d.get("total_estimated_cost", "0"),
            created_at=_parse_ts(d.get("created_at")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "week_start_date": self.week_start_date.strftime(DATE_FORMAT) if self.week_start_date else None,
            "dietary_preference": self.dietary_preference.value,
            "weekly_budget": decimal_str(self.weekly_budget),
            "total_estimated_cost": decimal_str(self.total_estimated_cost),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class Assignment:
    """One slot of a plan: the recipe served on day_of_week (0 = Sunday) for meal_type."""

    def __init__(self, day_of_week: int, meal_type: MealType, recipe_id: int,
                 meal_plan_id: Optional[int] = None, id: Optional[int] = None,
                 created_at: Optional[datetime] = None):
        self.id = id
        self.meal_plan_id = meal_plan_id
        self.recipe_id = recipe_id
        self.day_of_week = day_of_week
        self.meal_type = MealType(meal_type)
        self.created_at = created_at

    @property
    def slot(self):
        return (self.day_of_week, self.meal_type)

    def __str__(self) -> str:
        return f"{DAY_NAMES[self.day_of_week]} {self.meal_type.value}: recipe {self.recipe_id}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Assignment(
            id=d.get("id"),
            meal_plan_id=d.get("meal_plan_id"),
            recipe_id=d["recipe_id"],
            day_of_week=int(d["day_of_week"]),
            meal_type=d["meal_type"],
            created_at=_parse_ts(d.get("created_at")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "meal_plan_id": self.meal_plan_id,
            "recipe_id": self.recipe_id,
            "day_of_week": self.day_of_week,
            "meal_type": self.meal_type.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class PlannedMeal:
    def __init__(self, day_of_week: int, meal_type: MealType, recipe: Recipe):
        self.day_of_week = day_of_week
        self.meal_type = MealType(meal_type)
        self.recipe = recipe

    def to_dict(self):
        return {
            "day_of_week": self.day_of_week,
            "meal_type": self.meal_type.value,
            "recipe": self.recipe.to_dict(),
        }


class MealPlanView:
    """A plan together with its per-slot recipes and consolidated grocery list.

    total_estimated_cost is the plan's nominal total (sum of the assigned recipes'
    declared costs). grocery_total_cost is the ingredient-priced total and is
    reported alongside it without being reconciled.
    """

    def __init__(self, meal_plan: MealPlan, recipes: List[PlannedMeal],
                 grocery_list: List[GroceryListItem]):
        self.meal_plan = meal_plan
        self.recipes = recipes
        self.grocery_list = grocery_list

    @property
    def total_estimated_cost(self) -> Decimal:
        return self.meal_plan.total_estimated_cost

    @property
    def grocery_total_cost(self) -> Decimal:
        return sum((item.estimated_total_cost for item in self.grocery_list), Decimal(0))

    def to_dict(self):
        return {
            "meal_plan": self.meal_plan.to_dict(),
            "recipes": [meal.to_dict() for meal in self.recipes],
            "grocery_list": [item.to_dict() for item in self.grocery_list],
            "total_estimated_cost": decimal_str(self.total_estimated_cost),
            "grocery_total_cost": decimal_str(self.grocery_total_cost),
        }
