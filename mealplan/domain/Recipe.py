"""Recipe domain entity: dietary preference, flat estimated cost, servings, ingredient lines."""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from mealplan.utilities.decimals import D, decimal_str


class DietaryPreference(str, Enum):
    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"


def _parse_ts(value):
    if value and not isinstance(value, datetime):
        return datetime.fromisoformat(value)
    return value


class RecipeIngredientLine:
    """How much of one ingredient a recipe uses, in the ingredient's own unit."""

    def __init__(self, recipe_id: Optional[int], ingredient_id: int, quantity: Decimal,
                 id: Optional[int] = None, created_at: Optional[datetime] = None):
        self.id = id
        self.recipe_id = recipe_id
        self.ingredient_id = ingredient_id
        self.quantity = D(quantity)
        self.created_at = created_at

    def __str__(self) -> str:
        return f"recipe {self.recipe_id} <- {self.quantity} x ingredient {self.ingredient_id}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return RecipeIngredientLine(
            id=d.get("id"),
            recipe_id=d.get("recipe_id"),
            ingredient_id=d["ingredient_id"],
            quantity=d["quantity"],
            created_at=_parse_ts(d.get("created_at")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "recipe_id": self.recipe_id,
            "ingredient_id": self.ingredient_id,
            "quantity": decimal_str(self.quantity),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class Recipe:
    def __init__(self, id: Optional[int] = None, name: str = "", description: Optional[str] = None,
                 dietary_preference: DietaryPreference = DietaryPreference.VEGETARIAN,
                 estimated_cost: Decimal = Decimal(0), servings: int = 1,
                 prep_time_minutes: int = 1, instructions: str = "",
                 created_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        self.description = description
        self.dietary_preference = DietaryPreference(dietary_preference)
        self.estimated_cost = D(estimated_cost)
        self.servings = servings
        self.prep_time_minutes = prep_time_minutes
        self.instructions = instructions
        self.created_at = created_at

    def __str__(self) -> str:
        return (f"{self.name} - {self.dietary_preference.value} - {self.servings} servings"
                f" - {self.prep_time_minutes} min - Cost: {self.estimated_cost}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        allowed = {"id", "name", "description", "dietary_preference", "estimated_cost",
                   "servings", "prep_time_minutes", "instructions", "created_at"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["created_at"] = _parse_ts(filtered.get("created_at"))
        return Recipe(**filtered)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "dietary_preference": self.dietary_preference.value,
            "estimated_cost": decimal_str(self.estimated_cost),
            "servings": self.servings,
            "prep_time_minutes": self.prep_time_minutes,
            "instructions": self.instructions,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
