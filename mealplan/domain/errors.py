"""Error kinds surfaced by the planning engine.

Lookups that find nothing are not errors: they return None or an empty list.
"""


class MealPlannerError(Exception):
    """Base class for engine failures."""


class NoCandidatesError(MealPlannerError):
    """No recipe exists for the requested dietary preference."""

    def __init__(self, dietary_preference):
        self.dietary_preference = dietary_preference
        super().__init__(f"No recipes found for dietary preference: {dietary_preference}")


class BudgetExceededError(MealPlannerError):
    """Recipes exist for the preference but none fit the weekly budget."""

    def __init__(self, dietary_preference, weekly_budget):
        self.dietary_preference = dietary_preference
        self.weekly_budget = weekly_budget
        super().__init__(
            f"No {dietary_preference} recipes found within a weekly budget of {weekly_budget}"
        )


class UnknownIngredientError(MealPlannerError, LookupError):
    """A recipe ingredient line references an ingredient id that does not exist."""

    def __init__(self, ingredient_id):
        self.ingredient_id = ingredient_id
        super().__init__(f"Ingredient with ID {ingredient_id} does not exist")


class PersistenceError(MealPlannerError):
    """The backing store could not be read or written."""


__all__ = [
    'MealPlannerError', 'NoCandidatesError', 'BudgetExceededError',
    'UnknownIngredientError', 'PersistenceError'
]
