"""Candidate selection: which recipes may fill a plan for a preference and weekly budget."""
import logging
from decimal import Decimal
from typing import Iterable, List
from mealplan.domain.errors import BudgetExceededError, NoCandidatesError
from mealplan.domain.Recipe import DietaryPreference, Recipe
from mealplan.utilities.constants import BUDGET_SLACK_FACTOR, MEALS_PER_WEEK
from mealplan.utilities.decimals import D

logger = logging.getLogger(__name__)


def select_candidates(recipes: Iterable[Recipe], dietary_preference: DietaryPreference,
                      weekly_budget: Decimal) -> List[Recipe]:
    """Filter and order the recipes eligible for a weekly plan.

    Args:
        recipes: catalog recipes (any preference).
        dietary_preference: only recipes sharing this value are considered.
        weekly_budget: positive budget for the whole week.

    Returns:
        Non-empty list sorted by estimated_cost ascending; equal costs keep catalog order.

    Raises:
        NoCandidatesError: no recipe exists for the preference.
        BudgetExceededError: recipes exist but none costs at most
            BUDGET_SLACK_FACTOR x (weekly_budget / MEALS_PER_WEEK).
    """
    weekly_budget = D(weekly_budget)
    if weekly_budget <= 0:
        raise ValueError(f"Weekly budget must be positive: {weekly_budget}")
    preference = DietaryPreference(dietary_preference)

    matching = [r for r in recipes if r.dietary_preference == preference]
    if not matching:
        logger.warning(f"No recipes for dietary preference '{preference.value}'")
        raise NoCandidatesError(preference.value)

    budget_per_meal = weekly_budget / MEALS_PER_WEEK
    ceiling = BUDGET_SLACK_FACTOR * budget_per_meal
    affordable = [r for r in matching if r.estimated_cost <= ceiling]
    if not affordable:
        logger.warning(f"{len(matching)} {preference.value} recipes exist but none cost <= {ceiling:.2f}")
        raise BudgetExceededError(preference.value, weekly_budget)

    # sorted() is stable
    return sorted(affordable, key=lambda r: r.estimated_cost)


__all__ = ['select_candidates']
