"""Weekly plan assembly: deterministic round-robin over the ordered candidates."""
from decimal import Decimal
from typing import List, Sequence, Tuple
from mealplan.domain.Plan import MEAL_TYPE_ORDER, Assignment
from mealplan.domain.Recipe import Recipe
from mealplan.utilities.constants import DAYS_PER_WEEK


def iter_slots():
    '''Yield (day_of_week, meal_type) for the 21 slots: day 0..6, breakfast/lunch/dinner within a day.'''
    for day in range(DAYS_PER_WEEK):
        for meal_type in MEAL_TYPE_ORDER:
            yield day, meal_type


def assemble(ordered_candidates: Sequence[Recipe]) -> Tuple[List[Assignment], Decimal]:
    """Fill every slot of the week; slot k receives ordered_candidates[k mod len].

    Returns the 21 unsaved assignments and the nominal total cost (sum of the
    assigned recipes' estimated_cost, one term per slot).
    """
    if not ordered_candidates:
        raise ValueError("Cannot assemble a plan without candidate recipes")
    assignments: List[Assignment] = []
    total = Decimal(0)
    for k, (day, meal_type) in enumerate(iter_slots()):
        recipe = ordered_candidates[k % len(ordered_candidates)]
        assignments.append(Assignment(day_of_week=day, meal_type=meal_type, recipe_id=recipe.id))
        total += recipe.estimated_cost
    return assignments, total


__all__ = ['assemble', 'iter_slots']
