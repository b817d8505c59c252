"""Rebuild the full view of an already stored meal plan (read only)."""
from typing import Optional
from mealplan.domain.Plan import MEAL_TYPE_ORDER, MealPlanView, PlannedMeal
from mealplan.infra.Ingredient_Repository import IngredientRepository
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.infra.Recipe_Repository import RecipeRepository
from mealplan.logic.shopping.list_builder import consolidate

_MEAL_RANK = {meal_type: i for i, meal_type in enumerate(MEAL_TYPE_ORDER)}


def reconstruct(meal_plan_id: int, plans: PlanRepository, recipes: RecipeRepository,
                ingredients: IngredientRepository) -> Optional[MealPlanView]:
    """Join the stored assignments of a plan back to their recipes and grocery list.

    Returns None when no plan has this id. Calling it repeatedly on unchanged
    data yields equal views; nothing is written.
    """
    meal_plan = plans.get_meal_plan(meal_plan_id)
    if meal_plan is None:
        return None

    assignments = sorted(plans.list_assignments(meal_plan_id),
                         key=lambda a: (a.day_of_week, _MEAL_RANK[a.meal_type]))
    recipe_index = recipes.get_index()
    planned = [PlannedMeal(a.day_of_week, a.meal_type, recipe_index[a.recipe_id]) for a in assignments]

    lines = recipes.list_lines({a.recipe_id for a in assignments})
    grocery_list = consolidate(assignments, lines, ingredients.get_index())
    return MealPlanView(meal_plan, planned, grocery_list)


__all__ = ['reconstruct']
