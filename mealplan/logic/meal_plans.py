"""Meal plan operations: create a weekly plan, read it back, list a user's plans, grocery list.

Creation runs select_candidates -> assemble -> persist -> consolidate. The plan
row, its 21 assignments and its total cost are written in one store transaction,
so a failure at any point leaves no trace of the plan.

The plan's total_estimated_cost is the nominal total (sum of the assigned
recipes' declared costs) in both the creation and the retrieval view.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from mealplan.domain.Plan import MealPlan, MealPlanView, PlannedMeal
from mealplan.domain.GroceryList import GroceryListItem
from mealplan.domain.Recipe import DietaryPreference
from mealplan.infra.Ingredient_Repository import IngredientRepository
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.infra.Recipe_Repository import RecipeRepository
from mealplan.infra.Store import JsonStore
from mealplan.logic.planning.assembler import assemble
from mealplan.logic.planning.reconstructor import reconstruct
from mealplan.logic.planning.selector import select_candidates
from mealplan.logic.shopping.list_builder import consolidate
from mealplan.utilities.validators import MealPlanInput

logger = logging.getLogger(__name__)


def create_meal_plan(store: JsonStore, user_id: str, week_start_date: date,
                     dietary_preference: DietaryPreference, weekly_budget: Decimal) -> MealPlanView:
    data = MealPlanInput(user_id=user_id, week_start_date=week_start_date,
                         dietary_preference=dietary_preference, weekly_budget=weekly_budget)
    recipes = RecipeRepository(store)
    plans = PlanRepository(store)

    try:
        candidates = select_candidates(recipes.list_recipes(data.dietary_preference),
                                       data.dietary_preference, data.weekly_budget)
        assignments, total = assemble(candidates)
        with store.transaction() as tx:
            plan = plans.add_meal_plan(tx, MealPlan(
                user_id=data.user_id, week_start_date=data.week_start_date,
                dietary_preference=data.dietary_preference, weekly_budget=data.weekly_budget,
            ))
            stored = plans.add_assignments(tx, plan.id, assignments)
            plan = plans.set_total_cost(tx, plan.id, total)
    except Exception as e:
        logger.error(f"Meal plan creation failed for user '{data.user_id}': {e}")
        raise

    logger.info(f"Created meal plan {plan.id} for user '{plan.user_id}' "
                f"({len(candidates)} candidates, total {total})")
    by_id = {r.id: r for r in candidates}
    planned = [PlannedMeal(a.day_of_week, a.meal_type, by_id[a.recipe_id]) for a in stored]
    grocery_list = consolidate(stored, recipes.list_lines(by_id), IngredientRepository(store).get_index())
    return MealPlanView(plan, planned, grocery_list)


def get_meal_plan(store: JsonStore, meal_plan_id: int) -> Optional[MealPlanView]:
    '''Full view of a stored plan, or None when it does not exist.'''
    return reconstruct(meal_plan_id, PlanRepository(store), RecipeRepository(store),
                       IngredientRepository(store))


def get_user_meal_plans(store: JsonStore, user_id: str) -> List[MealPlan]:
    return PlanRepository(store).list_user_plans(user_id)


def generate_grocery_list(store: JsonStore, meal_plan_id: int) -> List[GroceryListItem]:
    '''Consolidated grocery list of a stored plan; empty for an unknown plan.'''
    assignments = PlanRepository(store).list_assignments(meal_plan_id)
    if not assignments:
        return []
    lines = RecipeRepository(store).list_lines({a.recipe_id for a in assignments})
    return consolidate(assignments, lines, IngredientRepository(store).get_index())


__all__ = ['create_meal_plan', 'get_meal_plan', 'get_user_meal_plans', 'generate_grocery_list']
