from typing import Optional
from fastapi import APIRouter, Depends, Query
from mealplan.api.dependencies import get_store
from mealplan.domain.Recipe import DietaryPreference
from mealplan.infra.Store import JsonStore
from mealplan.logic import catalog
from mealplan.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.post("", status_code=201)
def create_recipe(payload: RecipeInput, store: JsonStore = Depends(get_store)):
    recipe = catalog.create_recipe(
        store, payload.name, payload.description, payload.dietary_preference,
        payload.estimated_cost, payload.servings, payload.prep_time_minutes,
        payload.instructions, [(line.ingredient_id, line.quantity) for line in payload.ingredients],
    )
    return recipe.to_dict()


@router.get("")
def list_recipes(dietary_preference: Optional[DietaryPreference] = Query(default=None),
                 store: JsonStore = Depends(get_store)):
    """Return all recipes, or only those matching dietary_preference."""
    return [r.to_dict() for r in catalog.get_recipes(store, dietary_preference)]
