"""Catalog operations: create and list ingredients and recipes."""
import logging
from decimal import Decimal
from typing import Iterable, List, Optional
from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.Recipe import DietaryPreference, Recipe, RecipeIngredientLine
from mealplan.infra.Ingredient_Repository import IngredientRepository
from mealplan.infra.Recipe_Repository import RecipeRepository
from mealplan.infra.Store import JsonStore
from mealplan.utilities.validators import IngredientInput, RecipeInput

logger = logging.getLogger(__name__)


def create_ingredient(store: JsonStore, name: str, unit: str,
                      estimated_price_per_unit: Decimal) -> Ingredient:
    data = IngredientInput(name=name, unit=unit, estimated_price_per_unit=estimated_price_per_unit)
    with store.transaction() as tx:
        ingredient = IngredientRepository(store).add_ingredient(tx, Ingredient(
            name=data.name, unit=data.unit, estimated_price_per_unit=data.estimated_price_per_unit
        ))
    logger.info(f"Created ingredient {ingredient.id} ({ingredient.name})")
    return ingredient


def get_ingredients(store: JsonStore) -> List[Ingredient]:
    return IngredientRepository(store).list_ingredients()


def create_recipe(store: JsonStore, name: str, description: Optional[str],
                  dietary_preference: DietaryPreference, estimated_cost: Decimal, servings: int,
                  prep_time_minutes: int, instructions: str, ingredients: Iterable = ()) -> Recipe:
    """Create a recipe and its ingredient lines as one unit.

    ingredients holds (ingredient_id, quantity) pairs or mappings with those keys.
    Raises UnknownIngredientError, writing nothing, if any ingredient id is not in the catalog.
    """
    data = RecipeInput(
        name=name, description=description or None, dietary_preference=dietary_preference,
        estimated_cost=estimated_cost, servings=servings, prep_time_minutes=prep_time_minutes,
        instructions=instructions, ingredients=list(ingredients),
    )
    recipe = Recipe(
        name=data.name, description=data.description, dietary_preference=data.dietary_preference,
        estimated_cost=data.estimated_cost, servings=data.servings,
        prep_time_minutes=data.prep_time_minutes, instructions=data.instructions,
    )
    lines = [RecipeIngredientLine(None, line.ingredient_id, line.quantity) for line in data.ingredients]
    try:
        with store.transaction() as tx:
            recipe = RecipeRepository(store).add_recipe(tx, recipe, lines)
    except Exception as e:
        logger.error(f"Recipe creation failed: {e}")
        raise
    logger.info(f"Created recipe {recipe.id} ({recipe.name}) with {len(lines)} ingredient lines")
    return recipe


def get_recipes(store: JsonStore, dietary_preference: Optional[DietaryPreference] = None) -> List[Recipe]:
    '''All recipes, or only those of one dietary preference when given.'''
    return RecipeRepository(store).list_recipes(dietary_preference)


__all__ = ['create_ingredient', 'get_ingredients', 'create_recipe', 'get_recipes']
