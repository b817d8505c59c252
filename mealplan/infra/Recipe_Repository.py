"""Recipe repository helpers: recipes and their ingredient lines."""
import logging
from typing import Dict, Iterable, List, Optional
from mealplan.domain.errors import UnknownIngredientError
from mealplan.domain.Recipe import DietaryPreference, Recipe, RecipeIngredientLine
from mealplan.infra.Store import JsonStore, Transaction

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, store: JsonStore):
        self.store = store

    def list_recipes(self, dietary_preference: Optional[DietaryPreference] = None) -> List[Recipe]:
        '''All recipes in insertion order, optionally restricted to one dietary preference.'''
        recipes = [Recipe.from_dict(row) for row in self.store.snapshot()["recipes"]]
        if dietary_preference is None:
            return recipes
        preference = DietaryPreference(dietary_preference)
        return [r for r in recipes if r.dietary_preference == preference]

    def get_index(self) -> Dict[int, Recipe]:
        return {r.id: r for r in self.list_recipes()}

    def list_lines(self, recipe_ids: Optional[Iterable[int]] = None) -> List[RecipeIngredientLine]:
        lines = [RecipeIngredientLine.from_dict(row) for row in self.store.snapshot()["recipe_ingredients"]]
        if recipe_ids is None:
            return lines
        wanted = set(recipe_ids)
        return [line for line in lines if line.recipe_id in wanted]

    def add_recipe(self, tx: Transaction, recipe: Recipe,
                   lines: List[RecipeIngredientLine]) -> Recipe:
        '''Insert a recipe and its ingredient lines. Every referenced ingredient must already exist.'''
        known = {row["id"] for row in tx.rows("ingredients")}
        for line in lines:
            if line.ingredient_id not in known:
                logger.warning(f"Recipe '{recipe.name}' references unknown ingredient {line.ingredient_id}")
                raise UnknownIngredientError(line.ingredient_id)
        row = recipe.to_dict()
        row.pop("id")
        row.pop("created_at")
        stored = Recipe.from_dict(tx.insert("recipes", row))
        for line in lines:
            line_row = line.to_dict()
            line_row.pop("id")
            line_row.pop("created_at")
            line_row["recipe_id"] = stored.id
            tx.insert("recipe_ingredients", line_row)
        return stored
