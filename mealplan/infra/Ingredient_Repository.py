"""Ingredient repository helpers (JSON store persistence)."""
from typing import Dict, List
from mealplan.domain.Ingredient import Ingredient
from mealplan.infra.Store import JsonStore, Transaction


class IngredientRepository:
    def __init__(self, store: JsonStore):
        self.store = store

    def list_ingredients(self) -> List[Ingredient]:
        return [Ingredient.from_dict(row) for row in self.store.snapshot()["ingredients"]]

    def get_index(self) -> Dict[int, Ingredient]:
        '''Ingredient id -> Ingredient, for price and unit lookups.'''
        return {ing.id: ing for ing in self.list_ingredients()}

    def add_ingredient(self, tx: Transaction, ingredient: Ingredient) -> Ingredient:
        row = ingredient.to_dict()
        row.pop("id")
        row.pop("created_at")
        return Ingredient.from_dict(tx.insert("ingredients", row))
