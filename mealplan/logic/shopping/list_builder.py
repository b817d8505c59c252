"""Grocery list builder.

Expands a plan's assignments into recipe ingredient lines, sums the quantities
per ingredient and prices each ingredient once.
Provides build_ingredient_index(lines) and consolidate(assignments, lines, ingredients).
"""
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, NamedTuple, Tuple
from mealplan.domain.errors import UnknownIngredientError
from mealplan.domain.GroceryList import GroceryListItem
from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.Plan import Assignment
from mealplan.domain.Recipe import RecipeIngredientLine


class IngredientIndex(NamedTuple):
    by_recipe: Dict[int, List[Tuple[int, Decimal]]]
    by_ingredient: Dict[int, List[Tuple[int, Decimal]]]


def build_ingredient_index(lines: Iterable[RecipeIngredientLine]) -> IngredientIndex:
    """Materialize the recipe <-> ingredient relation once.

    by_recipe maps recipe id -> [(ingredient id, quantity)] in line order;
    by_ingredient maps ingredient id -> [(recipe id, quantity)].
    """
    by_recipe: Dict[int, List[Tuple[int, Decimal]]] = defaultdict(list)
    by_ingredient: Dict[int, List[Tuple[int, Decimal]]] = defaultdict(list)
    for line in lines:
        by_recipe[line.recipe_id].append((line.ingredient_id, line.quantity))
        by_ingredient[line.ingredient_id].append((line.recipe_id, line.quantity))
    return IngredientIndex(dict(by_recipe), dict(by_ingredient))


def consolidate(assignments: Iterable[Assignment], lines: Iterable[RecipeIngredientLine],
                ingredients: Mapping[int, Ingredient]) -> List[GroceryListItem]:
    """Compute the consolidated grocery list for a set of assignments.

    Args:
        assignments: plan slots; a recipe used in several slots contributes once per slot.
        lines: recipe ingredient lines (at least those of the assigned recipes).
        ingredients: ingredient id -> Ingredient, for name, unit and price.

    Returns:
        One GroceryListItem per ingredient, in order of first appearance, with
        total_quantity summed over every expansion and
        estimated_total_cost = total_quantity x price per unit.
    """
    index = build_ingredient_index(lines)
    totals: Dict[int, Decimal] = {}
    for assignment in assignments:
        for ingredient_id, quantity in index.by_recipe.get(assignment.recipe_id, []):
            totals[ingredient_id] = totals.get(ingredient_id, Decimal(0)) + quantity

    grocery_list: List[GroceryListItem] = []
    for ingredient_id, quantity in totals.items():
        ingredient = ingredients.get(ingredient_id)
        if ingredient is None:
            raise UnknownIngredientError(ingredient_id)
        grocery_list.append(GroceryListItem(
            ingredient_id=ingredient_id,
            ingredient_name=ingredient.name,
            total_quantity=quantity,
            unit=ingredient.unit,
            estimated_total_cost=quantity * ingredient.estimated_price_per_unit,
        ))
    return grocery_list


__all__ = ['IngredientIndex', 'build_ingredient_index', 'consolidate']
