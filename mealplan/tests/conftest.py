from decimal import Decimal
import pytest
from mealplan.infra.Store import JsonStore
from mealplan.logic import catalog


@pytest.fixture
def store(tmp_path):
    """Empty catalog in a temporary file (never the real data directory)."""
    return JsonStore(tmp_path / "catalog.json")


@pytest.fixture
def baking_store(store):
    """Catalog with Flour/Sugar/Eggs and two vegetarian recipes, Pancakes and Cookies."""
    flour = catalog.create_ingredient(store, "Flour", "cups", Decimal("2.50"))
    sugar = catalog.create_ingredient(store, "Sugar", "cups", Decimal("1.75"))
    eggs = catalog.create_ingredient(store, "Eggs", "pieces", Decimal("0.25"))
    catalog.create_recipe(
        store, "Pancakes", "Fluffy", "vegetarian", Decimal("6.00"), 4, 20, "Mix and fry",
        [(flour.id, Decimal("2")), (sugar.id, Decimal("0.25")), (eggs.id, Decimal("2"))],
    )
    catalog.create_recipe(
        store, "Cookies", None, "vegetarian", Decimal("4.00"), 12, 30, "Mix and bake",
        [(flour.id, Decimal("1.5")), (sugar.id, Decimal("0.75"))],
    )
    return store
