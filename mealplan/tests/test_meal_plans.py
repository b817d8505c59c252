from collections import Counter
from datetime import date
from decimal import Decimal
from unittest import mock
import pytest
from pydantic import ValidationError
from mealplan.domain.errors import BudgetExceededError, NoCandidatesError, PersistenceError
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.logic import catalog, meal_plans

WEEK = date(2025, 1, 5)


def test_no_vegan_recipes(baking_store):
    with pytest.raises(NoCandidatesError):
        meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegan", Decimal("100"))
    assert baking_store.snapshot()["meal_plans"] == []


def test_vegan_recipes_over_budget(store):
    catalog.create_recipe(store, "Truffle Risotto", None, "vegan", Decimal("50"), 2, 40, "Stir")
    with pytest.raises(BudgetExceededError):
        meal_plans.create_meal_plan(store, "alice", WEEK, "vegan", Decimal("10"))
    assert store.snapshot()["meal_plans"] == []


def test_budget_must_be_positive(baking_store):
    with pytest.raises(ValidationError):
        meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegetarian", Decimal("-1"))


def test_create_meal_plan_view(baking_store):
    view = meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegetarian", Decimal("200"))

    assert view.meal_plan.id == 1
    assert view.meal_plan.user_id == "alice"
    assert view.meal_plan.week_start_date == WEEK
    assert len(view.recipes) == 21
    assert len({(m.day_of_week, m.meal_type) for m in view.recipes}) == 21
    # Cookies (4.00) sort before Pancakes (6.00) and take the even slots
    assert view.recipes[0].recipe.name == "Cookies"
    assert view.recipes[1].recipe.name == "Pancakes"
    counts = Counter(m.recipe.name for m in view.recipes)
    assert counts == {"Cookies": 11, "Pancakes": 10}

    nominal = Decimal("4.00") * 11 + Decimal("6.00") * 10
    assert view.total_estimated_cost == nominal
    assert view.meal_plan.total_estimated_cost == nominal

    items = {i.ingredient_name: i for i in view.grocery_list}
    assert items["Flour"].total_quantity == Decimal("1.5") * 11 + Decimal("2") * 10
    assert items["Sugar"].total_quantity == Decimal("0.75") * 11 + Decimal("0.25") * 10
    assert items["Eggs"].total_quantity == Decimal("20")
    assert items["Eggs"].estimated_total_cost == Decimal("5.00")
    assert view.grocery_total_cost == sum(i.estimated_total_cost for i in view.grocery_list)


def test_plan_is_persisted_with_21_assignments(baking_store):
    view = meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegetarian", Decimal("200"))
    doc = baking_store.snapshot()
    assert len(doc["meal_plans"]) == 1
    assert doc["meal_plans"][0]["total_estimated_cost"] == "104.00"
    rows = [r for r in doc["meal_plan_recipes"] if r["meal_plan_id"] == view.meal_plan.id]
    assert len(rows) == 21


def test_get_meal_plan_matches_creation(baking_store):
    created = meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegetarian", Decimal("200"))
    fetched = meal_plans.get_meal_plan(baking_store, created.meal_plan.id)
    assert fetched.to_dict() == created.to_dict()
    # read only and repeatable
    assert meal_plans.get_meal_plan(baking_store, created.meal_plan.id).to_dict() == fetched.to_dict()


def test_get_meal_plan_absent(store):
    assert meal_plans.get_meal_plan(store, 42) is None


def test_user_meal_plans_newest_first(baking_store):
    meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegetarian", Decimal("200"))
    meal_plans.create_meal_plan(baking_store, "bob", WEEK, "vegetarian", Decimal("200"))
    meal_plans.create_meal_plan(baking_store, "alice", date(2025, 1, 12), "vegetarian", Decimal("150"))
    plans = meal_plans.get_user_meal_plans(baking_store, "alice")
    assert [p.id for p in plans] == [3, 1]
    assert meal_plans.get_user_meal_plans(baking_store, "carol") == []


def test_generate_grocery_list(baking_store):
    view = meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegetarian", Decimal("200"))
    items = meal_plans.generate_grocery_list(baking_store, view.meal_plan.id)
    assert [i.to_dict() for i in items] == [i.to_dict() for i in view.grocery_list]
    assert meal_plans.generate_grocery_list(baking_store, 999) == []


def test_failed_assignment_write_leaves_no_plan(baking_store):
    with mock.patch.object(PlanRepository, "add_assignments", side_effect=PersistenceError("write failed")):
        with pytest.raises(PersistenceError):
            meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegetarian", Decimal("200"))
    assert meal_plans.get_meal_plan(baking_store, 1) is None
    assert meal_plans.get_user_meal_plans(baking_store, "alice") == []
    assert baking_store.snapshot()["meal_plan_recipes"] == []

    view = meal_plans.create_meal_plan(baking_store, "alice", WEEK, "vegetarian", Decimal("200"))
    assert view.meal_plan.id == 1
    assert len(meal_plans.get_meal_plan(baking_store, 1).recipes) == 21
