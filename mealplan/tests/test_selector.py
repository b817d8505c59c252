import unittest
from decimal import Decimal
from mealplan.domain.errors import BudgetExceededError, NoCandidatesError
from mealplan.domain.Recipe import Recipe
from mealplan.logic.planning.selector import select_candidates


def _recipe(id, cost, preference="vegan"):
    return Recipe(id=id, name=f"R{id}", dietary_preference=preference, estimated_cost=Decimal(cost))


class TestSelectCandidates(unittest.TestCase):

    def setUp(self):
        self.recipes = [
            _recipe(1, "3.00"),
            _recipe(2, "1.50"),
            _recipe(3, "9.00"),
            _recipe(4, "1.50"),
            _recipe(5, "2.00", "vegetarian"),
        ]

    def test_filters_by_preference_and_sorts_by_cost(self):
        # 2 x (84 / 21) = 8.00 ceiling, recipe 3 is too expensive
        result = select_candidates(self.recipes, "vegan", Decimal("84"))
        self.assertEqual([r.id for r in result], [2, 4, 1])

    def test_ceiling_is_inclusive(self):
        result = select_candidates(self.recipes, "vegan", Decimal("94.5"))
        self.assertEqual([r.id for r in result], [2, 4, 1, 3])

    def test_no_recipes_for_preference(self):
        only_vegetarian = [r for r in self.recipes if r.dietary_preference.value == "vegetarian"]
        with self.assertRaises(NoCandidatesError):
            select_candidates(only_vegetarian, "vegan", Decimal("100"))

    def test_budget_too_small(self):
        with self.assertRaises(BudgetExceededError):
            select_candidates([_recipe(1, "50.00")], "vegan", Decimal("10"))

    def test_budget_must_be_positive(self):
        with self.assertRaises(ValueError):
            select_candidates(self.recipes, "vegan", Decimal("0"))


if __name__ == '__main__':
    unittest.main()
