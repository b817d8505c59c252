"""GroceryListItem: one consolidated, priced line of a plan's shopping list (derived, never stored)."""
from decimal import Decimal
from mealplan.utilities.decimals import D, decimal_str


class GroceryListItem:
    def __init__(self, ingredient_id: int, ingredient_name: str, total_quantity: Decimal,
                 unit: str, estimated_total_cost: Decimal):
        self.ingredient_id = ingredient_id
        self.ingredient_name = ingredient_name
        self.total_quantity = D(total_quantity)
        self.unit = unit
        self.estimated_total_cost = D(estimated_total_cost)

    def __str__(self) -> str:
        return f"{self.ingredient_name} - {self.total_quantity} {self.unit} - {self.estimated_total_cost}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "ingredient_id": self.ingredient_id,
            "ingredient_name": self.ingredient_name,
            "total_quantity": decimal_str(self.total_quantity),
            "unit": self.unit,
            "estimated_total_cost": decimal_str(self.estimated_total_cost),
        }
