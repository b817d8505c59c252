"""Meal plan repository: plan rows and their (day, meal type, recipe) assignments."""
from decimal import Decimal
from typing import List, Optional
from mealplan.domain.Plan import Assignment, MealPlan
from mealplan.infra.Store import JsonStore, Transaction
from mealplan.utilities.decimals import decimal_str


class PlanRepository:
    def __init__(self, store: JsonStore):
        self.store = store

    def get_meal_plan(self, meal_plan_id: int) -> Optional[MealPlan]:
        for row in self.store.snapshot()["meal_plans"]:
            if row["id"] == meal_plan_id:
                return MealPlan.from_dict(row)
        return None

    def list_user_plans(self, user_id: str) -> List[MealPlan]:
        '''Plans of one user, newest first (ties broken by the higher id).'''
        plans = [MealPlan.from_dict(row) for row in self.store.snapshot()["meal_plans"]
                 if row["user_id"] == user_id]
        plans.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return plans

    def list_assignments(self, meal_plan_id: int) -> List[Assignment]:
        return [Assignment.from_dict(row) for row in self.store.snapshot()["meal_plan_recipes"]
                if row["meal_plan_id"] == meal_plan_id]

    def add_meal_plan(self, tx: Transaction, plan: MealPlan) -> MealPlan:
        row = plan.to_dict()
        row.pop("id")
        row.pop("created_at")
        return MealPlan.from_dict(tx.insert("meal_plans", row))

    def add_assignments(self, tx: Transaction, meal_plan_id: int,
                        assignments: List[Assignment]) -> List[Assignment]:
        stored = []
        for assignment in assignments:
            row = assignment.to_dict()
            row.pop("id")
            row.pop("created_at")
            row["meal_plan_id"] = meal_plan_id
            stored.append(Assignment.from_dict(tx.insert("meal_plan_recipes", row)))
        return stored

    def set_total_cost(self, tx: Transaction, meal_plan_id: int, total: Decimal) -> MealPlan:
        return MealPlan.from_dict(
            tx.update("meal_plans", meal_plan_id, total_estimated_cost=decimal_str(total))
        )
