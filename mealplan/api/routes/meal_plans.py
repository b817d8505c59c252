from fastapi import APIRouter, Depends, HTTPException
from mealplan.api.dependencies import get_store
from mealplan.infra.Store import JsonStore
from mealplan.logic import meal_plans
from mealplan.utilities.validators import MealPlanInput

router = APIRouter(prefix="/api", tags=["meal-plans"])


@router.post("/meal-plans", status_code=201)
def create_meal_plan(payload: MealPlanInput, store: JsonStore = Depends(get_store)):
    view = meal_plans.create_meal_plan(store, payload.user_id, payload.week_start_date,
                                       payload.dietary_preference, payload.weekly_budget)
    return view.to_dict()


@router.get("/meal-plans/{meal_plan_id}")
def get_meal_plan(meal_plan_id: int, store: JsonStore = Depends(get_store)):
    view = meal_plans.get_meal_plan(store, meal_plan_id)
    if view is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return view.to_dict()


@router.get("/meal-plans/{meal_plan_id}/grocery-list")
def get_grocery_list(meal_plan_id: int, store: JsonStore = Depends(get_store)):
    """Consolidated grocery list; empty when the plan does not exist.

    Response JSON structure:
        { "meal_plan_id": <int>, "count": <int>, "items": [ {ingredient_id, ingredient_name,
          total_quantity, unit, estimated_total_cost}, ... ] }
    """
    items = meal_plans.generate_grocery_list(store, meal_plan_id)
    return {"meal_plan_id": meal_plan_id, "count": len(items), "items": [i.to_dict() for i in items]}


@router.get("/users/{user_id}/meal-plans")
def list_user_meal_plans(user_id: str, store: JsonStore = Depends(get_store)):
    return [plan.to_dict() for plan in meal_plans.get_user_meal_plans(store, user_id)]
