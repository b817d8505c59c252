from fastapi import APIRouter, Depends
from mealplan.api.dependencies import get_store
from mealplan.infra.Store import JsonStore
from mealplan.logic import catalog
from mealplan.utilities.validators import IngredientInput

router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])


@router.post("", status_code=201)
def create_ingredient(payload: IngredientInput, store: JsonStore = Depends(get_store)):
    ingredient = catalog.create_ingredient(store, payload.name, payload.unit,
                                           payload.estimated_price_per_unit)
    return ingredient.to_dict()


@router.get("")
def list_ingredients(store: JsonStore = Depends(get_store)):
    return [ing.to_dict() for ing in catalog.get_ingredients(store)]
