from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from datetime import datetime
import logging

from mealplan.domain.errors import (
    BudgetExceededError,
    NoCandidatesError,
    PersistenceError,
    UnknownIngredientError,
)
from mealplan.api.routes import ingredients, meal_plans, recipes

# Logging
logger = logging.getLogger("mealplan_app")

# Initialize FastAPI app
app = FastAPI(title="Budget Meal Planner API")

# Include routers
app.include_router(ingredients.router)
app.include_router(recipes.router)
app.include_router(meal_plans.router)


# -------------------- Error kinds -> HTTP --------------------
@app.exception_handler(NoCandidatesError)
def _no_candidates(request: Request, exc: NoCandidatesError):
    return JSONResponse(status_code=422, content={"error": "no_candidates", "detail": str(exc)})


@app.exception_handler(BudgetExceededError)
def _budget_exceeded(request: Request, exc: BudgetExceededError):
    return JSONResponse(status_code=422, content={"error": "budget_exceeded", "detail": str(exc)})


@app.exception_handler(UnknownIngredientError)
def _unknown_ingredient(request: Request, exc: UnknownIngredientError):
    return JSONResponse(status_code=400, content={
        "error": "unknown_ingredient", "detail": str(exc), "ingredient_id": exc.ingredient_id
    })


@app.exception_handler(PersistenceError)
def _persistence_error(request: Request, exc: PersistenceError):
    logger.error("Storage failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "persistence", "detail": str(exc)})


@app.get("/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now().isoformat()}
