"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date
from decimal import Decimal
from mealplan.domain.Recipe import DietaryPreference


class IngredientInput(BaseModel):
    """Schema for ingredient creation."""
    name: str = Field(..., min_length=1, max_length=100)
    unit: str = Field(..., min_length=1, max_length=20)
    estimated_price_per_unit: Decimal = Field(..., gt=0)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('Value cannot be blank')
        return v


class RecipeIngredientInput(BaseModel):
    """Schema for one ingredient line of a recipe."""
    ingredient_id: int
    quantity: Decimal = Field(..., gt=0)


class RecipeInput(BaseModel):
    """Schema for recipe creation."""
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    dietary_preference: DietaryPreference
    estimated_cost: Decimal = Field(..., gt=0)
    servings: int = Field(..., ge=1)
    prep_time_minutes: int = Field(..., ge=1)
    instructions: str
    ingredients: List[RecipeIngredientInput] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('ingredients', mode='before')
    @classmethod
    def accept_pairs(cls, v):
        """Allow (ingredient_id, quantity) pairs as well as mappings."""
        if isinstance(v, list):
            return [{'ingredient_id': item[0], 'quantity': item[1]} if isinstance(item, (tuple, list)) else item
                    for item in v]
        return v


class MealPlanInput(BaseModel):
    """Schema for meal plan creation."""
    user_id: str = Field(..., min_length=1)
    week_start_date: date
    dietary_preference: DietaryPreference
    weekly_budget: Decimal = Field(..., gt=0)
