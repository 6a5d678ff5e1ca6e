"""Response models for API endpoints."""
from typing import List, Optional
from pydantic import BaseModel
from pinkplate.models.meal_plan import FallbackPlans, GroceryItem, Meal, Substitution
from pinkplate.models.preferences import UserPreferences


class MealView(BaseModel):
    label: str
    meal: Meal


class DayView(BaseModel):
    day: int
    meals: List[MealView]
    cookingSequence: List[str]
    substitutions: List[Substitution]


class GroceryGroup(BaseModel):
    category: str
    items: List[GroceryItem]


class FeasibilityView(BaseModel):
    isFeasible: bool
    totalEstimatedCost: float
    explanation: str


class PlanView(BaseModel):
    personalisationProof: str
    usingYourIngredients: List[str]
    days: List[DayView]
    groceryGroups: List[GroceryGroup]
    estimatedTotal: float
    budgetFeasibility: FeasibilityView
    fallbackPlans: Optional[FallbackPlans] = None


class SessionView(BaseModel):
    sessionId: str
    preferences: UserPreferences
    state: str
    optimization: str
    canGenerate: bool
    statusMessage: Optional[str] = None
    error: Optional[str] = None
    plan: Optional[PlanView] = None


class OptionsResponse(BaseModel):
    cityTypes: List[str]
    kitchenSetups: List[str]
    optimizations: List[str]
    defaults: UserPreferences
