"""Meal plan returned by the generative model."""
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


class EffortLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Meal(BaseModel):
    name: str
    description: str = ""
    cookingTime: float = 0
    ingredientsUsed: List[str] = Field(default_factory=list)
    isPortable: bool = False
    effortLevel: EffortLevel = EffortLevel.MEDIUM

    @field_validator("effortLevel", mode="before")
    @classmethod
    def normalize_effort(cls, value):
        # Models answer "low" / "LOW" as often as "Low"
        if isinstance(value, str):
            return value.strip().capitalize()
        return value


class Substitution(BaseModel):
    meal: str
    options: List[str] = Field(default_factory=list)


class DailyPlan(BaseModel):
    day: int
    breakfast: Meal
    lunch: Meal
    dinner: Meal
    cookingSequence: List[str] = Field(default_factory=list)
    substitutions: List[Substitution] = Field(default_factory=list)

    def meals(self) -> List[tuple]:
        """Meals in serving order as (label, meal) pairs."""
        return [("Breakfast", self.breakfast), ("Lunch", self.lunch), ("Dinner", self.dinner)]


class GroceryItem(BaseModel):
    item: str
    quantity: str = ""
    estimatedCost: float = 0
    category: str = "Other"


class BudgetFeasibility(BaseModel):
    isFeasible: bool
    totalEstimatedCost: float
    explanation: str = ""


class FallbackPlans(BaseModel):
    cheapest: str = ""
    reducedVariety: str = ""
    failureReason: str = ""


class MealPlanResponse(BaseModel):
    """Top-level envelope; every field except fallbackPlans is required."""

    success: bool
    personalisationProof: str
    usingYourIngredients: List[str]
    dailyPlans: List[DailyPlan]
    groceryList: List[GroceryItem]
    budgetFeasibility: BudgetFeasibility
    fallbackPlans: Optional[FallbackPlans] = None

    @property
    def needs_fallback(self) -> bool:
        return not self.budgetFeasibility.isFeasible and self.fallbackPlans is not None

    def grocery_categories(self) -> List[str]:
        """Distinct categories in the order they first appear."""
        categories = []
        for grocery in self.groceryList:
            if grocery.category not in categories:
                categories.append(grocery.category)
        return categories

    def groceries_by_category(self) -> Dict[str, List[GroceryItem]]:
        grouped: Dict[str, List[GroceryItem]] = {category: [] for category in self.grocery_categories()}
        for grocery in self.groceryList:
            grouped[grocery.category].append(grocery)
        return grouped

    def grocery_total(self) -> float:
        return sum(grocery.estimatedCost for grocery in self.groceryList)
