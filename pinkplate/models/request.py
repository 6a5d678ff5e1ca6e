"""Request models for API endpoints."""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pinkplate.models.preferences import CityType, KitchenSetup, OptimizationFocus


class PreferencesUpdate(BaseModel):
    cityType: Optional[CityType] = Field(None, description="City tier used for price expectations")
    dietType: Optional[str] = Field(None, description="Diet label, e.g. 'Vegetarian'")
    budgetPerDay: Optional[float] = Field(None, description="Daily budget in ₹", examples=[150])
    timePerMeal: Optional[int] = Field(None, description="Maximum preparation time per meal in minutes", examples=[25])
    kitchenSetup: Optional[KitchenSetup] = Field(None, description="Available cooking equipment")
    days: Optional[int] = Field(None, description="Number of days to plan", examples=[2])

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"cityType": "Tier-2", "budgetPerDay": 150, "timePerMeal": 25, "days": 2},
            ]
        }
    )


class IngredientRequest(BaseModel):
    name: str = Field(
        ...,
        description="Pantry ingredient to lock into the plan (trimmed and lower-cased)",
        examples=["Paneer"]
    )


class GenerateRequest(BaseModel):
    optimization: Optional[OptimizationFocus] = Field(
        None,
        description="Optimization lens; keeps the session's current focus when omitted"
    )
    wait: bool = Field(
        False,
        description="Wait for the plan to settle instead of returning the in-flight view"
    )
