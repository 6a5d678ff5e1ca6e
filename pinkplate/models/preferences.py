"""Planning preferences collected from the user."""
import math
from enum import Enum
from typing import List, Union
from pydantic import BaseModel, Field, field_validator


class CityType(str, Enum):
    TIER1 = "Tier-1"
    TIER2 = "Tier-2"
    TIER3 = "Tier-3"


class KitchenSetup(str, Enum):
    MINIMAL = "Minimal (Single Induction/Kettle)"
    MEDIUM = "Medium (Gas Stove, Basic Cookware)"
    FULL = "Full (Oven, Microwave, Mixer, Stove)"


class OptimizationFocus(str, Enum):
    BALANCED = "balanced"
    CHEAPEST = "cheapest"
    FASTEST = "fastest"
    PROTEIN = "protein"


DEFAULT_INGREDIENTS = ["rice", "dal", "onions", "tomatoes", "potatoes", "turmeric", "chilli powder"]


def normalize_ingredient(raw: str) -> str:
    """Trim and lower-case a pantry ingredient name."""
    if not isinstance(raw, str):
        return ""
    return raw.strip().lower()


def _coerce_enum(enum_cls, value):
    """Return the enum member for value, or None when it is not a known member/value."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _positive_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


class UserPreferences(BaseModel):
    """
    Planning inputs for one session.

    All mutators are total: a value that would break an invariant is ignored
    and the previous value is kept. The ingredient list never holds an empty
    or duplicate (case-insensitive) entry and keeps insertion order.
    """

    cityType: CityType = CityType.TIER2
    dietType: str = "Vegetarian"
    budgetPerDay: float = Field(150, gt=0)
    timePerMeal: int = Field(25, gt=0)
    kitchenSetup: KitchenSetup = KitchenSetup.MEDIUM
    ingredients: List[str] = Field(default_factory=lambda: list(DEFAULT_INGREDIENTS))
    days: int = Field(2, gt=0)

    @field_validator("ingredients")
    @classmethod
    def normalize_ingredients(cls, value: List[str]) -> List[str]:
        ingredients = []
        for raw in value:
            name = normalize_ingredient(raw)
            if name and name not in ingredients:
                ingredients.append(name)
        return ingredients

    def set_city_type(self, city_type: Union[CityType, str]) -> None:
        member = _coerce_enum(CityType, city_type)
        if member is not None:
            self.cityType = member

    def set_diet_type(self, diet_type: str) -> None:
        if isinstance(diet_type, str) and diet_type.strip():
            self.dietType = diet_type.strip()

    def set_budget(self, budget_per_day: float) -> None:
        if _positive_number(budget_per_day):
            self.budgetPerDay = budget_per_day

    def set_time_per_meal(self, minutes: int) -> None:
        if _positive_number(minutes) and float(minutes).is_integer():
            self.timePerMeal = int(minutes)

    def set_kitchen_setup(self, kitchen_setup: Union[KitchenSetup, str]) -> None:
        member = _coerce_enum(KitchenSetup, kitchen_setup)
        if member is not None:
            self.kitchenSetup = member

    def set_days(self, days: int) -> None:
        if isinstance(days, int) and not isinstance(days, bool) and days > 0:
            self.days = days

    def add_ingredient(self, raw: str) -> bool:
        """
        Add a pantry ingredient.

        Returns:
            True if the ingredient was added, False for an empty or duplicate name
        """
        name = normalize_ingredient(raw)
        if not name or name in self.ingredients:
            return False
        self.ingredients.append(name)
        return True

    def remove_ingredient(self, name: str) -> bool:
        """Remove an ingredient by its stored value. Returns False if absent."""
        if name not in self.ingredients:
            return False
        self.ingredients.remove(name)
        return True

    def snapshot(self) -> "UserPreferences":
        """Independent copy handed to a generation request."""
        return self.model_copy(deep=True)
