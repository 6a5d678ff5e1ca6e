"""Prompts and output schema for meal plan generation."""

from pinkplate.prompts.generate_meal_plan import (
    GENERATE_MEAL_PLAN_PROMPT,
    JSON_SCHEMA_INSTRUCTION,
    OPTIMIZATION_GUIDANCE,
)
from pinkplate.prompts.meal_plan_schema import MEAL_PLAN_RESPONSE_SCHEMA

__all__ = [
    "GENERATE_MEAL_PLAN_PROMPT",
    "JSON_SCHEMA_INSTRUCTION",
    "OPTIMIZATION_GUIDANCE",
    "MEAL_PLAN_RESPONSE_SCHEMA",
]
