"""JSON output schema the model must conform to."""

_STRING = {"type": "string"}
_NUMBER = {"type": "number"}
_BOOLEAN = {"type": "boolean"}
_STRING_LIST = {"type": "array", "items": _STRING}

MEAL_SCHEMA = {
    "type": "object",
    "properties": {
        "name": _STRING,
        "description": _STRING,
        "cookingTime": _NUMBER,
        "ingredientsUsed": _STRING_LIST,
        "isPortable": _BOOLEAN,
        "effortLevel": {"type": "string", "enum": ["Low", "Medium", "High"]},
    },
}

DAILY_PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "day": _NUMBER,
        "breakfast": MEAL_SCHEMA,
        "lunch": MEAL_SCHEMA,
        "dinner": MEAL_SCHEMA,
        "cookingSequence": _STRING_LIST,
        "substitutions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "meal": _STRING,
                    "options": _STRING_LIST,
                },
            },
        },
    },
}

GROCERY_ITEM_SCHEMA = {
    "type": "object",
    "properties": {
        "item": _STRING,
        "quantity": _STRING,
        "estimatedCost": _NUMBER,
        "category": _STRING,
    },
}

MEAL_PLAN_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "success": _BOOLEAN,
        "personalisationProof": _STRING,
        "usingYourIngredients": _STRING_LIST,
        "dailyPlans": {"type": "array", "items": DAILY_PLAN_SCHEMA},
        "groceryList": {"type": "array", "items": GROCERY_ITEM_SCHEMA},
        "budgetFeasibility": {
            "type": "object",
            "properties": {
                "isFeasible": _BOOLEAN,
                "totalEstimatedCost": _NUMBER,
                "explanation": _STRING,
            },
        },
        "fallbackPlans": {
            "type": "object",
            "properties": {
                "cheapest": _STRING,
                "reducedVariety": _STRING,
                "failureReason": _STRING,
            },
        },
    },
    "required": [
        "success",
        "personalisationProof",
        "dailyPlans",
        "groceryList",
        "budgetFeasibility",
        "usingYourIngredients",
    ],
}
