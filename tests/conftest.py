import asyncio
import json

import pytest


def _meal(name, portable=False, effort="Low"):
    return {
        "name": name,
        "description": f"{name} made with pantry staples",
        "cookingTime": 20,
        "ingredientsUsed": ["rice", "dal"],
        "isPortable": portable,
        "effortLevel": effort,
    }


def build_plan_payload(days=2, feasible=True, total=140, fallback=None):
    payload = {
        "success": True,
        "personalisationProof": "Uses your rice and dal on both days within ₹150.",
        "usingYourIngredients": ["rice", "dal"],
        "dailyPlans": [
            {
                "day": day,
                "breakfast": _meal("Poha", portable=True),
                "lunch": _meal("Dal Chawal", effort="Medium"),
                "dinner": _meal("Aloo Sabzi with Roti"),
                "cookingSequence": ["Soak dal", "Cook rice and dal together", "Prepare sabzi"],
                "substitutions": [{"meal": "Poha", "options": ["Upma", "Besan Chilla"]}],
            }
            for day in range(1, days + 1)
        ],
        "groceryList": [
            {"item": "Onions", "quantity": "1 kg", "estimatedCost": 40, "category": "Vegetables"},
            {"item": "Poha", "quantity": "500 g", "estimatedCost": 30, "category": "Grains"},
            {"item": "Tomatoes", "quantity": "500 g", "estimatedCost": 25, "category": "Vegetables"},
        ],
        "budgetFeasibility": {
            "isFeasible": feasible,
            "totalEstimatedCost": total,
            "explanation": "Fits within the daily budget." if feasible else "Exceeds the daily budget.",
        },
    }
    if fallback is not None:
        payload["fallbackPlans"] = fallback
    return payload


class FakeLLMResponse:
    def __init__(self, content):
        self.content = content


class FakeChatModel:
    """Stands in for a LangChain chat model; records the messages it receives."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return FakeLLMResponse(self.content)


class FakePlanner:
    """Planner double: returns a response, raises, or waits on a gate before answering."""

    def __init__(self, response=None, error=None, gate=None, on_call=None):
        self.response = response
        self.error = error
        self.gate = gate
        self.on_call = on_call
        self.calls = []

    async def generate_meal_plan(self, preferences, optimization):
        self.calls.append((preferences, optimization))
        if self.on_call is not None:
            self.on_call()
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def plan_payload():
    return build_plan_payload


@pytest.fixture
def plan_json():
    def _plan_json(**kwargs):
        return json.dumps(build_plan_payload(**kwargs))
    return _plan_json


@pytest.fixture
def run():
    return asyncio.run
