"""Prompt for generating a multi-day student meal plan."""

GENERATE_MEAL_PLAN_PROMPT = """Generate a {days}-day realistic, low-cost Indian {diet_type} meal plan.
City Type: {city_type}
Budget: ₹{budget_per_day} per day
Max cooking time: {time_per_meal} mins per meal
Kitchen Setup: {kitchen_setup}
Available ingredients: {ingredients_text}
Optimization focus: {optimization}
{optimization_guidance}

RULES:
1. Use at least 3 available ingredients per day.
2. Ensure meals are common in Indian households (Dal, Chawal, Sabzi, Poha, etc.).
3. Respect student life: some meals must be portable or low-effort.
4. If budget is infeasible, provide exactly two fallback descriptions.
5. Output must be strictly valid JSON according to the schema.
"""

OPTIMIZATION_GUIDANCE = {
    "balanced": "Balance cost, cooking time and nutrition evenly.",
    "cheapest": "Minimise total grocery cost first, even at the expense of variety.",
    "fastest": "Minimise cooking time and washing up; prefer one-pot meals.",
    "protein": "Maximise protein per meal (dal, paneer, chana, soya, curd) within the budget.",
}

JSON_SCHEMA_INSTRUCTION = """Respond with a single JSON object that conforms to this JSON schema.
Do not wrap it in markdown and do not add any text outside the JSON.

{schema}"""
