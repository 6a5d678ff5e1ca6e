"""LLM service with multi-provider support (Gemini/OpenAI)."""
import json
import traceback
from typing import Any, List, Optional, Union
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.messages import HumanMessage, SystemMessage
from google.api_core import exceptions as google_exceptions
from pydantic import ValidationError
from pinkplate.config import config
from pinkplate.models.meal_plan import MealPlanResponse
from pinkplate.models.preferences import OptimizationFocus, UserPreferences
from pinkplate.prompts import (
    GENERATE_MEAL_PLAN_PROMPT,
    JSON_SCHEMA_INSTRUCTION,
    MEAL_PLAN_RESPONSE_SCHEMA,
    OPTIMIZATION_GUIDANCE,
)


def format_ingredients_text(ingredients: List[str]) -> str:
    """Format pantry ingredients for the prompt."""
    if not ingredients:
        return "none (suggest affordable staples)"
    return ", ".join(ingredients)


def format_amount(value: float) -> str:
    """Plain decimal rendering of a currency amount, e.g. 150, 99.5, 1234567."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def build_meal_plan_prompt(
    preferences: UserPreferences,
    optimization: Union[OptimizationFocus, str] = OptimizationFocus.BALANCED
) -> str:
    """Render every preference field, the optimization focus and the rules into one prompt."""
    focus = OptimizationFocus(optimization)
    return GENERATE_MEAL_PLAN_PROMPT.format(
        days=preferences.days,
        diet_type=preferences.dietType.lower(),
        city_type=preferences.cityType.value,
        budget_per_day=format_amount(preferences.budgetPerDay),
        time_per_meal=preferences.timePerMeal,
        kitchen_setup=preferences.kitchenSetup.value,
        ingredients_text=format_ingredients_text(preferences.ingredients),
        optimization=focus.value,
        optimization_guidance=OPTIMIZATION_GUIDANCE[focus.value],
    )


def response_text(response: Any) -> str:
    """Extract the text payload from a chat model response."""
    if not hasattr(response, "content") or response.content is None:
        raise ValueError("LLM response has no content attribute or content is None")

    content = response.content
    # Newer Gemini models return a list of content blocks instead of a string
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type", "text") == "text":
                parts.append(block.get("text", ""))
        content = "".join(parts)
    return content.strip()


def parse_meal_plan(content: str) -> MealPlanResponse:
    """Parse the raw payload and validate it against the response contract."""
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as e:
        print(f"[LLM] JSONDecodeError: {e}")
        print(f"[LLM] Original content (first 1000 chars): {content[:1000]}")
        raise ValueError(f"Invalid JSON response from LLM: {e}")

    if not isinstance(payload, dict):
        raise ValueError(f"Parsed JSON is not an object: {type(payload).__name__}")

    try:
        return MealPlanResponse.model_validate(payload)
    except ValidationError as e:
        print(f"[LLM] Meal plan failed schema validation ({e.error_count()} errors)")
        print(f"[LLM] Parsed keys: {list(payload.keys())}")
        raise ValueError(f"Meal plan response does not match schema: {e}")


def classify_llm_error(e: Exception) -> ValueError:
    """Map provider exceptions to ValueError with a recognisable message."""
    error_str = str(e).lower()
    error_type = type(e).__name__
    if isinstance(e, google_exceptions.ResourceExhausted) or (
        "quota" in error_str or "429" in error_str or "resourceexhausted" in error_str or
        "ratelimit" in error_str or "rate_limit" in error_str or error_type == "RateLimitError"
    ):
        return ValueError(f"API quota/rate limit exceeded: {str(e)}")
    if ("api key" in error_str or "api_key" in error_str or "unauthorized" in error_str or
            "401" in error_str or "authentication" in error_str or error_type == "AuthenticationError"):
        return ValueError(f"API authentication error: {str(e)}")
    return ValueError(f"Failed to generate meal plan: {str(e)}")


class LLMService:
    """Service for LLM operations with configurable provider (Gemini/OpenAI)."""

    def __init__(self, llm: Optional[Any] = None, provider: Optional[str] = None):
        """
        Initialize LLM based on LLM_PROVIDER config.

        Args:
            llm: Pre-built chat model; skips provider construction when given
            provider: Overrides config.LLM_PROVIDER
        """
        self.provider = (provider or config.LLM_PROVIDER).lower()

        if self.provider == "gemini":
            self.use_system_message = False
            if llm is None:
                if not config.GEMINI_API_KEY:
                    raise ValueError("Missing GEMINI_API_KEY (required when LLM_PROVIDER=gemini)")
                llm = ChatGoogleGenerativeAI(
                    model=config.GEMINI_MODEL,
                    temperature=config.LLM_TEMPERATURE,
                    google_api_key=config.GEMINI_API_KEY,
                    response_mime_type="application/json",
                    response_schema=MEAL_PLAN_RESPONSE_SCHEMA,
                    max_retries=0
                )

        elif self.provider == "openai":
            # OpenAI JSON mode has no schema slot, so the schema travels in a system message
            self.use_system_message = True
            if llm is None:
                if not config.OPENAI_API_KEY:
                    raise ValueError("Missing OPENAI_API_KEY (required when LLM_PROVIDER=openai)")
                llm = ChatOpenAI(
                    model=config.OPENAI_MODEL,
                    temperature=config.LLM_TEMPERATURE,
                    openai_api_key=config.OPENAI_API_KEY,
                    model_kwargs={"response_format": {"type": "json_object"}},
                    max_retries=0
                )

        else:
            raise ValueError(f"Invalid LLM_PROVIDER: {self.provider}. Must be 'gemini' or 'openai'")

        self.llm = llm

    def build_messages(self, preferences: UserPreferences, optimization: Union[OptimizationFocus, str]) -> list:
        messages = []
        if self.use_system_message:
            messages.append(SystemMessage(content=JSON_SCHEMA_INSTRUCTION.format(
                schema=json.dumps(MEAL_PLAN_RESPONSE_SCHEMA, indent=2)
            )))
        messages.append(HumanMessage(content=build_meal_plan_prompt(preferences, optimization)))
        return ChatPromptTemplate.from_messages(messages).format_messages()

    async def generate_meal_plan(
        self,
        preferences: UserPreferences,
        optimization: Union[OptimizationFocus, str] = OptimizationFocus.BALANCED
    ) -> MealPlanResponse:
        """
        Issue exactly one completion request and return the validated plan.

        Raises:
            ValueError: transport/service failure, invalid JSON or schema mismatch
        """
        messages = self.build_messages(preferences, optimization)

        try:
            print(f"[LLM] generate_meal_plan: Invoking {self.provider} ({preferences.days} days, focus={OptimizationFocus(optimization).value})...")
            response = await self.llm.ainvoke(messages)
        except Exception as e:
            print(f"[LLM] Unexpected error generating meal plan ({self.provider}): {type(e).__name__}: {e}")
            print(f"[LLM] Traceback: {traceback.format_exc()}")
            raise classify_llm_error(e)

        content = response_text(response)
        print(f"[LLM] generate_meal_plan response length: {len(content)}")

        plan = parse_meal_plan(content)
        if len(plan.dailyPlans) != preferences.days:
            print(f"[LLM] generate_meal_plan: expected {preferences.days} daily plans, got {len(plan.dailyPlans)}")
        if not plan.budgetFeasibility.isFeasible and plan.fallbackPlans is None:
            print("[LLM] generate_meal_plan: plan is infeasible but carries no fallbackPlans")
        return plan


_llm_service: Optional[LLMService] = None


def get_llm_service() -> LLMService:
    """Get or create LLM service instance."""
    global _llm_service
    if _llm_service is None:
        _llm_service = LLMService()
    return _llm_service
