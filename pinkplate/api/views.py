"""Render planner session state into API view models."""
from pinkplate.models.meal_plan import MealPlanResponse
from pinkplate.models.response import (
    DayView,
    FeasibilityView,
    GroceryGroup,
    MealView,
    PlanView,
    SessionView,
)
from pinkplate.services.session_store import PlannerSession

EMPTY_PROOF_TEXT = "Generic student optimization applied."


def render_plan(plan: MealPlanResponse) -> PlanView:
    days = [
        DayView(
            day=daily.day,
            meals=[MealView(label=label, meal=meal) for label, meal in daily.meals()],
            cookingSequence=daily.cookingSequence,
            substitutions=daily.substitutions,
        )
        for daily in plan.dailyPlans
    ]
    groups = [
        GroceryGroup(category=category, items=items)
        for category, items in plan.groceries_by_category().items()
    ]
    feasibility = plan.budgetFeasibility
    return PlanView(
        personalisationProof=plan.personalisationProof or EMPTY_PROOF_TEXT,
        usingYourIngredients=plan.usingYourIngredients,
        days=days,
        groceryGroups=groups,
        estimatedTotal=feasibility.totalEstimatedCost,
        budgetFeasibility=FeasibilityView(
            isFeasible=feasibility.isFeasible,
            totalEstimatedCost=feasibility.totalEstimatedCost,
            explanation=feasibility.explanation,
        ),
        # Fallback only shows up when the plan blows the budget
        fallbackPlans=plan.fallbackPlans if plan.needs_fallback else None,
    )


def render_session(session: PlannerSession) -> SessionView:
    orchestrator = session.orchestrator
    plan = orchestrator.plan
    return SessionView(
        sessionId=session.session_id,
        preferences=session.preferences,
        state=orchestrator.state.value,
        optimization=session.optimization.value,
        canGenerate=orchestrator.can_generate,
        statusMessage=orchestrator.status_message,
        error=orchestrator.error,
        plan=render_plan(plan) if plan is not None else None,
    )
