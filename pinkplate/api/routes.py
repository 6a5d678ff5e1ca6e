"""API routes."""
import time
from typing import Dict, Optional, Tuple
from fastapi import APIRouter, Request, HTTPException
from slowapi.util import get_remote_address
from pinkplate.config import config
from pinkplate.api.views import render_session
from pinkplate.models.preferences import CityType, KitchenSetup, OptimizationFocus, UserPreferences
from pinkplate.models.request import GenerateRequest, IngredientRequest, PreferencesUpdate
from pinkplate.models.response import OptionsResponse, SessionView
from pinkplate.services.session_store import PlannerSession, get_session_store

router = APIRouter(prefix="/api/v1", tags=["planner"])

# Simple rate limiting storage: {ip: (count, reset_time)}
_rate_limit_storage: Dict[str, Tuple[int, float]] = {}


def check_rate_limit(request: Request, limit: int = 10, window: int = 60):
    """Check rate limit for request."""
    ip = get_remote_address(request)
    current_time = time.time()

    _prune_expired(current_time)
    count, reset_time = _rate_limit_storage.get(ip, (0, 0))

    # Reset if window expired
    if current_time > reset_time:
        _rate_limit_storage[ip] = (1, current_time + window)
        return

    if count >= limit:
        raise HTTPException(status_code=429, detail=f"Rate limit exceeded: {limit} requests per {window} seconds")

    _rate_limit_storage[ip] = (count + 1, reset_time)


def _prune_expired(current_time: float) -> None:
    """Drop clients whose window has already closed."""
    expired = [ip for ip, (_, reset_time) in _rate_limit_storage.items() if current_time > reset_time]
    for ip in expired:
        del _rate_limit_storage[ip]


def _get_session(session_id: str) -> PlannerSession:
    session = get_session_store().get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.get("/options", response_model=OptionsResponse)
async def get_options() -> OptionsResponse:
    """Choices for the preference form."""
    return OptionsResponse(
        cityTypes=[city.value for city in CityType],
        kitchenSetups=[setup.value for setup in KitchenSetup],
        optimizations=[focus.value for focus in OptimizationFocus],
        defaults=UserPreferences(),
    )


@router.post("/sessions", response_model=SessionView, status_code=201)
async def create_session() -> SessionView:
    try:
        session = get_session_store().create()
    except ValueError as e:
        print(f"[REQUEST] Could not create session: {e}")
        raise HTTPException(status_code=503, detail="Service configuration error")
    return render_session(session)


@router.get("/sessions/{session_id}", response_model=SessionView)
async def get_session(session_id: str) -> SessionView:
    return render_session(_get_session(session_id))


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(session_id: str) -> None:
    if not get_session_store().discard(session_id):
        raise HTTPException(status_code=404, detail="Session not found")


@router.patch("/sessions/{session_id}/preferences", response_model=SessionView)
async def update_preferences(session_id: str, update: PreferencesUpdate) -> SessionView:
    session = _get_session(session_id)
    if session.orchestrator.is_busy:
        raise HTTPException(status_code=409, detail="Preferences are locked while a plan is generating")

    preferences = session.preferences
    if update.cityType is not None:
        preferences.set_city_type(update.cityType)
    if update.dietType is not None:
        preferences.set_diet_type(update.dietType)
    if update.budgetPerDay is not None:
        preferences.set_budget(update.budgetPerDay)
    if update.timePerMeal is not None:
        preferences.set_time_per_meal(update.timePerMeal)
    if update.kitchenSetup is not None:
        preferences.set_kitchen_setup(update.kitchenSetup)
    if update.days is not None:
        preferences.set_days(update.days)
    return render_session(session)


@router.post("/sessions/{session_id}/ingredients", response_model=SessionView)
async def add_ingredient(session_id: str, ingredient: IngredientRequest) -> SessionView:
    session = _get_session(session_id)
    if session.orchestrator.is_busy:
        raise HTTPException(status_code=409, detail="Preferences are locked while a plan is generating")
    session.preferences.add_ingredient(ingredient.name)
    return render_session(session)


@router.delete("/sessions/{session_id}/ingredients/{name}", response_model=SessionView)
async def remove_ingredient(session_id: str, name: str) -> SessionView:
    session = _get_session(session_id)
    if session.orchestrator.is_busy:
        raise HTTPException(status_code=409, detail="Preferences are locked while a plan is generating")
    session.preferences.remove_ingredient(name)
    return render_session(session)


@router.post("/sessions/{session_id}/generate", response_model=SessionView)
async def generate_plan(request: Request, session_id: str, body: Optional[GenerateRequest] = None) -> SessionView:
    """Start a plan generation; the trigger stays disabled while one is in flight."""
    session = _get_session(session_id)
    body = body or GenerateRequest()

    if session.orchestrator.is_busy:
        raise HTTPException(status_code=409, detail="A meal plan is already being generated")

    check_rate_limit(request, limit=config.GENERATE_RATE_LIMIT, window=config.GENERATE_RATE_WINDOW)

    print(f"\n[REQUEST] Generating plan for session {session_id} (optimization={body.optimization.value if body.optimization else 'current'})")
    request_start_time = time.time()

    if body.wait:
        await session.generate(body.optimization)
        print(f"[REQUEST] Plan settled in {time.time() - request_start_time:.3f}s")
    else:
        session.start_generation(body.optimization)

    return render_session(session)
