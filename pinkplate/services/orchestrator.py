"""Generation lifecycle: idle, in-flight and settled states around one plan request."""
import asyncio
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Union
from pinkplate.config import config
from pinkplate.models.meal_plan import MealPlanResponse
from pinkplate.models.preferences import OptimizationFocus, UserPreferences


LOADING_MESSAGES = [
    "Consulting Tier-2 city price indices...",
    "Optimizing for your ₹150 budget...",
    "Filtering student-friendly recipes...",
    "Checking pantry ingredient compatibility...",
    "Calculating total grocery costs...",
    "Balancing prep time with student schedules...",
    "Finalizing your personalized plan...",
]

GENERIC_ERROR_MESSAGE = "Failed to generate meal plan. Please check your connection or try again."


class PlanState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SETTLED = "settled"


@dataclass(frozen=True)
class PlanSuccess:
    response: MealPlanResponse
    ok: bool = True


@dataclass(frozen=True)
class PlanFailure:
    message: str
    ok: bool = False


PlanResult = Union[PlanSuccess, PlanFailure]


class MealPlanner(Protocol):
    async def generate_meal_plan(
        self, preferences: UserPreferences, optimization: OptimizationFocus
    ) -> MealPlanResponse:
        ...


class PlanOrchestrator:
    """
    Owns the current plan result and the lifecycle of generation requests.

    Every call to generate() takes a new epoch. Only the resolution carrying the
    latest epoch is applied, so a slow earlier request can never overwrite the
    result of a newer one. While a request is in flight a status message rotates
    through LOADING_MESSAGES on a fixed interval.
    """

    def __init__(self, planner: MealPlanner, message_interval: Optional[float] = None):
        self.planner = planner
        if message_interval is None:
            message_interval = config.LOADING_MESSAGE_INTERVAL
        if message_interval <= 0:
            raise ValueError(f"message_interval must be positive, got {message_interval}")
        self.message_interval = message_interval
        self.state = PlanState.IDLE
        self.result: Optional[PlanResult] = None
        self.optimization = OptimizationFocus.BALANCED
        self.message_index = 0
        self._epoch = 0
        self._ticker: Optional[asyncio.Task] = None

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def is_busy(self) -> bool:
        return self.state == PlanState.IN_FLIGHT

    @property
    def can_generate(self) -> bool:
        return not self.is_busy

    @property
    def status_message(self) -> Optional[str]:
        if self.state != PlanState.IN_FLIGHT:
            return None
        return LOADING_MESSAGES[self.message_index]

    @property
    def plan(self) -> Optional[MealPlanResponse]:
        if isinstance(self.result, PlanSuccess):
            return self.result.response
        return None

    @property
    def error(self) -> Optional[str]:
        if isinstance(self.result, PlanFailure):
            return self.result.message
        return None

    async def generate(
        self,
        preferences: UserPreferences,
        optimization: Union[OptimizationFocus, str] = OptimizationFocus.BALANCED
    ) -> PlanResult:
        """
        Request a new plan and settle the shared state with its outcome.

        The state is IN_FLIGHT before the first suspension point. Failures of any
        kind settle as PlanFailure with a generic message; the cause only goes to
        the developer log.
        """
        focus = OptimizationFocus(optimization)
        epoch = self.begin(focus)
        return await self.complete(epoch, preferences, focus)

    def begin(self, optimization: Union[OptimizationFocus, str] = OptimizationFocus.BALANCED) -> int:
        """Enter IN_FLIGHT synchronously and return the epoch of the new request."""
        self._epoch += 1
        self.state = PlanState.IN_FLIGHT
        self.result = None
        self._start_ticker()
        print(f"[PLAN] Request #{self._epoch} started (focus={OptimizationFocus(optimization).value})")
        return self._epoch

    async def complete(self, epoch: int, preferences: UserPreferences, focus: OptimizationFocus) -> PlanResult:
        """Await the planner for the request tagged with epoch and settle if it is still the latest."""
        try:
            response = await self.planner.generate_meal_plan(preferences, focus)
            outcome: PlanResult = PlanSuccess(response)
        except asyncio.CancelledError:
            if epoch == self._epoch:
                self._settle(PlanFailure(GENERIC_ERROR_MESSAGE))
            raise
        except Exception as e:
            print(f"[PLAN] Request #{epoch} failed: {type(e).__name__}: {e}")
            print(f"[PLAN] Traceback: {traceback.format_exc()}")
            outcome = PlanFailure(GENERIC_ERROR_MESSAGE)

        if epoch != self._epoch:
            print(f"[PLAN] Discarding stale result of request #{epoch} (latest is #{self._epoch})")
            return outcome

        if isinstance(outcome, PlanSuccess):
            self.optimization = focus
        self._settle(outcome)
        print(f"[PLAN] Request #{epoch} settled ({'success' if outcome.ok else 'failure'})")
        return outcome

    def _settle(self, outcome: PlanResult) -> None:
        self._stop_ticker()
        self.result = outcome
        self.state = PlanState.SETTLED

    def _start_ticker(self) -> None:
        self._stop_ticker()
        self.message_index = 0
        self._ticker = asyncio.get_running_loop().create_task(self._rotate_messages())

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None

    async def _rotate_messages(self) -> None:
        while True:
            await asyncio.sleep(self.message_interval)
            self.message_index = (self.message_index + 1) % len(LOADING_MESSAGES)
