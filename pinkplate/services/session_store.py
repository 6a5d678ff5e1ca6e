"""In-memory planner sessions: one preference set and one orchestrator per user."""
import asyncio
import time
import uuid
from typing import Dict, Optional, Union
from pinkplate.models.preferences import OptimizationFocus, UserPreferences
from pinkplate.services.llm_service import get_llm_service
from pinkplate.services.orchestrator import MealPlanner, PlanOrchestrator, PlanResult


class PlannerSession:
    """State holder for one user: preferences, orchestrator and the chosen focus."""

    def __init__(self, session_id: str, planner: MealPlanner, message_interval: Optional[float] = None):
        self.session_id = session_id
        self.preferences = UserPreferences()
        self.orchestrator = PlanOrchestrator(planner, message_interval=message_interval)
        self.last_seen = time.time()
        self._task: Optional[asyncio.Task] = None

    @property
    def optimization(self) -> OptimizationFocus:
        """Focus of the plan on display; only changes when a request succeeds."""
        return self.orchestrator.optimization

    def touch(self) -> None:
        self.last_seen = time.time()

    async def generate(self, optimization: Union[OptimizationFocus, str, None] = None) -> PlanResult:
        """Generate with a snapshot of the current preferences."""
        focus = self.optimization if optimization is None else OptimizationFocus(optimization)
        return await self.orchestrator.generate(self.preferences.snapshot(), focus)

    def start_generation(self, optimization: Union[OptimizationFocus, str, None] = None) -> asyncio.Task:
        """Enter IN_FLIGHT now and finish the request in a background task."""
        focus = self.optimization if optimization is None else OptimizationFocus(optimization)
        epoch = self.orchestrator.begin(focus)
        self._task = asyncio.get_running_loop().create_task(
            self.orchestrator.complete(epoch, self.preferences.snapshot(), focus)
        )
        return self._task

    def close(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None


class SessionStore:
    """Registry of live planner sessions."""

    def __init__(self, planner_factory, max_idle_hours: float = 12, message_interval: Optional[float] = None):
        """
        Args:
            planner_factory: Zero-argument callable returning the MealPlanner to use
            max_idle_hours: Sessions untouched for longer are dropped
            message_interval: Status rotation interval passed to each orchestrator
        """
        self._planner_factory = planner_factory
        self._sessions: Dict[str, PlannerSession] = {}
        self._max_idle_seconds = max_idle_hours * 60 * 60
        self._message_interval = message_interval

    def create(self) -> PlannerSession:
        self._cleanup_idle_sessions()
        session_id = uuid.uuid4().hex
        session = PlannerSession(session_id, self._planner_factory(), message_interval=self._message_interval)
        self._sessions[session_id] = session
        print(f"[SESSION] Created session {session_id}")
        return session

    def get(self, session_id: str) -> Optional[PlannerSession]:
        session = self._sessions.get(session_id)
        if session is not None:
            session.touch()
        return session

    def discard(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        return True

    def _cleanup_idle_sessions(self) -> None:
        cutoff_time = time.time() - self._max_idle_seconds
        stale = [
            session_id for session_id, session in self._sessions.items()
            # Never drop a session while its request is still running
            if session.last_seen < cutoff_time and not session.orchestrator.is_busy
        ]
        for session_id in stale:
            self.discard(session_id)
        if stale:
            print(f"[SESSION] Cleaned up {len(stale)} idle sessions")

    def __len__(self) -> int:
        return len(self._sessions)


_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get or create session store instance."""
    global _session_store
    if _session_store is None:
        _session_store = SessionStore(get_llm_service)
    return _session_store
