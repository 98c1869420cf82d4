"""CLI-side handler wrappers around the async session API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from terrain_client.adapters import GameApiError, GameBackend
from terrain_client.models import InitResult, Marks, SessionUsageError, State
from terrain_client.session import GameSession

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class PlayReport:
    """Everything observed during one scripted session run."""

    init: InitResult
    states: list[State] = field(default_factory=list)


class CliSessionHandler:
    """Simple sync-friendly facade over the async backend."""

    def __init__(self, backend: GameBackend) -> None:
        self._backend = backend

    def play(self, place: str, steps: int = 1) -> PlayReport:
        """Open a session, reset it, advance ``steps`` ticks and close it again."""
        return asyncio.run(self._play(place, steps))

    def sync_marks(self, game_id: str, marks: Marks, size: float) -> None:
        asyncio.run(self._backend.sync_marks(game_id, marks, size))

    def close(self, game_id: str) -> None:
        asyncio.run(self._backend.close(game_id))

    async def _play(self, place: str, steps: int) -> PlayReport:
        session = GameSession(self._backend)
        report = PlayReport(init=await session.open(place))
        try:
            report.states.append(await session.reset())
            for _ in range(steps):
                report.states.append(await session.step())
        except (GameApiError, SessionUsageError):
            # A failed close is only logged so the original error propagates.
            try:
                await session.close()
            except GameApiError:
                LOGGER.warning("session_close_after_failure_failed", extra={"game_id": session.game_id})
            raise
        await session.close()
        return report
