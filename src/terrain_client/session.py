"""Phase-tagged handle over one simulation session."""

from __future__ import annotations

import logging

from terrain_client.adapters.backend import GameBackend
from terrain_client.models import InitResult, Marks, Scene, SessionPhase, SessionUsageError, State
from terrain_client.pieces import require_piece_index


class GameSession:
    """Drives one backend session through ``uninitialized -> active -> closed``.

    Operations called in the wrong phase raise :class:`SessionUsageError` before any
    request is made. A failed backend call leaves the phase where it was.
    """

    def __init__(self, backend: GameBackend, *, logger: logging.Logger | None = None) -> None:
        self._backend = backend
        self._logger = logger or logging.getLogger("terrain_client.session")
        self._phase = SessionPhase.UNINITIALIZED
        self._game_id: str | None = None
        self._scene: Scene | None = None
        self._marks: Marks = {}
        self._last_state: State | None = None

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def game_id(self) -> str | None:
        return self._game_id

    @property
    def scene(self) -> Scene | None:
        return self._scene

    @property
    def marks(self) -> Marks:
        return dict(self._marks)

    @property
    def last_state(self) -> State | None:
        return self._last_state

    @property
    def size(self) -> float:
        scene = self._require_active("size")[1]
        if scene.cfg is None:
            raise SessionUsageError("Session scene has no configuration")
        return scene.cfg.size

    async def open(self, place: str) -> InitResult:
        if self._phase is not SessionPhase.UNINITIALIZED:
            raise SessionUsageError(f"Cannot open a session that is {self._phase.value}")

        result = await self._backend.init(place)
        self._game_id = result.game_id
        self._scene = result.scene
        self._marks = dict(result.marks)
        self._phase = SessionPhase.ACTIVE
        self._logger.info("session_opened", extra={"game_id": result.game_id, "place": place})
        return result

    async def reset(self) -> State:
        game_id, scene = self._require_active("reset")
        self._last_state = await self._backend.reset(game_id, scene)
        return self._last_state

    async def step(self) -> State:
        game_id, scene = self._require_active("step")
        self._last_state = await self._backend.step(game_id, scene)
        return self._last_state

    async def sync_marks(self, marks: Marks) -> None:
        game_id, _ = self._require_active("sync marks")
        await self._backend.sync_marks(game_id, marks, self.size)
        self._marks = dict(marks)

    async def move_mark(self, piece: str, coord: tuple[float, float]) -> Marks:
        """Replace one piece's mark and write the whole set back."""
        require_piece_index(piece)
        self._require_active("move mark")
        marks = dict(self._marks)
        marks[piece] = (float(coord[0]), float(coord[1]))
        await self.sync_marks(marks)
        return self.marks

    async def close(self) -> None:
        game_id, _ = self._require_active("close")
        await self._backend.close(game_id)
        self._phase = SessionPhase.CLOSED
        self._logger.info("session_closed", extra={"game_id": game_id})

    def _require_active(self, operation: str) -> tuple[str, Scene]:
        if self._phase is not SessionPhase.ACTIVE or self._game_id is None or self._scene is None:
            raise SessionUsageError(f"Cannot {operation}: session is {self._phase.value}")
        return self._game_id, self._scene
