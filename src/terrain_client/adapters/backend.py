"""Boundary for simulation backend integrations."""

from typing import Protocol

from terrain_client.models import InitResult, Marks, Scene, State


class GameBackend(Protocol):
    """Interface to the remote terrain/unit simulation service.

    Every call is self-contained: identifiers and scale parameters are passed in, never
    read from state held by the backend object.
    """

    async def init(self, place: str) -> InitResult:
        """Create a session for ``place`` and return its id, scene and display-space marks."""

    async def reset(self, game_id: str, scene: Scene) -> State:
        """Restore the session to its initial simulation state."""

    async def step(self, game_id: str, scene: Scene) -> State:
        """Advance the simulation by one tick."""

    async def close(self, game_id: str) -> None:
        """Tear the session down."""

    async def sync_marks(self, game_id: str, marks: Marks, size: float) -> None:
        """Write the full marker set back to the session."""
