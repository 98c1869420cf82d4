"""HTTP client for the simulation backend.

Responses are decoded into display-space models here: coordinates arrive in the
session's ``[0, size)`` range and leave in ``[0, LOCAL_SIZE)``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx

from terrain_client.adapters.backend import GameBackend
from terrain_client.models import InitResult, Marks, Scene, SceneConfig, SessionUsageError, State, Unit
from terrain_client.pieces import PIECE_TYPES
from terrain_client.transform import to_display_point, to_sim_transposed

LOGGER = logging.getLogger(__name__)

# Same unreserved set as JavaScript's encodeURIComponent.
_PLACE_SAFE_CHARS = "-_.!~*'()"

# Operations whose failure message does not read "<operation> game".
_FAILURE_ACTIONS = {"sync marks": "sync marks"}


class GameApiError(RuntimeError):
    """Raised when the backend is unreachable, rejects a call, or returns an unusable body."""

    def __init__(self, operation: str, status_text: str, status_code: int | None = None) -> None:
        action = _FAILURE_ACTIONS.get(operation, f"{operation} game")
        super().__init__(f"Failed to {action}: {status_text}")
        self.operation = operation
        self.status_text = status_text
        self.status_code = status_code


def decode_units(raw_state: Mapping[str, Any], scene: Scene) -> list[Unit]:
    """Build display-space units from a backend state payload.

    Missing ``coords`` or ``health`` means the backend has no unit data yet, which is an
    empty result rather than an error.
    """
    coords = raw_state.get("coords")
    health = raw_state.get("health")
    if coords is None or health is None:
        return []

    if scene.cfg is None:
        raise SessionUsageError("Scene size is undefined; pass the scene returned by init")

    size = scene.cfg.size
    units: list[Unit] = []
    for index, coord in enumerate(coords):
        x, y = to_display_point(coord, size)
        units.append(
            Unit(
                id=index,
                x=x,
                y=y,
                health=health[index] if index < len(health) else None,
            )
        )
    return units


@dataclass(slots=True)
class HttpGameBackend(GameBackend):
    """Async ``httpx`` implementation of :class:`GameBackend`.

    No retries are attempted and no timeout is applied unless ``timeout`` is set.
    """

    base_url: str
    timeout: float | None = None
    client: httpx.AsyncClient | None = field(default=None, repr=False)

    async def init(self, place: str) -> InitResult:
        try:
            data = await self._request_json("initialize", "GET", f"/init/{quote(place, safe=_PLACE_SAFE_CHARS)}")
            try:
                size = data["size"]
                marks: Marks = {piece: to_display_point(data["marks"][piece], size) for piece in PIECE_TYPES}
                result = InitResult(
                    game_id=data["game_id"],
                    scene=Scene(
                        terrain=data.get("terrain"),
                        cfg=SceneConfig(place=data.get("place", place), size=size, teams=data.get("teams")),
                    ),
                    marks=marks,
                )
            except (KeyError, TypeError, IndexError, ValueError) as exc:
                raise GameApiError("initialize", f"malformed response ({type(exc).__name__}: {exc})") from exc
        except GameApiError:
            LOGGER.exception("game_init_failed", extra={"place": place})
            raise

        LOGGER.info("game_initialized", extra={"game_id": result.game_id, "place": place, "size": size})
        return result

    async def reset(self, game_id: str, scene: Scene) -> State:
        try:
            raw_state = await self._request_state("reset", f"/reset/{game_id}")
            units = self._decode_units("reset", raw_state, scene)
        except (GameApiError, SessionUsageError):
            LOGGER.exception("game_reset_failed", extra={"game_id": game_id})
            raise
        # The reported step is passed through untouched here, unlike step().
        return State(unit=units, step=raw_state.get("step"))

    async def step(self, game_id: str, scene: Scene) -> State:
        try:
            raw_state = await self._request_state("step", f"/step/{game_id}")
            units = self._decode_units("step", raw_state, scene)
        except (GameApiError, SessionUsageError):
            LOGGER.exception("game_step_failed", extra={"game_id": game_id})
            raise
        return State(unit=units, step=raw_state.get("step") or 0)

    async def close(self, game_id: str) -> None:
        try:
            await self._request("close", "POST", f"/close/{game_id}")
        except GameApiError:
            LOGGER.exception("game_close_failed", extra={"game_id": game_id})
            raise
        LOGGER.info("game_closed", extra={"game_id": game_id})

    async def sync_marks(self, game_id: str, marks: Marks, size: float) -> None:
        missing = [piece for piece in PIECE_TYPES if piece not in marks]
        if missing:
            raise SessionUsageError(f"Marks are missing pieces: {', '.join(missing)}")

        payload = [to_sim_transposed(marks[piece], size) for piece in PIECE_TYPES]
        LOGGER.debug("marks_sync_requested", extra={"game_id": game_id, "marks": payload})
        try:
            await self._request("sync marks", "POST", f"/marks/{game_id}", json=payload)
        except GameApiError:
            LOGGER.exception("marks_sync_failed", extra={"game_id": game_id})
            raise

    # ------------------------------------------------------------------ internal helpers
    def _url(self, path: str) -> str:
        return self.base_url.rstrip("/") + path

    async def _request(self, operation: str, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        try:
            if self.client is not None:
                if self.timeout is not None:
                    kwargs["timeout"] = self.timeout
                response = await self.client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as session:
                    response = await session.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise GameApiError(operation, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise GameApiError(operation, response.reason_phrase, status_code=response.status_code)
        return response

    async def _request_json(self, operation: str, method: str, path: str) -> dict[str, Any]:
        response = await self._request(operation, method, path)
        try:
            data = response.json()
        except ValueError as exc:
            raise GameApiError(operation, "response body is not valid JSON", status_code=response.status_code) from exc
        if not isinstance(data, dict):
            raise GameApiError(operation, "response body is not a JSON object", status_code=response.status_code)
        return data

    async def _request_state(self, operation: str, path: str) -> dict[str, Any]:
        data = await self._request_json(operation, "GET", path)
        raw_state = data.get("state")
        if raw_state is None:
            raise GameApiError(operation, "No state data returned from the server")
        if not isinstance(raw_state, dict):
            raise GameApiError(operation, "state is not a JSON object")
        return raw_state

    @staticmethod
    def _decode_units(operation: str, raw_state: Mapping[str, Any], scene: Scene) -> list[Unit]:
        try:
            return decode_units(raw_state, scene)
        except (KeyError, TypeError, IndexError, ValueError) as exc:
            raise GameApiError(operation, f"malformed unit data ({type(exc).__name__}: {exc})") from exc
