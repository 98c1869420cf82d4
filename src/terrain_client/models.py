from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Marks = dict[str, tuple[float, float]]
"""Display-space reference coordinate per piece name."""


class SessionUsageError(RuntimeError):
    """Raised when an operation is called with state it cannot work from."""


class SessionPhase(str, Enum):
    """Lifecycle tags for a game session handle."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    CLOSED = "closed"


@dataclass(slots=True, frozen=True)
class SceneConfig:
    place: str
    size: float
    teams: Any = None


@dataclass(slots=True, frozen=True)
class Scene:
    """Terrain payload plus the session configuration returned by ``init``."""

    terrain: Any
    cfg: SceneConfig | None = None


@dataclass(slots=True)
class Unit:
    id: int
    x: float
    y: float
    health: float | None
    size: int = 1


@dataclass(slots=True)
class State:
    """Per-step snapshot exposed to the UI."""

    unit: list[Unit] = field(default_factory=list)
    step: int | None = None


@dataclass(slots=True)
class InitResult:
    game_id: str
    scene: Scene
    marks: Marks
