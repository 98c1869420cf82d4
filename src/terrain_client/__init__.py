"""Client adapter for the terrain/unit simulation backend."""

from terrain_client.adapters import GameApiError, GameBackend, HttpGameBackend
from terrain_client.models import InitResult, Marks, Scene, SceneConfig, SessionPhase, SessionUsageError, State, Unit
from terrain_client.pieces import PIECE_NOT_FOUND, PIECE_TYPES, UnknownPieceError, get_piece_index
from terrain_client.session import GameSession
from terrain_client.transform import LOCAL_SIZE

__all__ = [
    "GameApiError",
    "GameBackend",
    "GameSession",
    "HttpGameBackend",
    "InitResult",
    "LOCAL_SIZE",
    "Marks",
    "PIECE_NOT_FOUND",
    "PIECE_TYPES",
    "Scene",
    "SceneConfig",
    "SessionPhase",
    "SessionUsageError",
    "State",
    "Unit",
    "UnknownPieceError",
    "get_piece_index",
]
