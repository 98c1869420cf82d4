"""Canonical piece ordering shared with the simulation backend."""

from __future__ import annotations

from types import MappingProxyType

from terrain_client.models import SessionUsageError

# Positional wire contract: array payloads are indexed by this order, never by name.
PIECE_TYPES: tuple[str, ...] = (
    "king",
    "queen",
    "rook",
    "bishop",
    "knight",
    "pawn",
)

PIECE_NOT_FOUND = -1

_PIECE_INDEX = MappingProxyType({name: index for index, name in enumerate(PIECE_TYPES)})


class UnknownPieceError(SessionUsageError):
    """Raised when a piece name is not part of the backend's ordering."""


def get_piece_index(piece_type: str) -> int:
    """Return the wire index of ``piece_type`` or ``PIECE_NOT_FOUND``."""
    return _PIECE_INDEX.get(piece_type, PIECE_NOT_FOUND)


def require_piece_index(piece_type: str) -> int:
    index = get_piece_index(piece_type)
    if index == PIECE_NOT_FOUND:
        raise UnknownPieceError(f"Unknown piece type: {piece_type!r} (expected one of {', '.join(PIECE_TYPES)})")
    return index
