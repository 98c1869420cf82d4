"""Simulation backend adapters (HTTP integration)."""

from .backend import GameBackend
from .http_backend import GameApiError, HttpGameBackend, decode_units

__all__ = [
    "GameApiError",
    "GameBackend",
    "HttpGameBackend",
    "decode_units",
]
