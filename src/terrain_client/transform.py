"""Linear coordinate mapping between the display space and a session's simulation space."""

from __future__ import annotations

from collections.abc import Sequence

LOCAL_SIZE = 100
"""Extent of the frontend display space on both axes."""


def scale(value: float, from_extent: float, to_extent: float) -> float:
    """Map ``value`` from ``[0, from_extent)`` onto ``[0, to_extent)``.

    Values outside the source range are mapped outside the target range; nothing is clamped.
    """
    if from_extent <= 0 or to_extent <= 0:
        raise ValueError(f"Extents must be positive (got from={from_extent}, to={to_extent})")
    return value * (to_extent / from_extent)


def to_display(value: float, size: float) -> float:
    return scale(value, size, LOCAL_SIZE)


def to_sim(value: float, size: float) -> float:
    return scale(value, LOCAL_SIZE, size)


def to_display_point(coord: Sequence[float], size: float) -> tuple[float, float]:
    """Convert a backend ``[x, y]`` pair to display space, keeping axis order."""
    return to_display(coord[0], size), to_display(coord[1], size)


def to_sim_point(coord: Sequence[float], size: float) -> tuple[float, float]:
    """Convert a display ``(x, y)`` pair to simulation space, keeping axis order."""
    return to_sim(coord[0], size), to_sim(coord[1], size)


def to_sim_transposed(coord: Sequence[float], size: float) -> list[float]:
    """Convert a display ``(x, y)`` pair to the backend's ``[y, x]`` marker layout.

    The marker endpoint reads coordinates transposed relative to what ``init`` returns,
    so this is intentionally not the inverse of :func:`to_display_point`.
    """
    return [to_sim(coord[1], size), to_sim(coord[0], size)]
