"""CLI startup entrypoint for the terrain client."""

from __future__ import annotations

from dataclasses import asdict

import typer
from rich import print

from terrain_client.adapters import GameApiError, HttpGameBackend
from terrain_client.cli import CliSessionHandler
from terrain_client.config import settings
from terrain_client.models import Marks, SessionUsageError
from terrain_client.pieces import require_piece_index
from terrain_client.telemetry import configure_logging

app = typer.Typer(help="Terrain simulation client")


@app.callback()
def _main(log_level: str | None = typer.Option(None, help="Override TERRAIN_CLIENT_LOG_LEVEL")) -> None:
    configure_logging(log_level or settings.log_level)


def _build_handler(base_url: str | None = None) -> CliSessionHandler:
    backend = HttpGameBackend(
        base_url=base_url or settings.api_base_url,
        timeout=settings.request_timeout_seconds,
    )
    return CliSessionHandler(backend)


def _parse_mark(raw: str) -> tuple[str, tuple[float, float]]:
    try:
        piece, coords = raw.split("=", 1)
        x, y = (float(part) for part in coords.split(","))
    except ValueError as exc:
        raise typer.BadParameter(f"Expected piece=x,y, got {raw!r}") from exc
    piece = piece.strip().lower()
    try:
        require_piece_index(piece)
    except SessionUsageError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return piece, (x, y)


@app.command()
def start() -> None:
    """Show runtime backend configuration."""
    print(
        {
            "app_name": settings.app_name,
            "api_base_url": settings.api_base_url,
            "request_timeout_seconds": settings.request_timeout_seconds,
            "default_place": settings.default_place,
        }
    )


@app.command()
def play(
    place: str | None = typer.Argument(None, help="Location name, e.g. 'Copenhagen, Denmark'"),
    steps: int = typer.Option(1, min=0, help="How many ticks to advance after reset"),
    base_url: str | None = typer.Option(None, help="Backend base URL"),
) -> None:
    """Open a session, reset, step and close it, printing every state."""
    handler = _build_handler(base_url)
    try:
        report = handler.play(place or settings.default_place, steps=steps)
    except (GameApiError, SessionUsageError) as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    print({"game_id": report.init.game_id, "cfg": report.init.scene.cfg, "marks": report.init.marks})
    for state in report.states:
        print({"step": state.step, "units": [asdict(unit) for unit in state.unit]})


@app.command("sync-marks")
def sync_marks(
    game_id: str,
    size: float = typer.Option(..., help="Session size reported by init"),
    mark: list[str] = typer.Option(..., help="Display-space mark as piece=x,y; repeat for every piece"),
    base_url: str | None = typer.Option(None, help="Backend base URL"),
) -> None:
    """Write a full marker set to a running session."""
    marks: Marks = dict(_parse_mark(raw) for raw in mark)
    try:
        _build_handler(base_url).sync_marks(game_id, marks, size)
    except (GameApiError, SessionUsageError) as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    print({"marks_synced": game_id})


@app.command()
def close(
    game_id: str,
    base_url: str | None = typer.Option(None, help="Backend base URL"),
) -> None:
    """Close a running session."""
    try:
        _build_handler(base_url).close(game_id)
    except GameApiError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    print({"closed": game_id})


if __name__ == "__main__":
    app()
