"""Status route — load state and board statistics."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request

router = APIRouter(tags=["status"])


@router.get("/status")
async def show_status(request: Request) -> dict:
    """Report whether documents loaded, plus counts over the store."""
    state = request.app.state
    board = state.board
    return {
        "env": state.settings.app.env,
        "loaded": board is not None,
        "load_error": state.load_error,
        "uptime_seconds": round(time.monotonic() - state.start_time, 1),
        "stats": board.stats() if board is not None else None,
    }
