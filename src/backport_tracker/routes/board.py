"""Board routes — cards, filter controls, completion toggle, dismissal."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from backport_tracker.models.outcome import SyncFailure, SyncOutcome
from backport_tracker.services.board import Board
from backport_tracker.services.cards import CardView
from backport_tracker.services.filters import FilterState

router = APIRouter(prefix="/api/board", tags=["board"])
logger = logging.getLogger(__name__)


class BoardView(BaseModel):
    assignees: list[str]
    filters: FilterState
    cards: list[CardView]


class FilterUpdate(BaseModel):
    assignee: str | None = None
    show_completed: bool | None = None


class CompletionUpdate(BaseModel):
    completed: bool


class MissingBackports(BaseModel):
    id: str
    missing: list[str]


def get_board(request: Request) -> Board:
    """Return the session board or raise 503 when the startup load failed."""
    board = request.app.state.board
    if board is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=request.app.state.load_error or "Documents not loaded",
        )
    return board


def _board_view(board: Board) -> BoardView:
    return BoardView(assignees=board.assignees, filters=board.filters, cards=board.cards())


@router.get("")
async def show_board(request: Request) -> BoardView:
    """Assignee options, current filters and every card with its visibility."""
    return _board_view(get_board(request))


@router.post("/filters")
async def update_filters(request: Request, update: FilterUpdate) -> BoardView:
    board = get_board(request)
    board.apply_filters(assignee=update.assignee, show_completed=update.show_completed)
    return _board_view(board)


@router.post("/cards/{document_id}/completion")
async def toggle_completion(
    request: Request, document_id: str, update: CompletionUpdate
) -> SyncOutcome:
    """Mark a card complete or incomplete once the document service confirms."""
    board = get_board(request)
    outcome = await board.toggle(document_id, update.completed)
    if outcome.success:
        return outcome
    if outcome.reason == SyncFailure.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=outcome.detail)
    logger.info("Completion toggle failed — document=%s reason=%s", document_id, outcome.reason)
    raise HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=outcome.model_dump(mode="json"),
    )


@router.post("/cards/{document_id}/dismiss", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_card(request: Request, document_id: str) -> None:
    """Hide a card for this session."""
    if not get_board(request).dismiss(document_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown document")


@router.get("/cards/{document_id}/missing-backports")
async def missing_backports(request: Request, document_id: str) -> MissingBackports:
    missing = get_board(request).missing_backports(document_id)
    if missing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown document")
    return MissingBackports(id=document_id, missing=missing)
