from fastapi import APIRouter, Depends, Query, status

from venue_dashboard.contracts.errors import ProblemDetails
from venue_dashboard.contracts.records import Game, GameCreate
from venue_dashboard.store.record_store import RecordStore, get_record_store

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get(
    "",
    response_model=list[Game],
    summary="List Library Games",
    description="Lists games, optionally filtered by title substring and category ('All' disables it).",
)
def list_games(
    search: str | None = Query(default=None, description="Case-insensitive title substring."),
    category: str | None = Query(default=None),
    store: RecordStore = Depends(get_record_store),
) -> list[Game]:
    return store.list_games(search=search, category=category)


@router.post(
    "",
    response_model=Game,
    status_code=status.HTTP_201_CREATED,
    summary="Add Game to Library",
    responses={400: {"model": ProblemDetails, "description": "Invalid game fields"}},
)
def create_game(body: GameCreate, store: RecordStore = Depends(get_record_store)) -> Game:
    return store.create_game(body)
