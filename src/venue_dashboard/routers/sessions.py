from fastapi import APIRouter, Depends, status

from venue_dashboard.contracts.errors import ProblemDetails
from venue_dashboard.contracts.records import PlaySession, PlaySessionCreate
from venue_dashboard.store.record_store import RecordStore, get_record_store

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get(
    "",
    response_model=list[PlaySession],
    summary="List Play Sessions",
    description="Lists logged play sessions ordered by date.",
)
def list_sessions(store: RecordStore = Depends(get_record_store)) -> list[PlaySession]:
    return store.list_sessions()


@router.post(
    "",
    response_model=PlaySession,
    status_code=status.HTTP_201_CREATED,
    summary="Log Play Session",
    responses={400: {"model": ProblemDetails, "description": "Invalid session fields"}},
)
def create_session(
    body: PlaySessionCreate, store: RecordStore = Depends(get_record_store)
) -> PlaySession:
    return store.create_session(body)
