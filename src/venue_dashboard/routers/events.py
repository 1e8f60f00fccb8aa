from fastapi import APIRouter, Depends, status

from venue_dashboard.contracts.errors import ProblemDetails
from venue_dashboard.contracts.records import CalendarEvent, CalendarEventCreate
from venue_dashboard.store.record_store import RecordStore, get_record_store

router = APIRouter(prefix="/api/events", tags=["calendar"])


@router.get(
    "",
    response_model=list[CalendarEvent],
    summary="List Calendar Events",
    description="Lists calendar events ordered by date.",
)
def list_events(store: RecordStore = Depends(get_record_store)) -> list[CalendarEvent]:
    return store.list_events()


@router.post(
    "",
    response_model=CalendarEvent,
    status_code=status.HTTP_201_CREATED,
    summary="Add Calendar Event",
    responses={400: {"model": ProblemDetails, "description": "Invalid event fields"}},
)
def create_event(
    body: CalendarEventCreate, store: RecordStore = Depends(get_record_store)
) -> CalendarEvent:
    return store.create_event(body)
