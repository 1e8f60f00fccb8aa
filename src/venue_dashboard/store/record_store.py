"""
Relational record store for the games library, play sessions and calendar.

One ``RecordStore`` is built when the application starts (see
``venue_dashboard.main``) and handed to request handlers through the
``get_record_store`` dependency. Every operation opens its own short-lived
session: a single select, or a single insert followed by a commit.

Request DTOs from ``venue_dashboard.contracts.records`` are mapped onto ORM
rows here, so the wire schema and the table layout can change independently.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Request
from sqlalchemy import Engine, create_engine, func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from venue_dashboard.contracts.records import (
    CalendarEvent,
    CalendarEventCreate,
    Game,
    GameCreate,
    PlaySession,
    PlaySessionCreate,
)
from venue_dashboard.store.models import Base, CalendarEventRow, GameRow, PlaySessionRow

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"

_DEFAULT_GAMES = [
    GameCreate(
        title="Catan",
        category="Strategy",
        min_players=3,
        max_players=4,
        description="Trade, build, and settle.",
        image_url="https://images.unsplash.com/photo-1610890716271-e2fe9d2b0951?auto=format&fit=crop&q=80&w=300",
    ),
    GameCreate(
        title="Dixit",
        category="Party",
        min_players=3,
        max_players=6,
        description="A picture is worth a thousand words.",
        image_url="https://images.unsplash.com/photo-1606167668584-78701c57f13d?auto=format&fit=crop&q=80&w=300",
    ),
    GameCreate(
        title="Ticket to Ride",
        category="Family",
        min_players=2,
        max_players=5,
        description="Cross-country train adventure.",
        image_url="https://images.unsplash.com/photo-1596727147705-06a532a65c27?auto=format&fit=crop&q=80&w=300",
    ),
]


class RecordStore:
    def __init__(self, engine: Engine):
        self._engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, database_url: str) -> RecordStore:
        """
        Build a store for ``database_url``.

        In-memory SQLite gets a single shared connection; otherwise each
        threadpool worker would see its own empty database.
        """
        if database_url.startswith("sqlite"):
            kwargs: dict = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
                kwargs["poolclass"] = StaticPool
            return cls(create_engine(database_url, **kwargs))
        return cls(create_engine(database_url, pool_pre_ping=True))

    def create_schema(self) -> None:
        Base.metadata.create_all(self._engine)

    def dispose(self) -> None:
        self._engine.dispose()

    # Games

    def list_games(self, search: str | None = None, category: str | None = None) -> list[Game]:
        stmt = select(GameRow)
        if search:
            stmt = stmt.where(GameRow.title.icontains(search, autoescape=True))
        if category and category != ALL_CATEGORIES:
            stmt = stmt.where(GameRow.category == category)
        with self._sessions() as session:
            rows = session.scalars(stmt.order_by(GameRow.id)).all()
            return [Game.model_validate(row) for row in rows]

    def create_game(self, fields: GameCreate) -> Game:
        row = self._insert(GameRow(**fields.model_dump()))
        return Game.model_validate(row)

    # Sessions

    def list_sessions(self) -> list[PlaySession]:
        stmt = select(PlaySessionRow).order_by(PlaySessionRow.date, PlaySessionRow.id)
        with self._sessions() as session:
            return [PlaySession.model_validate(row) for row in session.scalars(stmt).all()]

    def create_session(self, fields: PlaySessionCreate) -> PlaySession:
        row = self._insert(PlaySessionRow(**fields.model_dump()))
        return PlaySession.model_validate(row)

    # Events

    def list_events(self) -> list[CalendarEvent]:
        stmt = select(CalendarEventRow).order_by(CalendarEventRow.date, CalendarEventRow.id)
        with self._sessions() as session:
            return [CalendarEvent.model_validate(row) for row in session.scalars(stmt).all()]

    def create_event(self, fields: CalendarEventCreate) -> CalendarEvent:
        row = self._insert(CalendarEventRow(**fields.model_dump()))
        return CalendarEvent.model_validate(row)

    def seed_defaults(self) -> None:
        """Populate an empty library and calendar with demo records."""
        if self._count(GameRow) == 0:
            for game in _DEFAULT_GAMES:
                self.create_game(game)
            logger.info("Seeded %d default games", len(_DEFAULT_GAMES))
        if self._count(CalendarEventRow) == 0:
            self.create_event(
                CalendarEventCreate(
                    title="Board Game Night",
                    date=datetime.now(timezone.utc),
                    type="event",
                    description="Weekly community gathering",
                )
            )
            logger.info("Seeded default calendar event")

    def _insert(self, row):
        with self._sessions() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return row

    def _count(self, model) -> int:
        with self._sessions() as session:
            return session.scalar(select(func.count()).select_from(model)) or 0


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store
