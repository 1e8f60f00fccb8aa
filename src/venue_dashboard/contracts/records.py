from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_REQUEST_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")
_RESPONSE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class GameCreate(BaseModel):
    model_config = _REQUEST_CONFIG

    title: str = Field(min_length=1, description="Display title of the game.")
    category: str = Field(min_length=1, description="Library category, e.g. Strategy or Party.")
    min_players: int = Field(ge=1)
    max_players: int = Field(ge=1)
    description: str | None = None
    image_url: str | None = None

    @model_validator(mode="after")
    def _check_player_range(self) -> "GameCreate":
        if self.max_players < self.min_players:
            raise ValueError("maxPlayers must be greater than or equal to minPlayers")
        return self


class Game(GameCreate):
    model_config = _RESPONSE_CONFIG

    id: int


class PlaySessionCreate(BaseModel):
    model_config = _REQUEST_CONFIG

    date: datetime = Field(description="Date and time the session started.")
    branch: str = Field(min_length=1)
    table_number: str = Field(min_length=1)
    game_id: int | None = Field(default=None, description="Library game played, if any.")
    guru_name: str = Field(min_length=1, description="Staff member who hosted the table.")
    player_names: list[str] | None = None
    notes: str | None = None


class PlaySession(PlaySessionCreate):
    model_config = _RESPONSE_CONFIG

    id: int


class CalendarEventCreate(BaseModel):
    model_config = _REQUEST_CONFIG

    title: str = Field(min_length=1)
    date: datetime
    type: str = Field(min_length=1, description="Event kind, e.g. meeting, event or deadline.")
    description: str | None = None


class CalendarEvent(CalendarEventCreate):
    model_config = _RESPONSE_CONFIG

    id: int
