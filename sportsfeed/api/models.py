"""Pydantic response models for the API.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompetitorModel(ApiModel):
    id: str | None = None
    name: str
    short_name: str
    score: Any = None


class SportEventModel(ApiModel):
    id: str
    name: str
    short_name: str
    league: str
    date: str
    status: Literal["scheduled", "live", "finished"]
    status_text: str
    time_display: str
    competitors: list[CompetitorModel] | None = None
    scores: list[int | None] | None = None
    link: str
    sport_type: str
    provider: str


class AllSportsResponse(ApiModel):
    """GET /sports"""

    success: bool = True
    timestamp: str
    data: dict[str, list[SportEventModel]]


class SportResponse(ApiModel):
    """GET /sports/{sport}"""

    success: bool = True
    timestamp: str
    sport_type: str
    events: list[SportEventModel]
    events_by_league: dict[str, list[SportEventModel]]


class LeagueInfo(ApiModel):
    slug: str
    name: str
    full_name: str


class LeagueResponse(ApiModel):
    """GET /sports/{sport}/{league}"""

    success: bool = True
    timestamp: str
    sport_type: str
    league: LeagueInfo
    events: list[SportEventModel]


class ErrorResponse(ApiModel):
    success: bool = False
    error: str
