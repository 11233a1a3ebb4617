# tennis_league/models.py
"""
Collection schemas for the tennis league.

The records are plain and mutable; nothing here validates scores, team sizes
or references between seasons, divisions, matches and players. Stored field
names are PascalCase and the id lives in ``_id`` as an ObjectId.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

E = TypeVar("E", bound="Entity")


class Collections:
    """Collection names in the league database."""
    PLAYERS = "Players"
    MATCHES = "Matches"
    SEASONS = "Seasons"
    DIVISIONS = "Divisions"
    SCRATCH = "TestCollection"


class Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    @field_validator("*", mode="after")
    @classmethod
    def as_bson_datetime(cls, value: Any) -> Any:
        # BSON dates are naive UTC with millisecond precision.
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc).replace(tzinfo=None)
            value = value.replace(microsecond=value.microsecond // 1000 * 1000)
        return value


class Entity(Record):
    """A record stored in its own collection and keyed by ``_id``."""
    id: str = Field(default="", alias="_id")

    def to_document(self) -> Dict[str, Any]:
        """Returns the document to store; an empty id is left for the store to assign."""
        document = self.model_dump(by_alias=True)
        record_id = document.pop("_id")
        if record_id:
            document["_id"] = ObjectId(record_id) if ObjectId.is_valid(record_id) else record_id
        return document

    @classmethod
    def from_document(cls: Type[E], document: Mapping[str, Any]) -> E:
        data = dict(document)
        if isinstance(data.get("_id"), ObjectId):
            data["_id"] = str(data["_id"])
        return cls.model_validate(data)


# --- Player Collection ---
class Player(Entity):
    name: str = Field(default="", alias="Name")
    phone_number: str = Field(default="", alias="PhoneNumber")


# --- Match Result ---
class MatchResult(Record):
    set1_team1: int = Field(default=0, alias="Set1Team1")
    set1_team2: int = Field(default=0, alias="Set1Team2")
    set2_team1: int = Field(default=0, alias="Set2Team1")
    set2_team2: int = Field(default=0, alias="Set2Team2")
    set3_team1: int = Field(default=0, alias="Set3Team1")
    set3_team2: int = Field(default=0, alias="Set3Team2")


# --- Match Collection ---
class Match(Entity):
    season_id: str = Field(default="", alias="SeasonId")
    division_id: str = Field(default="", alias="DivisionId")
    scheduled_date: datetime = Field(default_factory=lambda: datetime(1, 1, 1), alias="ScheduledDate")
    team1: List[str] = Field(default_factory=list, alias="Team1")  # two player ids
    team2: List[str] = Field(default_factory=list, alias="Team2")  # two player ids
    result: Optional[MatchResult] = Field(default=None, alias="Result")


# --- Season Collection ---
class Season(Entity):
    name: str = Field(default="", alias="Name")
    start_date: datetime = Field(default_factory=lambda: datetime(1, 1, 1), alias="StartDate")
    end_date: datetime = Field(default_factory=lambda: datetime(1, 1, 1), alias="EndDate")
    division_ids: List[str] = Field(default_factory=list, alias="DivisionIds")


# --- Division Collection ---
class Division(Entity):
    season_id: str = Field(default="", alias="SeasonId")
    name: str = Field(default="", alias="Name")
    player_ids: List[str] = Field(default_factory=list, alias="PlayerIds")
    match_ids: List[str] = Field(default_factory=list, alias="MatchIds")


COLLECTION_MODELS: Dict[str, Type[Entity]] = {
    Collections.PLAYERS: Player,
    Collections.MATCHES: Match,
    Collections.SEASONS: Season,
    Collections.DIVISIONS: Division,
}
