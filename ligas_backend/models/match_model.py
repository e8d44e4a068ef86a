# match_model.py
# Defines the Match model (fixture between two teams and its final result)

from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import CheckConstraint, Column, DateTime
from sqlmodel import SQLModel, Field, Relationship
from pydantic import BaseModel, Field as PydanticField, field_validator

from ligas_backend.models.common import as_utc, name_or_none

# Largest score a 32-bit INTEGER column holds
MAX_SCORE = 2**31 - 1

if TYPE_CHECKING:
    from .league_model import League
    from .team_model import Team


class Match(SQLModel, table=True):
    """
    Represents a scheduled match between two distinct teams.
    Stage is one-way: scheduled (finalized=False, no scores) -> finalized.
    row_version is bumped on every write so concurrent finalizations can be detected.
    """
    __table_args__ = (
        CheckConstraint("home_team_id <> away_team_id", name="ck_match_distinct_teams"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    # Stored in UTC
    scheduled_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))

    # Foreign keys
    league_id: Optional[int] = Field(default=None, foreign_key="league.id", index=True)
    home_team_id: int = Field(foreign_key="team.id", index=True)
    away_team_id: int = Field(foreign_key="team.id", index=True)

    # Results (populated when the result is recorded)
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    finalized: bool = False

    row_version: int = Field(default=0)

    league: Optional["League"] = Relationship()
    home_team: Optional["Team"] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[Match.home_team_id]"}
    )
    away_team: Optional["Team"] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[Match.away_team_id]"}
    )


# -------------------------------
# Pydantic schemas for the API
# -------------------------------
class MatchCreate(BaseModel):
    """Request body for scheduling a match. league_id is optional (defaults to the home team's league)."""
    scheduled_at: datetime
    league_id: Optional[int] = None
    home_team_id: int
    away_team_id: int

    @field_validator("scheduled_at")
    @classmethod
    def kickoff_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class MatchResultRequest(BaseModel):
    """Request body for recording the final score."""
    home_score: int = PydanticField(..., ge=0, le=MAX_SCORE)
    away_score: int = PydanticField(..., ge=0, le=MAX_SCORE)


class MatchRead(BaseModel):
    id: int
    scheduled_at: datetime
    league_id: Optional[int] = None
    league_name: Optional[str] = None
    home_team_id: int
    home_team_name: Optional[str] = None
    away_team_id: int
    away_team_name: Optional[str] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    finalized: bool
    row_version: int

    class Config:
        from_attributes = True


def match_to_read(match: Match) -> MatchRead:
    return MatchRead(
        id=match.id,
        scheduled_at=as_utc(match.scheduled_at),
        league_id=match.league_id,
        league_name=name_or_none(match.league),
        home_team_id=match.home_team_id,
        home_team_name=name_or_none(match.home_team),
        away_team_id=match.away_team_id,
        away_team_name=name_or_none(match.away_team),
        home_score=match.home_score,
        away_score=match.away_score,
        finalized=match.finalized,
        row_version=match.row_version,
    )
