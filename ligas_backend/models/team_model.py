# team_model.py
# Defines the Team table (with its denormalized wins counter) and API schemas.

from typing import Optional, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship
from pydantic import BaseModel

from ligas_backend.models.common import NameStr, name_or_none

if TYPE_CHECKING:
    from .league_model import League
    from .coach_model import Coach


class Team(SQLModel, table=True):
    """
    Database model for teams.
    - league_id: optional league the team plays in
    - coach_id: optional coach, unique so a coach leads one team at most
    - wins: matches won; only changed by result recording or an explicit reset
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=140)

    league_id: Optional[int] = Field(default=None, foreign_key="league.id", index=True)
    coach_id: Optional[int] = Field(default=None, foreign_key="coach.id", unique=True)

    wins: int = Field(default=0, ge=0)

    # Many-to-one only: deleting a league or coach that is still referenced fails
    league: Optional["League"] = Relationship()
    coach: Optional["Coach"] = Relationship()


class TeamCreate(BaseModel):
    """Request body for creating or updating a team. None clears a reference on update."""
    name: NameStr
    league_id: Optional[int] = None
    coach_id: Optional[int] = None


class TeamRead(BaseModel):
    id: int
    name: str
    league_id: Optional[int] = None
    league_name: Optional[str] = None
    coach_id: Optional[int] = None
    coach_name: Optional[str] = None
    wins: int

    class Config:
        from_attributes = True


def team_to_read(team: Team) -> TeamRead:
    return TeamRead(
        id=team.id,
        name=team.name,
        league_id=team.league_id,
        league_name=name_or_none(team.league),
        coach_id=team.coach_id,
        coach_name=name_or_none(team.coach),
        wins=team.wins,
    )
