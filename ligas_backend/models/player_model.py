# ligas_backend/models/player_model.py
from typing import Optional, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship

from ligas_backend.models.common import NameStr, PositionStr, name_or_none

if TYPE_CHECKING:
    from .team_model import Team


class Player(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=140)
    age: int = Field(ge=1)
    position: Optional[str] = Field(default=None, max_length=80)

    team_id: Optional[int] = Field(default=None, foreign_key="team.id", index=True)
    team: Optional["Team"] = Relationship()


# -------------------------------
# Pydantic schemas for the API
# -------------------------------
from pydantic import BaseModel, Field as PydanticField


class PlayerCreate(BaseModel):
    """Request body for creating or updating a player. team_id=None releases the player."""
    name: NameStr
    age: int = PydanticField(..., ge=1, description="Age in years, at least 1")
    position: Optional[PositionStr] = None
    team_id: Optional[int] = None


class PlayerRead(BaseModel):
    """Schema for returning player details with the team name resolved."""
    id: int
    name: str
    age: int
    position: Optional[str] = None
    team_id: Optional[int] = None
    team_name: Optional[str] = None

    class Config:
        from_attributes = True


def player_to_read(player: Player) -> PlayerRead:
    return PlayerRead(
        id=player.id,
        name=player.name,
        age=player.age,
        position=player.position,
        team_id=player.team_id,
        team_name=name_or_none(player.team),
    )
