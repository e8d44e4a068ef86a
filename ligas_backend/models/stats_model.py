# stats_model.py
# Response schemas for the read-only statistics projections.

from pydantic import BaseModel


class TeamWins(BaseModel):
    team_id: int
    team_name: str
    wins: int


class TeamsPerLeague(BaseModel):
    league_id: int
    league_name: str
    team_count: int


class AveragePlayersPerTeam(BaseModel):
    average: float
