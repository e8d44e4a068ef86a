from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from ligas_backend.core.database import get_session
from ligas_backend.models.stats_model import AveragePlayersPerTeam, TeamWins, TeamsPerLeague
from ligas_backend.services import stats_service

router = APIRouter()


@router.get("/top-wins", response_model=List[TeamWins])
def get_top_wins(session: Session = Depends(get_session)):
    """Teams ordered by wins, most first."""
    return stats_service.top_wins(session)


@router.get("/teams-per-league", response_model=List[TeamsPerLeague])
def get_teams_per_league(session: Session = Depends(get_session)):
    return stats_service.teams_per_league(session)


@router.get("/average-players-per-team", response_model=AveragePlayersPerTeam)
def get_average_players_per_team(session: Session = Depends(get_session)):
    return stats_service.average_players_per_team(session)
