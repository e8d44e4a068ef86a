from typing import List
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from ligas_backend.core import config
from ligas_backend.core.database import get_session
from ligas_backend.core.security import require_role
from ligas_backend.models.league_model import LeagueCreate, LeagueRead
from ligas_backend.models.team_model import TeamRead, team_to_read
from ligas_backend.services import league_service, team_service

router = APIRouter()


# =========================================
# LIST / GET LEAGUES
# =========================================
@router.get("", response_model=List[LeagueRead])
def list_leagues(session: Session = Depends(get_session)):
    return league_service.list_leagues(session)


@router.get("/{league_id}", response_model=LeagueRead)
def get_league(league_id: int, session: Session = Depends(get_session)):
    return league_service.get_league(session, league_id)


@router.get("/{league_id}/teams", response_model=List[TeamRead])
def get_league_teams(league_id: int, session: Session = Depends(get_session)):
    """Teams currently assigned to the league."""
    return [team_to_read(t) for t in team_service.list_teams_by_league(session, league_id)]


# =========================================
# CREATE / UPDATE / DELETE
# =========================================
@router.post("", response_model=LeagueRead, status_code=201)
def create_league(data: LeagueCreate, session: Session = Depends(get_session)):
    return league_service.create_league(session, data)


@router.put("/{league_id}", response_model=LeagueRead)
def update_league(league_id: int, data: LeagueCreate, session: Session = Depends(get_session)):
    return league_service.update_league(session, league_id, data)


@router.delete(
    "/{league_id}",
    status_code=204,
    dependencies=[Depends(require_role(config.ROLE_ADMIN))],
)
def delete_league(league_id: int, session: Session = Depends(get_session)):
    """Admin only. Refused with 409 while teams or matches still reference the league."""
    league_service.delete_league(session, league_id)
    return Response(status_code=204)
