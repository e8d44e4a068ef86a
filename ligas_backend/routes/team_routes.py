# team_routes.py
# API routes for teams (CRUD, roster listing, wins reset).

from typing import List
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from ligas_backend.core import config
from ligas_backend.core.database import get_session
from ligas_backend.core.security import require_role
from ligas_backend.models.player_model import PlayerRead, player_to_read
from ligas_backend.models.team_model import TeamCreate, TeamRead, team_to_read
from ligas_backend.services import player_service, team_service

router = APIRouter()


@router.get("", response_model=List[TeamRead])
def list_teams(session: Session = Depends(get_session)):
    return [team_to_read(t) for t in team_service.list_teams(session)]


@router.get("/{team_id}", response_model=TeamRead)
def get_team(team_id: int, session: Session = Depends(get_session)):
    return team_to_read(team_service.get_team(session, team_id))


@router.get("/{team_id}/players", response_model=List[PlayerRead])
def get_team_players(team_id: int, session: Session = Depends(get_session)):
    return [player_to_read(p) for p in player_service.list_players_by_team(session, team_id)]


@router.post("", response_model=TeamRead, status_code=201)
def create_team(data: TeamCreate, session: Session = Depends(get_session)):
    """
    Creates a team with 0 wins.
    league_id and coach_id are optional; both must exist when given (404 otherwise)
    and the coach must not already lead another team (409).
    """
    return team_to_read(team_service.create_team(session, data))


@router.put("/{team_id}", response_model=TeamRead)
def update_team(team_id: int, data: TeamCreate, session: Session = Depends(get_session)):
    return team_to_read(team_service.update_team(session, team_id, data))


@router.post(
    "/{team_id}/reset-wins",
    response_model=TeamRead,
    dependencies=[Depends(require_role(config.ROLE_ADMIN))],
)
def reset_team_wins(team_id: int, session: Session = Depends(get_session)):
    """Admin only. Sets the wins counter back to 0."""
    return team_to_read(team_service.reset_wins(session, team_id))


@router.delete("/{team_id}", status_code=204)
def delete_team(team_id: int, session: Session = Depends(get_session)):
    team_service.delete_team(session, team_id)
    return Response(status_code=204)
