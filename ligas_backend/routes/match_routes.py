# match_routes.py
# API routes for scheduling matches and recording their results.

from typing import List, Optional
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from ligas_backend.core.database import get_session
from ligas_backend.models.match_model import MatchCreate, MatchRead, MatchResultRequest, match_to_read
from ligas_backend.services import match_service

router = APIRouter()


@router.get("", response_model=List[MatchRead])
def list_matches(
    league_id: Optional[int] = None,
    team_id: Optional[int] = None,
    finalized: Optional[bool] = None,
    session: Session = Depends(get_session),
):
    """Lists matches by kickoff time. Filters: league, team (home or away), finalized."""
    matches = match_service.list_matches(session, league_id=league_id, team_id=team_id, finalized=finalized)
    return [match_to_read(m) for m in matches]


@router.get("/{match_id}", response_model=MatchRead)
def get_match(match_id: int, session: Session = Depends(get_session)):
    return match_to_read(match_service.get_match(session, match_id))


@router.post("", response_model=MatchRead, status_code=201)
def create_match(data: MatchCreate, session: Session = Depends(get_session)):
    """
    Schedules a match.
    - 400 if home and away are the same team, or a team belongs to another league
    - 404 if a team or the league does not exist
    """
    match = match_service.create_match(
        session,
        scheduled_at=data.scheduled_at,
        home_team_id=data.home_team_id,
        away_team_id=data.away_team_id,
        league_id=data.league_id,
    )
    return match_to_read(match)


@router.put("/{match_id}/result", response_model=MatchRead)
def record_match_result(match_id: int, data: MatchResultRequest, session: Session = Depends(get_session)):
    """
    Records the final score and credits the winner (draws credit nobody).
    - 404 if the match does not exist
    - 409 if the match was already finalized
    """
    match = match_service.record_result(session, match_id, data.home_score, data.away_score)
    return match_to_read(match)


@router.delete("/{match_id}", status_code=204)
def delete_match(match_id: int, session: Session = Depends(get_session)):
    match_service.delete_match(session, match_id)
    return Response(status_code=204)
