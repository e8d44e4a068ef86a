from typing import List
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from ligas_backend.core.database import get_session
from ligas_backend.models.player_model import PlayerCreate, PlayerRead, player_to_read
from ligas_backend.services import player_service

router = APIRouter()


# ==========================================
# PLAYERS - LIST / DETAIL
# ==========================================
@router.get("", response_model=List[PlayerRead])
def list_players(session: Session = Depends(get_session)):
    return [player_to_read(p) for p in player_service.list_players(session)]


@router.get("/{player_id}", response_model=PlayerRead)
def get_player(player_id: int, session: Session = Depends(get_session)):
    return player_to_read(player_service.get_player(session, player_id))


# ==========================================
# PLAYERS - CREATE / UPDATE / DELETE
# ==========================================
@router.post("", response_model=PlayerRead, status_code=201)
def create_player(data: PlayerCreate, session: Session = Depends(get_session)):
    return player_to_read(player_service.create_player(session, data))


@router.put("/{player_id}", response_model=PlayerRead)
def update_player(player_id: int, data: PlayerCreate, session: Session = Depends(get_session)):
    """Replaces the player. Omitting team_id releases the player from its team."""
    return player_to_read(player_service.update_player(session, player_id, data))


@router.delete("/{player_id}", status_code=204)
def delete_player(player_id: int, session: Session = Depends(get_session)):
    player_service.delete_player(session, player_id)
    return Response(status_code=204)
