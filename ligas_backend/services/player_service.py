# player_service.py
# CRUD for players.

from typing import List
from sqlmodel import Session, select

from ligas_backend.models.player_model import Player, PlayerCreate
from ligas_backend.models.team_model import Team
from ligas_backend.services import persistence
from ligas_backend.services.resolver import resolve, resolve_optional


def list_players(session: Session) -> List[Player]:
    return list(session.exec(select(Player).order_by(Player.id)).all())


def get_player(session: Session, player_id: int) -> Player:
    return resolve(session, Player, player_id)


def list_players_by_team(session: Session, team_id: int) -> List[Player]:
    """Roster of a team. The team itself must exist."""
    resolve(session, Team, team_id)
    return list(session.exec(select(Player).where(Player.team_id == team_id).order_by(Player.id)).all())


def create_player(session: Session, data: PlayerCreate) -> Player:
    team = resolve_optional(session, Team, data.team_id)
    player = Player(
        name=data.name.strip(),
        age=data.age,
        position=data.position,
        team_id=team.id if team else None,
    )
    return persistence.save(session, player)


def update_player(session: Session, player_id: int, data: PlayerCreate) -> Player:
    """Replaces all fields. team_id=None releases the player from its team."""
    player = resolve(session, Player, player_id)
    team = resolve_optional(session, Team, data.team_id)

    player.name = data.name.strip()
    player.age = data.age
    player.position = data.position
    player.team_id = team.id if team else None
    return persistence.save(session, player)


def delete_player(session: Session, player_id: int) -> None:
    persistence.delete(session, resolve(session, Player, player_id))
