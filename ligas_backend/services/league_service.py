# league_service.py
# CRUD for leagues.

from typing import List
from sqlmodel import Session, select

from ligas_backend.models.league_model import League, LeagueCreate
from ligas_backend.services import persistence
from ligas_backend.services.resolver import resolve


def list_leagues(session: Session) -> List[League]:
    return list(session.exec(select(League).order_by(League.id)).all())


def get_league(session: Session, league_id: int) -> League:
    return resolve(session, League, league_id)


def create_league(session: Session, data: LeagueCreate) -> League:
    league = League(name=data.name.strip(), description=data.description)
    return persistence.save(session, league)


def update_league(session: Session, league_id: int, data: LeagueCreate) -> League:
    league = resolve(session, League, league_id)
    league.name = data.name.strip()
    league.description = data.description
    return persistence.save(session, league)


def delete_league(session: Session, league_id: int) -> None:
    """Deletes a league. Refused (Conflict) while teams or matches still point at it."""
    persistence.delete(session, resolve(session, League, league_id))
