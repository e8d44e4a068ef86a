# team_service.py
# CRUD for teams plus the explicit wins reset.
# League and coach references are resolved before the team row is touched.

from typing import List, Optional
from sqlmodel import Session, select

from ligas_backend.core.exceptions import Conflict
from ligas_backend.core.logger import setup_logger
from ligas_backend.models.coach_model import Coach
from ligas_backend.models.league_model import League
from ligas_backend.models.team_model import Team, TeamCreate
from ligas_backend.services import persistence
from ligas_backend.services.resolver import resolve, resolve_optional

logger = setup_logger(__name__)


def list_teams(session: Session) -> List[Team]:
    return list(session.exec(select(Team).order_by(Team.id)).all())


def get_team(session: Session, team_id: int) -> Team:
    return resolve(session, Team, team_id)


def list_teams_by_league(session: Session, league_id: int) -> List[Team]:
    """Teams assigned to a league. The league itself must exist."""
    resolve(session, League, league_id)
    return list(session.exec(select(Team).where(Team.league_id == league_id).order_by(Team.id)).all())


def _ensure_coach_available(session: Session, coach: Optional[Coach], team_id: Optional[int]) -> None:
    """A coach leads one team at most."""
    if coach is None:
        return
    holder = session.exec(select(Team).where(Team.coach_id == coach.id)).first()
    if holder is not None and holder.id != team_id:
        raise Conflict(f"coach {coach.id} already coaches team {holder.id}")


def create_team(session: Session, data: TeamCreate) -> Team:
    """Creates a team with wins=0."""
    league = resolve_optional(session, League, data.league_id)
    coach = resolve_optional(session, Coach, data.coach_id)
    _ensure_coach_available(session, coach, None)

    team = Team(
        name=data.name.strip(),
        league_id=league.id if league else None,
        coach_id=coach.id if coach else None,
        wins=0,
    )
    return persistence.save(session, team)


def update_team(session: Session, team_id: int, data: TeamCreate) -> Team:
    """
    Replaces name, league and coach. A None league_id/coach_id clears the reference.
    The wins counter is never touched here.
    """
    team = resolve(session, Team, team_id)
    league = resolve_optional(session, League, data.league_id)
    coach = resolve_optional(session, Coach, data.coach_id)
    _ensure_coach_available(session, coach, team.id)

    team.name = data.name.strip()
    team.league_id = league.id if league else None
    team.coach_id = coach.id if coach else None
    return persistence.save(session, team)


def reset_wins(session: Session, team_id: int) -> Team:
    """Explicit reset of the wins counter back to 0."""
    team = resolve(session, Team, team_id)
    previous = team.wins
    team.wins = 0
    team = persistence.save(session, team)
    logger.info(f"Reset wins for team {team_id} (was {previous})")
    return team


def delete_team(session: Session, team_id: int) -> None:
    """Deletes a team. Refused (Conflict) while players or matches still point at it."""
    persistence.delete(session, resolve(session, Team, team_id))
