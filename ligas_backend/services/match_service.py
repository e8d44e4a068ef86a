"""
match_service.py
----------------
Match consistency engine: schedules matches between two teams and records
final results.

Rules enforced here:
- A match needs two distinct, existing teams.
- When a league applies to the match (given explicitly, or inherited from the
  home team), neither team may be assigned to a different league. Teams with
  no league are accepted.
- Recording a result is one transaction: scores, finalized flag and the
  winner's wins counter are committed together or not at all.
- A finalized match stays finalized; recording a second result is rejected.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import update, or_
from sqlmodel import Session, select

from ligas_backend.core.exceptions import Conflict, InvalidArgument
from ligas_backend.core.logger import setup_logger
from ligas_backend.models.common import as_utc
from ligas_backend.models.league_model import League
from ligas_backend.models.match_model import MAX_SCORE, Match
from ligas_backend.models.team_model import Team
from ligas_backend.services import persistence
from ligas_backend.services.resolver import resolve, resolve_optional

logger = setup_logger(__name__)


# =========================================
# QUERIES
# =========================================
def list_matches(
    session: Session,
    league_id: Optional[int] = None,
    team_id: Optional[int] = None,
    finalized: Optional[bool] = None,
) -> List[Match]:
    """Lists matches ordered by kickoff, optionally filtered by league, team (home or away) or stage."""
    query = select(Match)
    if league_id is not None:
        query = query.where(Match.league_id == league_id)
    if team_id is not None:
        query = query.where(or_(Match.home_team_id == team_id, Match.away_team_id == team_id))
    if finalized is not None:
        query = query.where(Match.finalized == finalized)
    return list(session.exec(query.order_by(Match.scheduled_at, Match.id)).all())


def get_match(session: Session, match_id: int) -> Match:
    return resolve(session, Match, match_id)


# =========================================
# SCHEDULING
# =========================================
def create_match(
    session: Session,
    scheduled_at: datetime,
    home_team_id: int,
    away_team_id: int,
    league_id: Optional[int] = None,
) -> Match:
    """
    Schedules a new match.

    Steps (order matters for which error is reported):
    1. home and away must differ
    2. both teams must exist
    3. effective league: the given league, else the home team's league, else none
    4. each team with an assigned league must be in the effective league
    5. persist as scheduled (no scores, finalized=False), kickoff stored in UTC

    Raises:
        InvalidArgument: same team twice, or a team from another league.
        NotFound: a referenced team or league does not exist.
    """
    if home_team_id == away_team_id:
        raise InvalidArgument("home and away team cannot be the same team")

    home = resolve(session, Team, home_team_id)
    away = resolve(session, Team, away_team_id)

    league: Optional[League] = resolve_optional(session, League, league_id)
    if league is None and home.league_id is not None:
        league = resolve(session, League, home.league_id)

    if league is not None:
        if home.league_id is not None and home.league_id != league.id:
            raise InvalidArgument(
                f"home team does not belong to the indicated league: team {home.id}, league {league.id}"
            )
        if away.league_id is not None and away.league_id != league.id:
            raise InvalidArgument(
                f"away team does not belong to the indicated league: team {away.id}, league {league.id}"
            )

    match = Match(
        scheduled_at=as_utc(scheduled_at),
        league_id=league.id if league is not None else None,
        home_team_id=home.id,
        away_team_id=away.id,
        finalized=False,
    )
    match = persistence.save(session, match)

    logger.info(
        f"Scheduled match {match.id}: team {home.id} vs team {away.id} "
        f"(league {match.league_id}) at {as_utc(scheduled_at).isoformat()}"
    )
    return match


# =========================================
# RESULT RECORDING
# =========================================
def winner_of(home_team_id: int, away_team_id: int, home_score: int, away_score: int) -> Optional[int]:
    """Id of the strictly higher scoring team, or None for a draw."""
    if home_score > away_score:
        return home_team_id
    if away_score > home_score:
        return away_team_id
    return None


def record_result(session: Session, match_id: int, home_score: int, away_score: int) -> Match:
    """
    Finalizes a match with its score and credits the winner.

    - Draw: no counter changes.
    - Otherwise the strictly higher scoring team gets wins + 1.

    The match row is updated with a compare-and-set on (finalized, row_version)
    and the counter with an in-database increment, both inside one transaction.
    Two callers racing on the same match: one wins, the other gets Conflict.
    Callers finalizing different matches that credit the same team never lose
    an increment.

    Raises:
        InvalidArgument: a score is missing, negative or out of range.
        NotFound: the match does not exist.
        Conflict: the match is already finalized.
    """
    if home_score is None or away_score is None:
        raise InvalidArgument("home_score and away_score are required")
    if home_score < 0 or away_score < 0:
        raise InvalidArgument(f"scores must be non-negative: {home_score}-{away_score}")
    if home_score > MAX_SCORE or away_score > MAX_SCORE:
        raise InvalidArgument(f"scores must not exceed {MAX_SCORE}: {home_score}-{away_score}")

    match = resolve(session, Match, match_id)
    if match.finalized:
        logger.warning(f"Rejected second result for finalized match {match_id}")
        raise Conflict(f"match already finalized: {match_id}")

    seen_version = match.row_version
    winner_id = winner_of(match.home_team_id, match.away_team_id, home_score, away_score)

    try:
        result = session.execute(
            update(Match)
            .where(
                Match.id == match_id,
                Match.finalized == False,  # noqa: E712
                Match.row_version == seen_version,
            )
            .values(
                home_score=home_score,
                away_score=away_score,
                finalized=True,
                row_version=Match.row_version + 1,
            )
        )
        if result.rowcount != 1:
            raise Conflict(f"match already finalized: {match_id}")

        if winner_id is not None:
            session.execute(
                update(Team)
                .where(Team.id == winner_id)
                .values(wins=Team.wins + 1)
            )

        session.commit()
    except Conflict:
        session.rollback()
        logger.warning(f"Concurrent finalization detected for match {match_id}")
        raise
    except Exception:
        session.rollback()
        raise

    session.refresh(match)
    if winner_id is None:
        logger.info(f"Match {match_id} finalized as a draw {home_score}-{away_score}")
    else:
        logger.info(f"Match {match_id} finalized {home_score}-{away_score}, team {winner_id} credited a win")
    return match


# =========================================
# DELETION
# =========================================
def delete_match(session: Session, match_id: int) -> None:
    """Deletes a match. Wins already credited by a finalized match are kept."""
    match = resolve(session, Match, match_id)
    if match.finalized:
        logger.info(f"Deleting finalized match {match_id}; credited wins are kept")
    persistence.delete(session, match)
