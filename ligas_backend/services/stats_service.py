# stats_service.py
# Read-only projections over teams, leagues and players. Nothing here writes.

from typing import List
from sqlalchemy import func
from sqlmodel import Session, select

from ligas_backend.models.league_model import League
from ligas_backend.models.player_model import Player
from ligas_backend.models.stats_model import AveragePlayersPerTeam, TeamWins, TeamsPerLeague
from ligas_backend.models.team_model import Team


# 1) Teams with the most wins
def top_wins(session: Session) -> List[TeamWins]:
    rows = session.exec(
        select(Team.id, Team.name, Team.wins).order_by(Team.wins.desc(), Team.id)
    ).all()
    return [TeamWins(team_id=team_id, team_name=name, wins=wins) for team_id, name, wins in rows]


# 2) Number of teams per league (leagues without teams report 0)
def teams_per_league(session: Session) -> List[TeamsPerLeague]:
    rows = session.exec(
        select(League.id, League.name, func.count(Team.id))
        .join(Team, Team.league_id == League.id, isouter=True)
        .group_by(League.id, League.name)
        .order_by(League.id)
    ).all()
    return [
        TeamsPerLeague(league_id=league_id, league_name=name, team_count=count)
        for league_id, name, count in rows
    ]


# 3) Average roster size (teams without players count as 0)
def average_players_per_team(session: Session) -> AveragePlayersPerTeam:
    rows = session.exec(
        select(Team.id, func.count(Player.id))
        .join(Player, Player.team_id == Team.id, isouter=True)
        .group_by(Team.id)
    ).all()
    if not rows:
        return AveragePlayersPerTeam(average=0.0)

    total = sum(count for _, count in rows)
    return AveragePlayersPerTeam(average=total / len(rows))
