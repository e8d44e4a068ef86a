from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from ligas_backend.core.exceptions import Conflict, NotFound
from ligas_backend.models import (
    CoachCreate, LeagueCreate, PlayerCreate, TeamCreate, team_to_read, player_to_read,
)
from ligas_backend.services import (
    coach_service, league_service, match_service, player_service, team_service,
)


# =========================================
# Leagues
# =========================================
def test_league_name_is_trimmed(session):
    league = league_service.create_league(session, LeagueCreate(name="  Liga Sur  ", description="Zona sur"))

    assert league.name == "Liga Sur"
    assert league.description == "Zona sur"


@pytest.mark.parametrize("name", ["", "   ", "A", "x" * 141])
def test_league_name_length_is_validated(name):
    with pytest.raises(ValidationError):
        LeagueCreate(name=name)


def test_league_description_limit():
    with pytest.raises(ValidationError):
        LeagueCreate(name="Liga", description="d" * 401)


def test_update_league(session, make_league):
    league = make_league("Vieja")

    updated = league_service.update_league(session, league.id, LeagueCreate(name="Nueva"))

    assert updated.name == "Nueva"
    assert updated.description is None


def test_delete_league_with_teams_is_conflict(session, make_league, make_team):
    league = make_league()
    make_team("Halcones", league=league)

    with pytest.raises(Conflict):
        league_service.delete_league(session, league.id)

    assert league_service.get_league(session, league.id).id == league.id


def test_delete_empty_league(session, make_league):
    league = make_league()

    league_service.delete_league(session, league.id)

    with pytest.raises(NotFound):
        league_service.get_league(session, league.id)


# =========================================
# Teams
# =========================================
def test_create_team_resolves_references(session, make_league, make_coach):
    league, coach = make_league("Liga Oeste"), make_coach("Marta")

    team = team_service.create_team(session, TeamCreate(name=" Pumas ", league_id=league.id, coach_id=coach.id))
    read = team_to_read(team)

    assert read.name == "Pumas"
    assert read.wins == 0
    assert read.league_name == "Liga Oeste"
    assert read.coach_name == "Marta"


def test_create_team_with_unknown_league_writes_nothing(session):
    with pytest.raises(NotFound) as exc:
        team_service.create_team(session, TeamCreate(name="Pumas", league_id=99))

    assert str(exc.value) == "league not found: 99"
    assert team_service.list_teams(session) == []


def test_coach_leads_one_team_only(session, make_coach, make_team):
    coach = make_coach()
    make_team("Halcones", coach=coach)

    with pytest.raises(Conflict):
        team_service.create_team(session, TeamCreate(name="Lobos", coach_id=coach.id))


def test_update_team_keeps_its_own_coach_and_clears_league(session, make_league, make_coach, make_team):
    league, coach = make_league(), make_coach()
    team = make_team("Halcones", league=league, coach=coach, wins=5)

    updated = team_service.update_team(session, team.id, TeamCreate(name="Halcones FC", coach_id=coach.id))

    assert updated.name == "Halcones FC"
    assert updated.league_id is None
    assert updated.coach_id == coach.id
    assert updated.wins == 5


def test_reset_wins(session, make_team):
    team = make_team("Halcones", wins=7)

    assert team_service.reset_wins(session, team.id).wins == 0


def test_teams_by_league(session, make_league, make_team):
    north, south = make_league("Norte"), make_league("Sur")
    a = make_team("A", league=north)
    make_team("B", league=south)

    assert [t.id for t in team_service.list_teams_by_league(session, north.id)] == [a.id]
    with pytest.raises(NotFound):
        team_service.list_teams_by_league(session, 1234)


def test_delete_team_with_matches_is_conflict(session, make_team):
    home, away = make_team("A"), make_team("B")
    match_service.create_match(session, datetime(2025, 5, 1, tzinfo=timezone.utc), home.id, away.id)

    with pytest.raises(Conflict):
        team_service.delete_team(session, home.id)


# =========================================
# Coaches
# =========================================
def test_coach_crud(session):
    coach = coach_service.create_coach(session, CoachCreate(name="Ana", email="ana@club.mx", phone="555-0101"))
    assert coach.email == "ana@club.mx"

    coach = coach_service.update_coach(session, coach.id, CoachCreate(name="Ana María"))
    assert coach.name == "Ana María"
    assert coach.email is None

    coach_service.delete_coach(session, coach.id)
    assert coach_service.list_coaches(session) == []


def test_coach_email_is_validated():
    with pytest.raises(ValidationError):
        CoachCreate(name="Ana", email="not-an-email")


def test_coach_phone_limit():
    with pytest.raises(ValidationError):
        CoachCreate(name="Ana", phone="5" * 31)


def test_delete_coach_leading_a_team_is_conflict(session, make_coach, make_team):
    coach = make_coach()
    make_team("Halcones", coach=coach)

    with pytest.raises(Conflict):
        coach_service.delete_coach(session, coach.id)


# =========================================
# Players
# =========================================
def test_player_crud_and_roster(session, make_team):
    team = make_team("Halcones")

    player = player_service.create_player(session, PlayerCreate(name="Luis", age=19, position="Portero", team_id=team.id))
    assert player_to_read(player).team_name == "Halcones"
    assert [p.id for p in player_service.list_players_by_team(session, team.id)] == [player.id]

    player = player_service.update_player(session, player.id, PlayerCreate(name="Luis", age=20))
    assert player.team_id is None
    assert player_service.list_players_by_team(session, team.id) == []

    player_service.delete_player(session, player.id)
    with pytest.raises(NotFound):
        player_service.get_player(session, player.id)


@pytest.mark.parametrize("age", [0, -4])
def test_player_age_must_be_positive(age):
    with pytest.raises(ValidationError):
        PlayerCreate(name="Luis", age=age)


def test_player_with_unknown_team_is_not_found(session):
    with pytest.raises(NotFound) as exc:
        player_service.create_player(session, PlayerCreate(name="Luis", age=19, team_id=5))

    assert str(exc.value) == "team not found: 5"
