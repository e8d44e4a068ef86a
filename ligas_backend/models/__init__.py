# ligas_backend/models/__init__.py
# Centralized imports for all database models and schemas

# User
from .user_model import User, UserRegister, UserLogin, TokenResponse

# League
from .league_model import League, LeagueCreate, LeagueRead

# Coach
from .coach_model import Coach, CoachCreate, CoachRead

# Team
from .team_model import Team, TeamCreate, TeamRead, team_to_read

# Player
from .player_model import Player, PlayerCreate, PlayerRead, player_to_read

# Match and results
from .match_model import Match, MatchCreate, MatchResultRequest, MatchRead, match_to_read

# Statistics projections
from .stats_model import TeamWins, TeamsPerLeague, AveragePlayersPerTeam
