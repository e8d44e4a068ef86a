# resolver.py
# Turns foreign identifiers into rows before anything is written.
# Every mutation path resolves its references here first, so a missing
# reference fails the request before any partial write happens.

from typing import Optional, Type, TypeVar
from sqlmodel import Session, SQLModel

from ligas_backend.core.exceptions import NotFound
from ligas_backend.models.league_model import League
from ligas_backend.models.team_model import Team
from ligas_backend.models.coach_model import Coach
from ligas_backend.models.player_model import Player
from ligas_backend.models.match_model import Match

ModelT = TypeVar("ModelT", bound=SQLModel)

# Kind names used in NotFound messages ("team not found: 42")
ENTITY_KINDS = {
    League: "league",
    Team: "team",
    Coach: "coach",
    Player: "player",
    Match: "match",
}


def kind_of(model: Type[SQLModel]) -> str:
    return ENTITY_KINDS.get(model, model.__name__.lower())


def resolve(session: Session, model: Type[ModelT], entity_id: int) -> ModelT:
    """
    Fetches a row by primary key.

    Raises:
        NotFound: if no row with this id exists.
    """
    entity = session.get(model, entity_id)
    if entity is None:
        raise NotFound(kind_of(model), entity_id)
    return entity


def resolve_optional(session: Session, model: Type[ModelT], entity_id: Optional[int]) -> Optional[ModelT]:
    """Like resolve(), but an absent id (None) resolves to None instead of failing."""
    if entity_id is None:
        return None
    return resolve(session, model, entity_id)
