# persistence.py
# Commit helpers shared by the CRUD services.
# Store-level integrity failures (a row still referenced, a unique column
# taken) are rolled back and reported as Conflict.

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel

from ligas_backend.core.exceptions import Conflict
from ligas_backend.core.logger import setup_logger
from ligas_backend.services.resolver import kind_of

logger = setup_logger(__name__)


def save(session: Session, entity: SQLModel) -> SQLModel:
    """Adds/updates the entity, commits and refreshes it."""
    session.add(entity)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.warning(f"Integrity error saving {kind_of(type(entity))}: {exc.orig}")
        raise Conflict(f"{kind_of(type(entity))} violates a store constraint: {exc.orig}") from exc
    session.refresh(entity)
    return entity


def delete(session: Session, entity: SQLModel) -> None:
    """Deletes the entity. Fails with Conflict while other rows still reference it."""
    kind = kind_of(type(entity))
    entity_id = getattr(entity, "id", None)
    session.delete(entity)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.warning(f"Refused to delete {kind} {entity_id}: still referenced")
        raise Conflict(f"{kind} is still referenced and cannot be deleted: {entity_id}") from exc
    logger.info(f"Deleted {kind} {entity_id}")
