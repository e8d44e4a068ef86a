# coach_service.py
# CRUD for coaches.

from typing import List
from sqlmodel import Session, select

from ligas_backend.models.coach_model import Coach, CoachCreate
from ligas_backend.services import persistence
from ligas_backend.services.resolver import resolve


def list_coaches(session: Session) -> List[Coach]:
    return list(session.exec(select(Coach).order_by(Coach.id)).all())


def get_coach(session: Session, coach_id: int) -> Coach:
    return resolve(session, Coach, coach_id)


def create_coach(session: Session, data: CoachCreate) -> Coach:
    coach = Coach(
        name=data.name.strip(),
        email=str(data.email) if data.email else None,
        phone=data.phone,
    )
    return persistence.save(session, coach)


def update_coach(session: Session, coach_id: int, data: CoachCreate) -> Coach:
    coach = resolve(session, Coach, coach_id)
    coach.name = data.name.strip()
    coach.email = str(data.email) if data.email else None
    coach.phone = data.phone
    return persistence.save(session, coach)


def delete_coach(session: Session, coach_id: int) -> None:
    persistence.delete(session, resolve(session, Coach, coach_id))
