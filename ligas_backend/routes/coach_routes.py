from typing import List
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from ligas_backend.core.database import get_session
from ligas_backend.models.coach_model import CoachCreate, CoachRead
from ligas_backend.services import coach_service

router = APIRouter()


@router.get("", response_model=List[CoachRead])
def list_coaches(session: Session = Depends(get_session)):
    return coach_service.list_coaches(session)


@router.get("/{coach_id}", response_model=CoachRead)
def get_coach(coach_id: int, session: Session = Depends(get_session)):
    return coach_service.get_coach(session, coach_id)


@router.post("", response_model=CoachRead, status_code=201)
def create_coach(data: CoachCreate, session: Session = Depends(get_session)):
    return coach_service.create_coach(session, data)


@router.put("/{coach_id}", response_model=CoachRead)
def update_coach(coach_id: int, data: CoachCreate, session: Session = Depends(get_session)):
    return coach_service.update_coach(session, coach_id, data)


@router.delete("/{coach_id}", status_code=204)
def delete_coach(coach_id: int, session: Session = Depends(get_session)):
    coach_service.delete_coach(session, coach_id)
    return Response(status_code=204)
