# coach_model.py
# Defines the Coach table and its request/response schemas.

from typing import Optional
from sqlmodel import SQLModel, Field
from pydantic import BaseModel, EmailStr

from ligas_backend.models.common import NameStr, PhoneStr


class Coach(SQLModel, table=True):
    """Database model for coaches. A coach leads at most one team."""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=140)
    email: Optional[str] = Field(default=None, max_length=120)
    phone: Optional[str] = Field(default=None, max_length=30)


class CoachCreate(BaseModel):
    """Request body for creating or updating a coach."""
    name: NameStr
    email: Optional[EmailStr] = None
    phone: Optional[PhoneStr] = None


class CoachRead(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True
