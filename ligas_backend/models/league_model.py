# league_model.py
# This file defines the League model for Ligas API.

from typing import Optional
from sqlmodel import SQLModel, Field
from pydantic import BaseModel

from ligas_backend.models.common import NameStr, DescriptionStr


class League(SQLModel, table=True):
    """Database model representing a league (a named grouping of teams)."""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=140)
    description: Optional[str] = Field(default=None, max_length=400)


# -------------------------------
# Pydantic schemas for the API
# -------------------------------
class LeagueCreate(BaseModel):
    """Request body for creating or updating a league."""
    name: NameStr
    description: Optional[DescriptionStr] = None


class LeagueRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True
