# user_model.py
# This file defines the User model (SQLModel) and related Pydantic request schemas.

from typing import Optional, List
from sqlmodel import SQLModel, Field, JSON, Column
from pydantic import BaseModel, EmailStr, Field as PydanticField


# Pydantic request models (used for API input)
class UserRegister(BaseModel):
    """Request model for registering a new user."""
    email: EmailStr
    password: str = PydanticField(..., min_length=8, max_length=72)
    name: str = PydanticField(..., min_length=2, max_length=120)


class UserLogin(BaseModel):
    """Request model for logging in an existing user."""
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    token: str


# SQLModel table for User
class User(SQLModel, table=True):
    """Database model for API users. Roles are stored as a JSON list (e.g. ["ROLE_USER"])."""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=120, unique=True, index=True)
    password_hash: str
    name: str = Field(max_length=120)
    roles: List[str] = Field(default_factory=list, sa_column=Column(JSON))
