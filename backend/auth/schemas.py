# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the auth endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from models.user import Role


# -- Requests --------------------------------------------------------------


class LoginRequest(BaseModel):
    email: str
    password: str


class SignUpRequest(BaseModel):
    name: str
    email: str
    password: str
    role: Role
    division: Optional[str] = None
    section: Optional[str] = None


# -- Responses -------------------------------------------------------------


class UserInfoResponse(BaseModel):
    id: str
    email: str
    name: str
    role: Role
    division: Optional[str] = None
    section: Optional[str] = None
    created_at: datetime
    last_login: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SessionResponse(BaseModel):
    user: Optional[UserInfoResponse] = None
    loading: bool
    source: Optional[str] = None  # "remote" | "local"
