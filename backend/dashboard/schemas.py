# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Pydantic response models for the dashboard endpoints."""

from typing import List

from pydantic import BaseModel

from models.user import Role


class CardRow(BaseModel):
    title: str
    value: str
    change: str
    change_type: str  # "positive" | "negative" | "neutral"
    icon: str

    model_config = {"from_attributes": True}


class DashboardSummaryResponse(BaseModel):
    role: Role
    cards: List[CardRow]
