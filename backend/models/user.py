# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
User domain model and the closed Role enum.

A User is never stored as an ORM row: it lives in the remote profile store
or, for the active session, as a JSON record in local storage.  The JSON
field names (camelCase) are part of the storage format.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Role(str, Enum):
    ADMIN = "admin"
    DRM = "drm"
    SR_DEN = "sr_den"
    DEN = "den"
    INSPECTOR = "inspector"
    MANUFACTURER = "manufacturer"


DEFAULT_ROLE = Role.INSPECTOR
DEFAULT_NAME = "User"


class User(BaseModel):
    id: str
    email: str
    name: str
    role: Role
    division: Optional[str] = None
    section: Optional[str] = None
    created_at: datetime = Field(alias="createdAt")
    last_login: Optional[datetime] = Field(default=None, alias="lastLogin")

    model_config = {"populate_by_name": True, "frozen": True}

    def to_record(self) -> str:
        """Serialize to the JSON session record (ISO-8601 dates)."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_record(cls, raw: str) -> "User":
        """Parse a JSON session record.  Raises pydantic.ValidationError."""
        return cls.model_validate_json(raw)
