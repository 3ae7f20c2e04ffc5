# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""LocalEntry ORM model – one row per key of the durable local storage."""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from database import Base


class LocalEntry(Base):
    __tablename__ = "local_storage"

    key = Column(String(128), primary_key=True)
    # Serialized payload, e.g. the JSON session record under "railway_user"
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
