# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Durable local storage – a small synchronous key/value API over the
``local_storage`` table.

Reads and writes are short single-row transactions; callers on the event
loop use it directly.
"""

from typing import Optional

from sqlalchemy.orm import sessionmaker

from models.local_entry import LocalEntry

SESSION_KEY = "railway_user"


class LocalStorage:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        db = self._session_factory()
        try:
            entry = db.get(LocalEntry, key)
            return entry.value if entry is not None else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db = self._session_factory()
        try:
            entry = db.get(LocalEntry, key)
            if entry is None:
                db.add(LocalEntry(key=key, value=value))
            else:
                entry.value = value
            db.commit()
        finally:
            db.close()

    def remove(self, key: str) -> None:
        """Delete *key*.  Removing a missing key is a no-op."""
        db = self._session_factory()
        try:
            db.query(LocalEntry).filter(LocalEntry.key == key).delete()
            db.commit()
        finally:
            db.close()
