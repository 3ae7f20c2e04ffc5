# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Contracts of the remote identity provider and the remote profile store.

Implementations must raise :class:`core.exceptions.RemoteError` subclasses
for every failure so the resolver can fall back without inspecting
transport details.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Protocol

USERS_COLLECTION = "users"


@dataclass(frozen=True)
class RemoteIdentity:
    uid: str
    email: str
    id_token: str = ""


class _ServerTimestamp:
    """Sentinel field value: the store fills in its own request time."""

    def __repr__(self):
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()

IdentityListener = Callable[[Optional[RemoteIdentity]], Awaitable[None]]


class IdentityProvider(Protocol):
    async def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        """Register *listener*, call it once with the current identity, and
        return an unsubscribe callable."""

    async def sign_in(self, email: str, password: str) -> RemoteIdentity: ...

    async def sign_up(self, email: str, password: str) -> RemoteIdentity: ...

    async def sign_out(self) -> None: ...


class ProfileStore(Protocol):
    async def get_document(self, collection: str, key: str) -> Optional[dict[str, Any]]:
        """Return the document fields, or None when the document is absent."""

    async def set_document(self, collection: str, key: str, fields: dict[str, Any]) -> None:
        """Create or replace the document.  Values may be SERVER_TIMESTAMP."""
