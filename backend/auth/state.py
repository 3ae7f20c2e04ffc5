# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
SessionState – the observable holder of the current session.

Exactly one instance exists per resolver; consumers receive it (or the
resolver) explicitly and either read :attr:`snapshot` per use or register a
listener.

Stale completions
-----------------
Every resolution captures :attr:`epoch` before its first await.  ``clear()``
(logout) advances the epoch, so a login that was in flight when the user
logged out cannot bring the session back: its ``apply`` is rejected.
The resolver ignores identity notifications raised by its own sign-ins, so
such a login is judged only by the epoch it started in.
Between two clears, writes are last-writer-wins in arrival order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from core.logger import logger
from models.user import User


class SessionSource(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


@dataclass(frozen=True)
class SessionSnapshot:
    user: Optional[User]
    loading: bool
    source: Optional[SessionSource]


Listener = Callable[[SessionSnapshot], None]


class SessionState:
    def __init__(self):
        self._user: Optional[User] = None
        self._source: Optional[SessionSource] = None
        self._loading = True
        self._epoch = 0
        self._listeners: list[Listener] = []

    # -- reads ----------------------------------------------------------------

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(user=self._user, loading=self._loading, source=self._source)

    # -- writes ---------------------------------------------------------------

    def apply(self, user: Optional[User], source: Optional[SessionSource], epoch: int) -> bool:
        """
        Make *user* the current session if *epoch* is still current.
        Returns False (and changes nothing) for a stale completion.
        """
        if epoch != self._epoch:
            logger.info("Discarding stale session update (epoch %d, current %d)", epoch, self._epoch)
            return False
        self._user = user
        self._source = source if user is not None else None
        self._notify()
        return True

    def clear(self) -> None:
        """Drop the session and invalidate every in-flight resolution."""
        self._epoch += 1
        self._user = None
        self._source = None
        self._notify()

    def finish_loading(self) -> None:
        if self._loading:
            self._loading = False
            self._notify()

    # -- observers ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot
        for listener in list(self._listeners):
            listener(snapshot)
