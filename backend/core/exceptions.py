# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Domain errors.

Only :class:`InvalidCredentials` ever reaches a caller of the session
resolver.  Remote errors are caught where they happen and turned into a
fallback; :class:`CorruptSession` is handled by discarding the record.
"""


class InvalidCredentials(Exception):
    """No demo account (or remote account) matches the email/password."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class RemoteError(Exception):
    """Base class for failures of the remote identity provider / profile store."""


class RemoteUnavailable(RemoteError):
    """The remote service could not be reached, timed out, answered 5xx, or
    is not configured."""


class RemoteRejected(RemoteError):
    """The remote service answered but refused the request (bad password,
    email already in use, permission denied …)."""

    def __init__(self, reason: str, status_code: int | None = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class CorruptSession(Exception):
    """The persisted session record could not be parsed into a User."""
