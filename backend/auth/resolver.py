# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Session resolver – decides who the current user is and how that was
established.

Resolution order
----------------
* ``use_local_auth=True``: demo credential table + persisted record only.
  No remote call is ever made.
* ``use_local_auth=False``: remote identity provider first.  Any remote
  failure is logged where it happens and the demo credential table /
  persisted record is used instead; the caller never sees a remote error.

Only ``InvalidCredentials`` (login, after the local fallback also failed)
propagates.  ``logout()`` and ``sign_up()`` never raise on remote failure.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional

from pydantic import ValidationError

from auth.credentials import find_seed, match_credentials
from auth.outcome import Outcome
from auth.remote import (
    SERVER_TIMESTAMP,
    USERS_COLLECTION,
    IdentityProvider,
    ProfileStore,
    RemoteIdentity,
)
from auth.state import Listener, SessionSnapshot, SessionSource, SessionState
from auth.storage import SESSION_KEY, LocalStorage
from core.exceptions import CorruptSession, InvalidCredentials, RemoteError, RemoteUnavailable
from core.logger import logger
from models.user import DEFAULT_NAME, DEFAULT_ROLE, Role, User


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def read_session_record(raw: str) -> User:
    """Parse a persisted session record; raises CorruptSession."""
    try:
        return User.from_record(raw)
    except ValidationError as exc:
        raise CorruptSession(str(exc)) from exc


@dataclass(frozen=True)
class Resolution:
    user: User
    source: SessionSource


class SessionResolver:
    def __init__(
        self,
        storage: LocalStorage,
        use_local_auth: bool,
        identity: Optional[IdentityProvider] = None,
        profiles: Optional[ProfileStore] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._storage = storage
        self._use_local_auth = use_local_auth
        self._identity = identity
        self._profiles = profiles
        self._clock = clock
        self._state = SessionState()
        self._unsubscribe: Optional[Callable[[], None]] = None
        # remote sign-ins / sign-ups started by login() or sign_up() and not yet returned
        self._own_sign_ins = 0

    # -- consumer contract ------------------------------------------------------

    @property
    def use_local_auth(self) -> bool:
        return self._use_local_auth

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current(self) -> Optional[User]:
        return self._state.user

    @property
    def loading(self) -> bool:
        return self._state.loading

    def snapshot(self) -> SessionSnapshot:
        return self._state.snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._state.subscribe(listener)

    # -- startup ------------------------------------------------------------------

    async def start(self) -> None:
        """Resolve the initial session.  Call once per process."""
        if self._use_local_auth:
            self._restore_local(self._state.epoch)
            self._state.finish_loading()
            return

        try:
            if self._identity is None:
                raise RemoteUnavailable("no remote identity provider configured")
            self._unsubscribe = await self._identity.subscribe(self._on_identity_changed)
        except RemoteError as exc:
            logger.warning("Remote identity provider unavailable, using local session: %s", exc)
            self._restore_local(self._state.epoch)
        self._state.finish_loading()

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def _on_identity_changed(self, identity: Optional[RemoteIdentity]) -> None:
        epoch = self._state.epoch
        if identity is not None and self._own_sign_ins:
            # login() / sign_up() resolve this identity themselves, under the
            # epoch they started in
            logger.debug("Identity %s comes from an in-progress sign-in, skipped", identity.uid)
        elif identity is None:
            self._restore_local(epoch)
        else:
            try:
                profile = await self._get_profile(identity.uid)
            except RemoteError as exc:
                logger.error("Error fetching profile for %s: %s", identity.uid, exc)
            else:
                if profile is None:
                    self._restore_local(epoch)
                else:
                    self._state.apply(self._user_from_profile(identity, profile), SessionSource.REMOTE, epoch)
        self._state.finish_loading()

    def _restore_local(self, epoch: int) -> None:
        raw = self._storage.get(SESSION_KEY)
        if raw is None:
            return
        try:
            user = read_session_record(raw)
        except CorruptSession as exc:
            logger.error("Discarding corrupt session record: %s", exc)
            self._storage.remove(SESSION_KEY)
            return
        self._state.apply(user, SessionSource.LOCAL, epoch)

    # -- login ------------------------------------------------------------------

    async def login(self, email: str, password: str) -> User:
        epoch = self._state.epoch
        if self._use_local_auth:
            outcome = self._login_local(email, password)
        else:
            outcome = (await self._login_remote(email, password)).or_else(
                lambda: self._login_local(email, password)
            )

        if not outcome.ok:
            logger.info("Login rejected for %s", email)
            raise InvalidCredentials()

        await self._establish(outcome.value, epoch)
        logger.info("User %s signed in (%s)", outcome.value.user.id, outcome.value.source.value)
        return outcome.value.user

    def _login_local(self, email: str, password: str) -> Outcome[Resolution]:
        account = match_credentials(email, password)
        if account is None:
            return Outcome.failure("no matching demo account")
        now = self._clock()
        user = User(
            id=f"demo_{account.role.value}",
            email=account.email,
            name=account.name,
            role=account.role,
            created_at=now,
            last_login=now,
        )
        return Outcome.success(Resolution(user, SessionSource.LOCAL))

    async def _login_remote(self, email: str, password: str) -> Outcome[Resolution]:
        try:
            if self._identity is None:
                raise RemoteUnavailable("no remote identity provider configured")
            identity = await self._remote_sign_in(self._identity.sign_in, email, password)
            profile = await self._get_profile(identity.uid)
            if profile is None:
                profile = self._seed_profile(email)
                await self._set_profile(identity.uid, profile)
        except RemoteError as exc:
            logger.warning("Remote sign-in failed for %s, falling back to demo credentials: %s", email, exc)
            return Outcome.failure(str(exc))
        return Outcome.success(Resolution(self._user_from_profile(identity, profile), SessionSource.REMOTE))

    def _seed_profile(self, email: str) -> dict[str, Any]:
        seed = find_seed(email)
        now = self._clock()
        return {
            "name": seed.name if seed else DEFAULT_NAME,
            "role": (seed.role if seed else DEFAULT_ROLE).value,
            "email": email,
            "createdAt": now,
            "lastLogin": now,
        }

    # -- sign-up ----------------------------------------------------------------

    async def sign_up(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: Role,
        division: Optional[str] = None,
        section: Optional[str] = None,
    ) -> User:
        """Create an account remotely, or locally when that is not possible."""
        epoch = self._state.epoch
        fields = {"name": name, "email": email, "role": Role(role), "division": division, "section": section}
        if self._use_local_auth:
            outcome = self._sign_up_local(fields)
        else:
            outcome = (await self._sign_up_remote(fields, password)).or_else(
                lambda: self._sign_up_local(fields)
            )

        await self._establish(outcome.value, epoch)
        logger.info("User %s signed up (%s)", outcome.value.user.id, outcome.value.source.value)
        return outcome.value.user

    def _sign_up_local(self, fields: dict[str, Any]) -> Outcome[Resolution]:
        now = self._clock()
        user = User(id=f"demo_{int(now.timestamp() * 1000)}", created_at=now, last_login=now, **fields)
        return Outcome.success(Resolution(user, SessionSource.LOCAL))

    async def _sign_up_remote(self, fields: dict[str, Any], password: str) -> Outcome[Resolution]:
        try:
            if self._identity is None:
                raise RemoteUnavailable("no remote identity provider configured")
            identity = await self._remote_sign_in(self._identity.sign_up, fields["email"], password)
            await self._set_profile(
                identity.uid,
                {
                    **fields,
                    "role": fields["role"].value,
                    "createdAt": SERVER_TIMESTAMP,
                    "lastLogin": SERVER_TIMESTAMP,
                },
            )
        except RemoteError as exc:
            logger.warning("Remote sign-up failed for %s, creating local account: %s", fields["email"], exc)
            return Outcome.failure(str(exc))
        now = self._clock()
        user = User(id=identity.uid, created_at=now, last_login=now, **fields)
        return Outcome.success(Resolution(user, SessionSource.REMOTE))

    # -- logout -----------------------------------------------------------------

    async def logout(self) -> None:
        """
        Sign out everywhere.  The local session and record are dropped first,
        so the identity-cleared notification finds nothing to restore.
        """
        self._state.clear()
        self._storage.remove(SESSION_KEY)
        if self._use_local_auth or self._identity is None:
            return
        try:
            await self._identity.sign_out()
        except RemoteError as exc:
            logger.error("Remote sign-out failed: %s", exc)

    # -- helpers ----------------------------------------------------------------

    async def _remote_sign_in(
        self,
        call: Callable[[str, str], Awaitable[RemoteIdentity]],
        email: str,
        password: str,
    ) -> RemoteIdentity:
        self._own_sign_ins += 1
        try:
            return await call(email, password)
        finally:
            self._own_sign_ins -= 1

    async def _establish(self, resolution: Resolution, epoch: int) -> None:
        """
        Apply and persist *resolution* unless a logout made it stale.  A stale
        remote resolution also signs the provider out again, unless a newer
        session has been established meanwhile.
        """
        if self._state.apply(resolution.user, resolution.source, epoch):
            self._storage.set(SESSION_KEY, resolution.user.to_record())
            return
        if resolution.source != SessionSource.REMOTE or self._state.user is not None:
            return
        try:
            await self._identity.sign_out()
        except RemoteError as exc:
            logger.error("Could not undo stale remote sign-in for %s: %s", resolution.user.id, exc)

    async def _get_profile(self, uid: str) -> Optional[dict[str, Any]]:
        if self._profiles is None:
            raise RemoteUnavailable("no remote profile store configured")
        return await self._profiles.get_document(USERS_COLLECTION, uid)

    async def _set_profile(self, uid: str, fields: dict[str, Any]) -> None:
        if self._profiles is None:
            raise RemoteUnavailable("no remote profile store configured")
        await self._profiles.set_document(USERS_COLLECTION, uid, fields)

    def _user_from_profile(self, identity: RemoteIdentity, profile: dict[str, Any]) -> User:
        raw_role = profile.get("role") or DEFAULT_ROLE.value
        try:
            role = Role(raw_role)
        except ValueError:
            logger.warning("Profile %s has unknown role %r, using %s", identity.uid, raw_role, DEFAULT_ROLE.value)
            role = DEFAULT_ROLE

        now = self._clock()
        created_at = profile.get("createdAt")
        return User(
            id=identity.uid,
            email=identity.email or profile.get("email") or "",
            name=profile.get("name") or DEFAULT_NAME,
            role=role,
            division=profile.get("division"),
            section=profile.get("section"),
            created_at=created_at if isinstance(created_at, datetime) else now,
            last_login=now,
        )
