"""
Tests for the session resolver with local authentication only
"""

import pytest

from auth.resolver import SessionResolver, read_session_record
from auth.state import SessionSource
from auth.storage import SESSION_KEY
from core.exceptions import CorruptSession, InvalidCredentials
from models.user import Role
from samples import FIXED_NOW, SEEDS, make_user


@pytest.fixture
def resolver(storage, identity, profiles, clock):
    # Remote fakes are wired in to prove they are never touched
    return SessionResolver(storage, use_local_auth=True, identity=identity, profiles=profiles, clock=clock)


class TestLocalLogin:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password,role", SEEDS)
    async def test_every_seed_logs_in(self, resolver, storage, email, password, role):
        user = await resolver.login(email, password)

        assert user.role == role
        assert user.id == f"demo_{role.value}"
        assert user.created_at == FIXED_NOW
        assert user.last_login == FIXED_NOW
        assert resolver.current == user
        assert resolver.snapshot().source == SessionSource.LOCAL
        assert read_session_record(storage.get(SESSION_KEY)) == user

    @pytest.mark.asyncio
    async def test_wrong_password(self, resolver, storage):
        with pytest.raises(InvalidCredentials):
            await resolver.login("admin@railway.gov.in", "wrong")
        assert resolver.current is None
        assert storage.get(SESSION_KEY) is None

    @pytest.mark.asyncio
    async def test_failed_login_keeps_existing_session(self, resolver):
        first = await resolver.login("den@railway.gov.in", "den123")
        with pytest.raises(InvalidCredentials):
            await resolver.login("den@railway.gov.in", "DEN123")
        assert resolver.current == first

    @pytest.mark.asyncio
    async def test_no_remote_calls(self, resolver, identity, profiles):
        await resolver.start()
        await resolver.login("drm@railway.gov.in", "drm123")
        await resolver.sign_up(name="N", email="n@x.in", password="pw", role=Role.DEN)
        await resolver.logout()
        assert identity.calls == []
        assert profiles.calls == []


class TestStartup:
    @pytest.mark.asyncio
    async def test_empty_storage(self, resolver):
        assert resolver.loading is True
        await resolver.start()
        assert resolver.current is None
        assert resolver.loading is False

    @pytest.mark.asyncio
    async def test_round_trip_across_restart(self, storage, clock):
        first = SessionResolver(storage, use_local_auth=True, clock=clock)
        user = await first.login("manufacturer@railway.gov.in", "mfg123")

        restarted = SessionResolver(storage, use_local_auth=True, clock=clock)
        await restarted.start()
        assert restarted.current == user
        assert restarted.snapshot().source == SessionSource.LOCAL

    @pytest.mark.asyncio
    async def test_corrupt_record_is_discarded(self, resolver, storage):
        storage.set(SESSION_KEY, "{not json")
        await resolver.start()
        assert resolver.current is None
        assert storage.get(SESSION_KEY) is None

    @pytest.mark.asyncio
    async def test_record_with_unknown_role_is_discarded(self, resolver, storage):
        record = make_user().to_record().replace('"inspector"', '"superuser"')
        storage.set(SESSION_KEY, record)
        await resolver.start()
        assert resolver.current is None
        assert storage.get(SESSION_KEY) is None

    def test_read_session_record_raises_corrupt(self):
        with pytest.raises(CorruptSession):
            read_session_record('{"id": "x"}')

    def test_record_uses_camel_case_fields(self):
        record = make_user(division="Mumbai").to_record()
        assert '"createdAt"' in record
        assert '"lastLogin"' in record
        assert '"division":"Mumbai"' in record


class TestLogout:
    @pytest.mark.asyncio
    async def test_logout_clears_session_and_storage(self, resolver, storage):
        await resolver.login("admin@railway.gov.in", "admin123")
        await resolver.logout()
        assert resolver.current is None
        assert storage.get(SESSION_KEY) is None

    @pytest.mark.asyncio
    async def test_logout_twice(self, resolver, storage):
        await resolver.login("admin@railway.gov.in", "admin123")
        await resolver.logout()
        await resolver.logout()
        assert resolver.current is None
        assert storage.get(SESSION_KEY) is None


class TestLocalSignUp:
    @pytest.mark.asyncio
    async def test_creates_local_account(self, resolver, storage):
        user = await resolver.sign_up(
            name="Field Engineer",
            email="fe@railway.gov.in",
            password="secret",
            role=Role.DEN,
            division="Pune",
            section="S-4",
        )

        assert user.id == f"demo_{int(FIXED_NOW.timestamp() * 1000)}"
        assert user.role == Role.DEN
        assert (user.division, user.section) == ("Pune", "S-4")
        assert user.created_at == user.last_login == FIXED_NOW
        assert resolver.current == user
        assert read_session_record(storage.get(SESSION_KEY)) == user
