"""
Shared fixtures: in-memory local storage, fake remote services, fixed clock.
"""

import asyncio
from typing import Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from auth.remote import RemoteIdentity
from auth.storage import LocalStorage
from core.exceptions import RemoteRejected, RemoteUnavailable
from database import init_db
from samples import FIXED_NOW


class FakeIdentityProvider:
    """In-memory stand-in for the Firebase identity provider."""

    def __init__(self):
        self.accounts: dict[str, tuple[str, str]] = {}  # email -> (uid, password)
        self.current: Optional[RemoteIdentity] = None
        self.listeners = []
        self.calls: list[str] = []
        self.unavailable = False
        self.sign_out_fails = False
        self.gate: Optional[asyncio.Event] = None

    def add_account(self, email: str, password: str, uid: str):
        self.accounts[email] = (uid, password)

    async def subscribe(self, listener):
        self.calls.append("subscribe")
        if self.unavailable:
            raise RemoteUnavailable("identity service down")
        self.listeners.append(listener)
        await listener(self.current)
        return lambda: self.listeners.remove(listener)

    async def sign_in(self, email, password):
        self.calls.append("sign_in")
        if self.gate is not None:
            await self.gate.wait()
        if self.unavailable:
            raise RemoteUnavailable("identity service down")
        account = self.accounts.get(email)
        if account is None or account[1] != password:
            raise RemoteRejected("INVALID_LOGIN_CREDENTIALS", 400)
        return await self._signed_in(RemoteIdentity(uid=account[0], email=email, id_token="tok"))

    async def sign_up(self, email, password):
        self.calls.append("sign_up")
        if self.unavailable:
            raise RemoteUnavailable("identity service down")
        if email in self.accounts:
            raise RemoteRejected("EMAIL_EXISTS", 400)
        uid = f"uid-{len(self.accounts) + 1}"
        self.accounts[email] = (uid, password)
        return await self._signed_in(RemoteIdentity(uid=uid, email=email, id_token="tok"))

    async def sign_out(self):
        self.calls.append("sign_out")
        if self.sign_out_fails:
            raise RemoteUnavailable("identity service down")
        self.current = None
        for listener in list(self.listeners):
            await listener(None)

    async def emit(self, identity: Optional[RemoteIdentity]):
        self.current = identity
        for listener in list(self.listeners):
            await listener(identity)

    async def _signed_in(self, identity):
        self.current = identity
        for listener in list(self.listeners):
            await listener(identity)
        return identity


class FakeProfileStore:
    """In-memory stand-in for the Firestore ``users`` collection."""

    def __init__(self):
        self.documents: dict[tuple[str, str], dict] = {}
        self.fail_get = False
        self.fail_set = False
        self.calls: list[str] = []

    async def get_document(self, collection, key):
        self.calls.append("get_document")
        if self.fail_get:
            raise RemoteUnavailable("firestore down")
        doc = self.documents.get((collection, key))
        return dict(doc) if doc is not None else None

    async def set_document(self, collection, key, fields):
        self.calls.append("set_document")
        if self.fail_set:
            raise RemoteRejected("PERMISSION_DENIED", 403)
        self.documents[(collection, key)] = dict(fields)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def storage(session_factory):
    return LocalStorage(session_factory)


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
def profiles():
    return FakeProfileStore()


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
