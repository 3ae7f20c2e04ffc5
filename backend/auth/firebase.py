# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Firebase adapters over plain HTTPS (httpx).

* :class:`FirebaseIdentityProvider` – Firebase Authentication REST API
  (``accounts:signInWithPassword`` / ``accounts:signUp``).  The signed-in
  identity is held in memory only; sign-out simply forgets it.
* :class:`FirestoreProfileStore` – Cloud Firestore REST API for the
  ``users`` profile documents, authorised with the identity's ID token.

Every transport error, timeout or 5xx becomes ``RemoteUnavailable``; every
other 4xx becomes ``RemoteRejected`` carrying Google's error message
(e.g. ``INVALID_LOGIN_CREDENTIALS``).
"""

import re
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import httpx

from auth.remote import SERVER_TIMESTAMP, IdentityListener, RemoteIdentity
from core.exceptions import RemoteRejected, RemoteUnavailable

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"
FIRESTORE_URL = "https://firestore.googleapis.com/v1"


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return f"HTTP {response.status_code}"


def _check(response: httpx.Response, what: str) -> None:
    if response.status_code >= 500:
        raise RemoteUnavailable(f"{what}: HTTP {response.status_code}")
    if response.status_code >= 400:
        raise RemoteRejected(_error_message(response), response.status_code)


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


class FirebaseIdentityProvider:
    def __init__(self, api_key: str, client: httpx.AsyncClient, base_url: str = IDENTITY_TOOLKIT_URL):
        self._api_key = api_key
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._current: Optional[RemoteIdentity] = None
        self._listeners: list[IdentityListener] = []

    @property
    def current_identity(self) -> Optional[RemoteIdentity]:
        return self._current

    def id_token(self) -> Optional[str]:
        return self._current.id_token if self._current else None

    async def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        if not self._api_key:
            raise RemoteUnavailable("Firebase API key is not configured")
        self._listeners.append(listener)
        await listener(self._current)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def sign_in(self, email: str, password: str) -> RemoteIdentity:
        data = await self._call("accounts:signInWithPassword", email, password)
        return await self._signed_in(data, email)

    async def sign_up(self, email: str, password: str) -> RemoteIdentity:
        data = await self._call("accounts:signUp", email, password)
        return await self._signed_in(data, email)

    async def sign_out(self) -> None:
        self._current = None
        await self._notify()

    async def _call(self, method: str, email: str, password: str) -> dict:
        if not self._api_key:
            raise RemoteUnavailable("Firebase API key is not configured")
        try:
            response = await self._client.post(
                f"{self._base_url}/{method}",
                params={"key": self._api_key},
                json={"email": email, "password": password, "returnSecureToken": True},
            )
        except httpx.HTTPError as exc:
            raise RemoteUnavailable(f"{method}: {exc!r}") from exc
        _check(response, method)
        return response.json()

    async def _signed_in(self, data: dict, email: str) -> RemoteIdentity:
        try:
            uid = data["localId"]
        except KeyError as exc:
            raise RemoteUnavailable("identity response without localId") from exc
        self._current = RemoteIdentity(
            uid=uid,
            email=data.get("email") or email,
            id_token=data.get("idToken", ""),
        )
        await self._notify()
        return self._current

    async def _notify(self) -> None:
        for listener in list(self._listeners):
            await listener(self._current)


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

# Firestore returns up to nanosecond precision; datetime keeps microseconds.
_FRACTION = re.compile(r"\.(\d{6})\d+")


def _parse_timestamp(value: str) -> datetime:
    value = _FRACTION.sub(r".\1", value).replace("Z", "+00:00")
    return datetime.fromisoformat(value)


def encode_value(value: Any) -> dict:
    if value is None:
        return {"nullValue": None}
    if isinstance(value, bool):
        return {"booleanValue": value}
    if isinstance(value, int):
        return {"integerValue": str(value)}
    if isinstance(value, float):
        return {"doubleValue": value}
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return {"timestampValue": value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")}
    return {"stringValue": str(value)}


def decode_value(value: dict) -> Any:
    if "stringValue" in value:
        return value["stringValue"]
    if "timestampValue" in value:
        return _parse_timestamp(value["timestampValue"])
    if "booleanValue" in value:
        return value["booleanValue"]
    if "integerValue" in value:
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    # nullValue and types profiles never use (maps, arrays, references)
    return None


class FirestoreProfileStore:
    def __init__(
        self,
        project_id: str,
        client: httpx.AsyncClient,
        token_source: Callable[[], Optional[str]],
        base_url: str = FIRESTORE_URL,
    ):
        self._project_id = project_id
        self._client = client
        self._token_source = token_source
        self._base_url = base_url.rstrip("/")

    @property
    def _database(self) -> str:
        return f"projects/{self._project_id}/databases/(default)"

    def _document_name(self, collection: str, key: str) -> str:
        return f"{self._database}/documents/{collection}/{key}"

    def _headers(self) -> dict:
        token = self._token_source()
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def get_document(self, collection: str, key: str) -> Optional[dict[str, Any]]:
        response = await self._send("GET", f"{self._base_url}/{self._document_name(collection, key)}")
        if response.status_code == 404:
            return None
        _check(response, "get_document")
        fields = response.json().get("fields", {})
        return {name: decode_value(value) for name, value in fields.items()}

    async def set_document(self, collection: str, key: str, fields: dict[str, Any]) -> None:
        plain = {name: v for name, v in fields.items() if v is not SERVER_TIMESTAMP}
        server_set = [name for name, v in fields.items() if v is SERVER_TIMESTAMP]
        write: dict[str, Any] = {
            "update": {
                "name": self._document_name(collection, key),
                "fields": {name: encode_value(v) for name, v in plain.items()},
            }
        }
        if server_set:
            write["updateTransforms"] = [
                {"fieldPath": name, "setToServerValue": "REQUEST_TIME"} for name in server_set
            ]
        response = await self._send(
            "POST",
            f"{self._base_url}/{self._database}/documents:commit",
            json={"writes": [write]},
        )
        _check(response, "set_document")

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        if not self._project_id:
            raise RemoteUnavailable("Firebase project id is not configured")
        try:
            return await self._client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as exc:
            raise RemoteUnavailable(f"{method} {url}: {exc!r}") from exc
