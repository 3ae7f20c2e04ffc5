"""
Tests for the HTTP endpoints (FastAPI TestClient, dependency overrides)
"""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from auth.resolver import SessionResolver
from core.security import get_resolver
from dashboard.products import ProductsClient
from dashboard.router import get_products_client
from main import app


@pytest.fixture
def resolver(storage, clock):
    resolver = SessionResolver(storage, use_local_auth=True, clock=clock)
    asyncio.run(resolver.start())
    return resolver


@pytest.fixture
def products_handler():
    return lambda request: httpx.Response(
        200,
        json={"products": [{"status": "dispatched"}, {"status": "delivered"}, {"status": "manufactured"}]},
    )


@pytest.fixture
def client(resolver, products_handler):
    products = ProductsClient(
        "http://products.test",
        httpx.AsyncClient(transport=httpx.MockTransport(products_handler)),
    )
    app.dependency_overrides[get_resolver] = lambda: resolver
    app.dependency_overrides[get_products_client] = lambda: products
    yield TestClient(app)
    app.dependency_overrides.clear()


def _login(client, email, password):
    return client.post("/auth/login", json={"email": email, "password": password})


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestAuthEndpoints:
    def test_session_initially_empty(self, client):
        body = client.get("/auth/session").json()
        assert body == {"user": None, "loading": False, "source": None}

    def test_login_success(self, client):
        response = _login(client, "admin@railway.gov.in", "admin123")
        assert response.status_code == 200
        assert response.json()["id"] == "demo_admin"
        assert response.json()["role"] == "admin"

        session = client.get("/auth/session").json()
        assert session["user"]["email"] == "admin@railway.gov.in"
        assert session["source"] == "local"

    def test_login_failure(self, client):
        response = _login(client, "admin@railway.gov.in", "bad")
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_signup(self, client):
        response = client.post(
            "/auth/signup",
            json={"name": "N", "email": "n@railway.gov.in", "password": "pw", "role": "den", "division": "Pune"},
        )
        assert response.status_code == 201
        assert response.json()["id"].startswith("demo_")
        assert response.json()["division"] == "Pune"

    def test_signup_rejects_unknown_role(self, client):
        response = client.post(
            "/auth/signup",
            json={"name": "N", "email": "n@railway.gov.in", "password": "pw", "role": "guest"},
        )
        assert response.status_code == 422

    def test_logout(self, client):
        _login(client, "den@railway.gov.in", "den123")
        assert client.post("/auth/logout").json() == {"detail": "Logged out"}
        assert client.post("/auth/logout").status_code == 200
        assert client.get("/auth/session").json()["user"] is None


class TestRbacEndpoints:
    def test_requires_session(self, client):
        assert client.get("/rbac/navigation").status_code == 401
        assert client.get("/rbac/permissions").status_code == 401

    def test_navigation_for_inspector(self, client):
        _login(client, "inspector@railway.gov.in", "inspector123")
        body = client.get("/rbac/navigation").json()
        assert body["role"] == "inspector"
        assert [item["path"] for item in body["items"]] == [
            "/settings",
            "/dashboard",
            "/scan",
            "/record-inspection",
            "/request-products",
            "/inspection-history",
        ]

    def test_permissions_for_manufacturer(self, client):
        _login(client, "manufacturer@railway.gov.in", "mfg123")
        body = client.get("/rbac/permissions").json()
        assert body["permissions"] == ["inventory_manage", "reports_generate"]

    def test_catalog(self, client):
        _login(client, "den@railway.gov.in", "den123")
        categories = client.get("/rbac/permissions/catalog").json()["categories"]
        assert sum(len(entries) for entries in categories.values()) == 12

    def test_role_detail_requires_role_manage(self, client):
        _login(client, "drm@railway.gov.in", "drm123")
        assert client.get("/rbac/roles/den").status_code == 403

    def test_role_detail_for_admin(self, client):
        _login(client, "admin@railway.gov.in", "admin123")
        body = client.get("/rbac/roles/sr_den").json()
        assert body["label"] == "Sr. DEN"
        assert body["permissions"] == ["audit_view", "inspection_approve", "reports_generate"]
        assert body["navigation"][0]["label"] == "Settings"

    def test_unknown_role(self, client):
        _login(client, "admin@railway.gov.in", "admin123")
        assert client.get("/rbac/roles/guest").status_code == 404


class TestDashboardEndpoint:
    def test_requires_session(self, client):
        assert client.get("/dashboard/summary").status_code == 401

    def test_manufacturer_live_summary(self, client):
        _login(client, "manufacturer@railway.gov.in", "mfg123")
        cards = client.get("/dashboard/summary").json()["cards"]
        assert [c["value"] for c in cards] == ["3", "1", "1", "1"]

    def test_static_cards(self, client):
        _login(client, "drm@railway.gov.in", "drm123")
        cards = client.get("/dashboard/summary").json()["cards"]
        assert cards[1] == {
            "title": "Pending Approvals",
            "value": "12",
            "change": "-3",
            "change_type": "negative",
            "icon": "Clock",
        }
