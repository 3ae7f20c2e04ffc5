# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
FastAPI application.

Responsibilities
----------------
* Instantiate the FastAPI app.
* Register CORS and request-logging middleware.
* Mount the three feature routers (auth, rbac, dashboard).
* Build the process-wide SessionResolver at startup and store it on
  ``app.state`` together with the shared httpx client and products client.
* Expose a /health endpoint for container liveness checks.

Production note
---------------
CORS allow_origins is set to the Vite dev server only.  In a production
deployment this must be changed to the exact frontend origin.
"""

import time

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from auth.firebase import FirebaseIdentityProvider, FirestoreProfileStore
from auth.resolver import SessionResolver
from auth.router import router as auth_router
from auth.storage import LocalStorage
from core.config import settings
from core.logger import logger
from core.security import get_client_ip
from dashboard.products import ProductsClient
from dashboard.router import router as dashboard_router
from database import SessionLocal, init_db
from rbac.router import router as rbac_router

app = FastAPI(title="Railway Asset Dashboard", version="1.0.0")

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


# ---------------------------------------------------------------------------
# Request-logging middleware
# ---------------------------------------------------------------------------
# Login and sign-up bodies carry passwords, so only URL and metadata are
# recorded.


class _RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, client IP, response status and latency (ms)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "%s %s | client=%s status=%d latency=%.1fms",
            request.method,
            request.url.path,
            get_client_ip(request),
            response.status_code,
            elapsed_ms,
        )
        return response


app.add_middleware(_RequestLogMiddleware)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(auth_router)
app.include_router(rbac_router)
app.include_router(dashboard_router)


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------


def build_resolver(client: httpx.AsyncClient) -> SessionResolver:
    """
    Assemble the resolver from settings.  Without Firebase configuration the
    remote side is left out and every remote attempt falls back locally.
    """
    identity = profiles = None
    if not settings.use_local_auth and settings.firebase_api_key:
        identity = FirebaseIdentityProvider(settings.firebase_api_key, client)
        profiles = FirestoreProfileStore(settings.firebase_project_id, client, identity.id_token)

    return SessionResolver(
        storage=LocalStorage(SessionLocal),
        use_local_auth=settings.use_local_auth,
        identity=identity,
        profiles=profiles,
    )


@app.on_event("startup")
async def _on_startup():
    logger.info(
        "Railway Asset Dashboard starting up (%s auth)",
        "local" if settings.use_local_auth else "remote",
    )
    init_db()
    client = httpx.AsyncClient(timeout=settings.remote_timeout_seconds)
    app.state.http_client = client
    app.state.products_client = ProductsClient(settings.products_api_url, client)
    app.state.resolver = build_resolver(client)
    await app.state.resolver.start()


@app.on_event("shutdown")
async def _on_shutdown():
    logger.info("Railway Asset Dashboard shutting down")
    app.state.resolver.stop()
    await app.state.http_client.aclose()


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------


@app.get("/health")
def health():
    return {"status": "ok"}
