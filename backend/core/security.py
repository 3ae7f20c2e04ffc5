# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Central security module.  Password hashing and the FastAPI auth guards live
here.  No other module should touch raw password material directly.

Responsibilities
----------------
1. Password hashing / verification          (passlib pbkdf2_sha256)
2. FastAPI dependency guards                (get_resolver, get_current_user,
                                             require_permission)
3. Client IP extraction for request logging
"""

from fastapi import Depends, HTTPException, Request, status
from passlib.hash import pbkdf2_sha256 as _pbkdf2  # pure Python, no binary deps

from core.config import settings

# ---------------------------------------------------------------------------
# 1.  pbkdf2_sha256 – password hashing
# ---------------------------------------------------------------------------


def hash_password(plain: str, rounds: int | None = None) -> str:
    """
    Hash a plaintext password with PBKDF2-SHA256.

    The salt is embedded in the returned passlib hash string
    (``$pbkdf2-sha256$<rounds>$<salt>$<checksum>``).
    """
    return _pbkdf2.using(rounds=rounds or settings.password_hash_rounds).hash(plain)


def verify_password(plain: str, stored_hash: str) -> bool:
    """
    Constant-time verification of a plaintext password against a hash
    produced by :func:`hash_password`.
    """
    return _pbkdf2.verify(plain, stored_hash)


# ---------------------------------------------------------------------------
# 2.  FastAPI dependency guards
# ---------------------------------------------------------------------------


def get_resolver(request: Request):
    """
    Dependency: the process-wide SessionResolver created at startup.
    Tests replace it through ``app.dependency_overrides``.
    """
    return request.app.state.resolver


def get_current_user(resolver=Depends(get_resolver)):
    """
    Dependency: the user of the active session.

    Raises 401 if nobody is signed in.
    """
    user = resolver.current
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in",
        )
    return user


def require_permission(permission_id: str):
    """
    Dependency factory: wraps :func:`get_current_user` and additionally
    asserts that the user's role grants *permission_id*.  Raises 403
    otherwise.
    """
    # Lazy import keeps core/ free of a module-level dependency on rbac/
    from rbac.permissions import has_permission

    def _guard(current_user=Depends(get_current_user)):
        if not has_permission(current_user.role, permission_id):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission '{permission_id}' required",
            )
        return current_user

    return _guard


# -- IP Address extraction ----------------------------------------------------


def get_client_ip(request: Request) -> str:
    """
    Extract the client IP address from the request.
    Checks X-Forwarded-For first (for proxies), then falls back to the
    socket peer.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # X-Forwarded-For can contain multiple IPs, the first is the client
        return forwarded.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"
