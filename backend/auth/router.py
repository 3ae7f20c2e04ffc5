# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Auth endpoints – session state, login, sign-up, logout.

Security notes
--------------
* Login returns the *same* error message whether the email is unknown or
  the password is wrong, and whether the check happened remotely or
  against the demo table.
* Remote-provider failures never surface here; the resolver has already
  fallen back by the time an endpoint returns.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from auth.resolver import SessionResolver
from auth.schemas import LoginRequest, SessionResponse, SignUpRequest, UserInfoResponse
from core.exceptions import InvalidCredentials
from core.security import get_resolver

router = APIRouter(prefix="/auth", tags=["auth"])


# ---------------------------------------------------------------------------
# GET /auth/session
# ---------------------------------------------------------------------------


@router.get("/session", response_model=SessionResponse)
def session(resolver: SessionResolver = Depends(get_resolver)):
    """Current user (or null), whether startup resolution is still running,
    and how the session was established."""
    snap = resolver.snapshot()
    return SessionResponse(
        user=UserInfoResponse.model_validate(snap.user) if snap.user else None,
        loading=snap.loading,
        source=snap.source.value if snap.source else None,
    )


# ---------------------------------------------------------------------------
# POST /auth/login
# ---------------------------------------------------------------------------


@router.post("/login", response_model=UserInfoResponse)
async def login(body: LoginRequest, resolver: SessionResolver = Depends(get_resolver)):
    """Authenticate and make the user the current session."""
    try:
        user = await resolver.login(body.email, body.password)
    except InvalidCredentials as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    return UserInfoResponse.model_validate(user)


# ---------------------------------------------------------------------------
# POST /auth/signup
# ---------------------------------------------------------------------------


@router.post("/signup", response_model=UserInfoResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(body: SignUpRequest, resolver: SessionResolver = Depends(get_resolver)):
    """
    Register an account.  Falls back to a local-only account when the
    remote provider refuses or is unreachable, so this always succeeds.
    """
    user = await resolver.sign_up(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
        division=body.division,
        section=body.section,
    )
    return UserInfoResponse.model_validate(user)


# ---------------------------------------------------------------------------
# POST /auth/logout
# ---------------------------------------------------------------------------


@router.post("/logout")
async def logout(resolver: SessionResolver = Depends(get_resolver)):
    await resolver.logout()
    return {"detail": "Logged out"}
