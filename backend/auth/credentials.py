# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Demo credential table.

Six fixed accounts, one per role.  The same table backs the local login
path and the seeding of remote profiles that do not exist yet, so there is
exactly one definition of it.  Passwords are hashed once at import time and
only ever verified through :func:`core.security.verify_password`.
"""

from dataclasses import dataclass
from typing import Optional

from core.security import hash_password, verify_password
from models.user import Role


@dataclass(frozen=True)
class DemoAccount:
    email: str
    name: str
    role: Role
    password_hash: str


def _account(email: str, password: str, name: str, role: Role) -> DemoAccount:
    return DemoAccount(email=email, name=name, role=role, password_hash=hash_password(password))


DEMO_ACCOUNTS: tuple[DemoAccount, ...] = (
    _account("admin@railway.gov.in", "admin123", "Admin User", Role.ADMIN),
    _account("drm@railway.gov.in", "drm123", "DRM User", Role.DRM),
    _account("inspector@railway.gov.in", "inspector123", "Inspector User", Role.INSPECTOR),
    _account("srden@railway.gov.in", "srden123", "Sr. DEN User", Role.SR_DEN),
    _account("den@railway.gov.in", "den123", "DEN User", Role.DEN),
    _account("manufacturer@railway.gov.in", "mfg123", "Manufacturer User", Role.MANUFACTURER),
)


def find_seed(email: str) -> Optional[DemoAccount]:
    """Return the demo account registered under *email* (exact match)."""
    for account in DEMO_ACCOUNTS:
        if account.email == email:
            return account
    return None


def match_credentials(email: str, password: str) -> Optional[DemoAccount]:
    """
    Return the demo account when both *email* and *password* match exactly
    (case-sensitive), else None.
    """
    account = find_seed(email)
    if account is None or not verify_password(password, account.password_hash):
        return None
    return account
