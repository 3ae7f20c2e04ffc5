# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
RBAC endpoints – what the signed-in user may see and do.

``/rbac/navigation`` and ``/rbac/permissions`` answer for the current
session's role.  ``/rbac/roles/{role}`` backs the role-management screen and
is guarded by the ``role_manage`` permission.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from core.security import get_current_user, require_permission
from models.user import Role, User
from rbac.navigation import nav_items_for_role
from rbac.permissions import permissions_by_category, permissions_for_role, role_label
from rbac.schemas import (
    NavigationResponse,
    NavItemRow,
    PermissionCatalogResponse,
    PermissionRow,
    PermissionsResponse,
    RoleDetailResponse,
)

router = APIRouter(prefix="/rbac", tags=["rbac"])


def _nav_rows(role: Role) -> list[NavItemRow]:
    return [NavItemRow.model_validate(item) for item in nav_items_for_role(role)]


# ---------------------------------------------------------------------------
# GET /rbac/navigation
# ---------------------------------------------------------------------------


@router.get("/navigation", response_model=NavigationResponse)
def navigation(current_user: User = Depends(get_current_user)):
    return NavigationResponse(role=current_user.role, items=_nav_rows(current_user.role))


# ---------------------------------------------------------------------------
# GET /rbac/permissions
# ---------------------------------------------------------------------------


@router.get("/permissions", response_model=PermissionsResponse)
def permissions(current_user: User = Depends(get_current_user)):
    return PermissionsResponse(
        role=current_user.role,
        permissions=sorted(permissions_for_role(current_user.role)),
    )


# ---------------------------------------------------------------------------
# GET /rbac/permissions/catalog
# ---------------------------------------------------------------------------


@router.get("/permissions/catalog", response_model=PermissionCatalogResponse)
def permission_catalog(current_user: User = Depends(get_current_user)):
    return PermissionCatalogResponse(
        categories={
            category: [PermissionRow.model_validate(p) for p in entries]
            for category, entries in permissions_by_category().items()
        }
    )


# ---------------------------------------------------------------------------
# GET /rbac/roles/{role}
# ---------------------------------------------------------------------------


@router.get("/roles/{role}", response_model=RoleDetailResponse)
def role_detail(role: str, manager: User = Depends(require_permission("role_manage"))):
    """Label, navigation and permissions of any role (role management)."""
    try:
        target = Role(role)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Role not found")

    return RoleDetailResponse(
        role=target,
        label=role_label(target),
        navigation=_nav_rows(target),
        permissions=sorted(permissions_for_role(target)),
    )
