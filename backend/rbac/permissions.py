# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Permission catalogue and the static role → permission mapping.

Both tables are reference data: they are not derived from user records and
are never modified at runtime.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from models.user import Role


@dataclass(frozen=True)
class Permission:
    id: str
    name: str
    description: str
    category: str


PERMISSIONS: tuple[Permission, ...] = (
    Permission("user_create", "Create Users", "Create new user accounts", "User Management"),
    Permission("user_edit", "Edit Users", "Modify user information", "User Management"),
    Permission("user_delete", "Delete Users", "Remove user accounts", "User Management"),
    Permission("role_manage", "Manage Roles", "Assign and modify user roles", "Role Management"),
    Permission("audit_view", "View Audit Logs", "Access system audit trails", "Audit"),
    Permission("audit_export", "Export Audit Logs", "Export audit data", "Audit"),
    Permission("inspection_create", "Create Inspections", "Record new inspections", "Inspections"),
    Permission("inspection_approve", "Approve Inspections", "Approve inspection reports", "Inspections"),
    Permission("inventory_manage", "Manage Inventory", "Add/edit inventory items", "Inventory"),
    Permission("reports_generate", "Generate Reports", "Create system reports", "Reports"),
    Permission("settings_modify", "Modify Settings", "Change system settings", "Settings"),
    Permission("blockchain_view", "View Blockchain", "Access blockchain records", "Blockchain"),
)

ROLE_PERMISSIONS: Mapping[Role, frozenset[str]] = MappingProxyType({
    # Admin has every permission
    Role.ADMIN: frozenset(p.id for p in PERMISSIONS),
    Role.DRM: frozenset({"audit_view", "inspection_approve", "reports_generate", "blockchain_view"}),
    Role.SR_DEN: frozenset({"inspection_approve", "reports_generate", "audit_view"}),
    Role.DEN: frozenset({"inspection_approve", "reports_generate"}),
    Role.INSPECTOR: frozenset({"inspection_create", "blockchain_view"}),
    Role.MANUFACTURER: frozenset({"inventory_manage", "reports_generate"}),
})

ROLE_LABELS: Mapping[Role, str] = MappingProxyType({
    Role.ADMIN: "Administrator",
    Role.DRM: "DRM",
    Role.SR_DEN: "Sr. DEN",
    Role.DEN: "DEN",
    Role.INSPECTOR: "Inspector",
    Role.MANUFACTURER: "Manufacturer",
})


def permissions_for_role(role: Role | str) -> frozenset[str]:
    """Permission ids granted to *role*; an unmapped role gets none."""
    try:
        return ROLE_PERMISSIONS.get(Role(role), frozenset())
    except ValueError:
        return frozenset()


def has_permission(role: Role | str, permission_id: str) -> bool:
    return permission_id in permissions_for_role(role)


def permissions_by_category() -> dict[str, list[Permission]]:
    """Catalogue grouped by category, categories and entries in table order."""
    categories: dict[str, list[Permission]] = {}
    for permission in PERMISSIONS:
        categories.setdefault(permission.category, []).append(permission)
    return categories


def role_label(role: Role) -> str:
    return ROLE_LABELS.get(role, str(role))
