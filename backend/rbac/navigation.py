# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Static navigation table.

Definition order is the order the sidebar renders.  Several roles get their
own "Dashboard" entry, so the same path can appear more than once in the
table but at most once for any single role.
"""

from dataclasses import dataclass

from models.user import Role

ADMIN, DRM, SR_DEN, DEN, INSPECTOR, MANUFACTURER = (
    Role.ADMIN,
    Role.DRM,
    Role.SR_DEN,
    Role.DEN,
    Role.INSPECTOR,
    Role.MANUFACTURER,
)


@dataclass(frozen=True)
class NavItem:
    label: str
    path: str
    icon: str
    roles: frozenset[Role]


def _item(label: str, path: str, icon: str, *roles: Role) -> NavItem:
    return NavItem(label=label, path=path, icon=icon, roles=frozenset(roles))


NAV_ITEMS: tuple[NavItem, ...] = (
    # Administrator
    _item("Dashboard", "/dashboard", "LayoutDashboard", ADMIN),
    _item("User Management", "/users", "Users", ADMIN, DRM),
    _item("Role Management", "/roles", "Shield", ADMIN),
    _item("Reports", "/reports", "FileSpreadsheet", ADMIN, DRM, MANUFACTURER),
    _item("Audit Logs", "/audit", "FileCheck", ADMIN),
    _item("Settings", "/settings", "Cog", ADMIN, DRM, SR_DEN, DEN, INSPECTOR, MANUFACTURER),
    # DRM
    _item("Dashboard", "/dashboard", "LayoutDashboard", DRM),
    _item("Division Reports", "/division-reports", "BarChart3", DRM),
    _item("Approval Requests", "/approval-requests", "CheckCircle", DRM, SR_DEN, DEN),
    _item("Schedule & Notifications", "/schedule-notifications", "Calendar", DRM),
    # Sr. DEN
    _item("Dashboard", "/dashboard", "LayoutDashboard", SR_DEN),
    _item("Sub-Division Reports", "/subdivision-reports", "TrendingUp", SR_DEN),
    _item("Inspection Overview", "/inspection-overview", "Eye", SR_DEN),
    # DEN
    _item("Dashboard", "/dashboard", "LayoutDashboard", DEN),
    _item("Section Reports", "/section-reports", "BarChart3", DEN),
    _item("Assign Tasks", "/assign-tasks", "UserPlus", DEN),
    _item("Inspection Logs", "/inspection-logs", "FileText", DEN),
    # Inspector
    _item("Dashboard", "/dashboard", "LayoutDashboard", INSPECTOR),
    _item("Scan Products", "/scan", "QrCode", INSPECTOR),
    _item("Record Inspection", "/record-inspection", "Edit", INSPECTOR),
    _item("Request Products", "/request-products", "Send", INSPECTOR),
    _item("Inspection History", "/inspection-history", "Clock", INSPECTOR),
    # Manufacturer
    _item("Dashboard", "/dashboard", "LayoutDashboard", MANUFACTURER),
    _item("Product Inventory", "/inventory", "Package", MANUFACTURER),
    _item("Order Management", "/order-management", "ShoppingCart", MANUFACTURER),
    _item("Product Details", "/product-details", "Settings", MANUFACTURER),
    _item("Product Lifecycle", "/product-lifecycle", "RefreshCw", ADMIN, DRM),
)


def nav_items_for_role(role: Role | str) -> list[NavItem]:
    """Entries visible to *role*, in table order."""
    try:
        role = Role(role)
    except ValueError:
        return []
    return [item for item in NAV_ITEMS if role in item.roles]
