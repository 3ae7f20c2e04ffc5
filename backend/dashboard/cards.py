# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Per-role summary cards shown at the top of the dashboard."""

from dataclasses import dataclass
from typing import Optional

from dashboard.products import MOCK_MANUFACTURER_SUMMARY, ManufacturerSummary
from models.user import Role

POSITIVE, NEGATIVE, NEUTRAL = "positive", "negative", "neutral"


@dataclass(frozen=True)
class DashboardCard:
    title: str
    value: str
    change: str
    change_type: str
    icon: str


_STATIC_CARDS: dict[Role, tuple[DashboardCard, ...]] = {
    Role.ADMIN: (
        DashboardCard("Total Users", "1,234", "+12%", POSITIVE, "Users"),
        DashboardCard("System Approvals", "856", "+5%", POSITIVE, "CheckCircle"),
        DashboardCard("Blockchain Logs", "45,678", "+8%", POSITIVE, "Shield"),
        DashboardCard("AI Analytics Score", "94.2", "+2.1", POSITIVE, "Brain"),
    ),
    Role.DRM: (
        DashboardCard("Division Inspections", "234", "+7%", POSITIVE, "Search"),
        DashboardCard("Pending Approvals", "12", "-3", NEGATIVE, "Clock"),
        DashboardCard("Product Performance", "92%", "+3%", POSITIVE, "TrendingUp"),
        DashboardCard("AI Manufacturer Rating", "88.5", "+1.2", POSITIVE, "Star"),
    ),
    Role.SR_DEN: (
        DashboardCard("Sub-Division Projects", "18", "+2", POSITIVE, "BarChart3"),
        DashboardCard("Pending Approvals", "8", "0", NEUTRAL, "Clock"),
        DashboardCard("DEN Performance", "91%", "+4%", POSITIVE, "Users"),
        DashboardCard("AI Insights Score", "89.3", "+2.8", POSITIVE, "Brain"),
    ),
    Role.DEN: (
        DashboardCard("Section Approvals", "15", "+3", POSITIVE, "CheckCircle"),
        DashboardCard("Active Tasks", "28", "+5", POSITIVE, "UserPlus"),
        DashboardCard("Inspection Logs", "142", "+12%", POSITIVE, "FileText"),
        DashboardCard("Section Performance", "87%", "+2%", POSITIVE, "Activity"),
    ),
    Role.INSPECTOR: (
        DashboardCard("Assigned Sections", "6", "+1", POSITIVE, "MapPin"),
        DashboardCard("Inspections Today", "8", "+2", POSITIVE, "CheckCircle"),
        DashboardCard("Products Scanned", "45", "+12", POSITIVE, "QrCode"),
        DashboardCard("Blockchain Records", "156", "+8%", POSITIVE, "Shield"),
    ),
}


def _manufacturer_cards(summary: ManufacturerSummary) -> list[DashboardCard]:
    return [
        DashboardCard("Total Orders", str(summary.total_orders), "+6", POSITIVE, "ShoppingCart"),
        DashboardCard("In Production", str(summary.in_production), "+3", POSITIVE, "Settings"),
        DashboardCard("Dispatched", str(summary.dispatched), "+5", POSITIVE, "Truck"),
        DashboardCard("Delivered", str(summary.delivered), "+8%", POSITIVE, "CheckCircle"),
    ]


def cards_for_role(role: Role, manufacturer_summary: Optional[ManufacturerSummary] = None) -> list[DashboardCard]:
    if role == Role.MANUFACTURER:
        return _manufacturer_cards(manufacturer_summary or MOCK_MANUFACTURER_SUMMARY)
    return list(_STATIC_CARDS.get(role, ()))
