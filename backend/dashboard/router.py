# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Dashboard endpoints – summary cards for the signed-in user's role."""

from fastapi import APIRouter, Depends, Request

from core.security import get_current_user
from dashboard.cards import cards_for_role
from dashboard.products import ProductsClient, load_manufacturer_summary
from dashboard.schemas import CardRow, DashboardSummaryResponse
from models.user import Role, User

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_products_client(request: Request) -> ProductsClient:
    return request.app.state.products_client


# ---------------------------------------------------------------------------
# GET /dashboard/summary
# ---------------------------------------------------------------------------


@router.get("/summary", response_model=DashboardSummaryResponse)
async def summary(
    current_user: User = Depends(get_current_user),
    products: ProductsClient = Depends(get_products_client),
):
    """Only the manufacturer cards hit the products service."""
    manufacturer_summary = None
    if current_user.role == Role.MANUFACTURER:
        manufacturer_summary = await load_manufacturer_summary(products)

    cards = cards_for_role(current_user.role, manufacturer_summary)
    return DashboardSummaryResponse(
        role=current_user.role,
        cards=[CardRow.model_validate(card) for card in cards],
    )
