"""
Report Controller
Handles accounting report API endpoints
"""

from fastapi import APIRouter

from ..services.book_service import book_service
from ..views.json_view import JsonView

router = APIRouter()


@router.get("/trial-balance")
async def get_trial_balance():
    """Trial balance; column totals are not computed"""
    rows = book_service.trial_balance()
    return JsonView.listing(rows, totals=None)


@router.get("/profit-loss")
async def get_profit_and_loss():
    """Profit & loss summary"""
    return book_service.profit_and_loss()


@router.get("/dashboard")
async def get_dashboard():
    """Headline figures and recent vouchers"""
    return book_service.dashboard()
