"""
Voucher Controller
Handles voucher entry and day book API endpoints
"""

from datetime import date as Date
from fastapi import APIRouter
from typing import Optional

from ..models.transaction import VoucherCreate, VoucherType
from ..services.book_service import book_service
from ..views.json_view import JsonView

router = APIRouter()


@router.get("")
async def get_vouchers(voucher_type: Optional[VoucherType] = None):
    """List vouchers in entry order"""
    vouchers = book_service.list_vouchers(voucher_type)
    return JsonView.listing(vouchers)


@router.get("/daybook")
async def get_day_book(date: Optional[Date] = None):
    """Vouchers for one day, today by default"""
    return book_service.day_book(date or Date.today())


@router.post("", status_code=201)
async def create_voucher(request: VoucherCreate):
    """Record a voucher"""
    voucher = await book_service.create_voucher(request)
    return JsonView.success("Voucher saved", voucher)


@router.delete("/{voucher_id}")
async def delete_voucher(voucher_id: str):
    """Delete a voucher"""
    removed = await book_service.delete_voucher(voucher_id)
    return {"status": "success", "removed": removed}
