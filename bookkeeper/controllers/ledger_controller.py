"""
Ledger Controller
Handles ledger master API endpoints
"""

from fastapi import APIRouter, HTTPException
from typing import Optional

from ..models.master import LedgerCreate
from ..services.balance_service import balance_of
from ..services.book_service import book_service
from ..views.json_view import JsonView

router = APIRouter()


@router.get("")
async def get_ledgers(search: Optional[str] = None):
    """List ledgers, optionally filtered by name or GSTIN"""
    ledgers = book_service.list_ledgers(search)
    return JsonView.listing(ledgers)


@router.post("", status_code=201)
async def create_ledger(request: LedgerCreate):
    """Create a ledger"""
    ledger = await book_service.create_ledger(request)
    return JsonView.success("Ledger created", ledger)


@router.get("/{ledger_id}")
async def get_ledger(ledger_id: str):
    """Get a ledger with its current balance"""
    ledger = book_service.get_ledger(ledger_id)
    if ledger is None:
        raise HTTPException(status_code=404, detail=f"Ledger not found: {ledger_id}")

    return {
        "ledger": ledger,
        "balance": balance_of(ledger, book_service.journal)
    }


@router.delete("/{ledger_id}")
async def delete_ledger(ledger_id: str):
    """Delete a ledger; vouchers that use it are kept"""
    removed = await book_service.delete_ledger(ledger_id)
    return {"status": "success", "removed": removed}
