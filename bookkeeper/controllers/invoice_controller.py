"""
Invoice Controller
Handles GST invoice calculation endpoints
"""

from fastapi import APIRouter
from typing import List

from ..models.report import InvoiceItem
from ..services.invoice_service import invoice_service

router = APIRouter()


@router.post("/totals")
async def get_invoice_totals(items: List[InvoiceItem]):
    """Subtotal, CGST, SGST and grand total for invoice lines"""
    return invoice_service.compute_totals(items)
