"""
Invoice Service Module
GST invoice totals at a flat rate split equally into CGST and SGST
"""

from decimal import Decimal
from typing import Iterable

from ..config import config
from ..models.report import InvoiceItem, InvoiceTotals
from ..utils.errors import ValidationError
from ..utils.helpers import round_money


class InvoiceService:
    """Computes invoice totals"""

    def __init__(self, gst_rate: Decimal = None):
        self.gst_rate = config.gst.rate if gst_rate is None else gst_rate

    def compute_totals(self, items: Iterable[InvoiceItem]) -> InvoiceTotals:
        subtotal = Decimal("0")
        for item in items:
            if item.quantity < 0 or item.rate < 0:
                raise ValidationError(
                    "Invoice quantity and rate must not be negative",
                    details=item.description
                )
            subtotal += item.quantity * item.rate

        half_rate = self.gst_rate / 2 / 100
        cgst = round_money(subtotal * half_rate)
        sgst = round_money(subtotal * half_rate)
        subtotal = round_money(subtotal)

        return InvoiceTotals(
            subtotal=subtotal,
            cgst=cgst,
            sgst=sgst,
            total=subtotal + cgst + sgst
        )


# Global service instance
invoice_service = InvoiceService()
