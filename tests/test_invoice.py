"""
Tests for GST invoice totals
"""

from decimal import Decimal

import pytest

from bookkeeper.models.report import InvoiceItem
from bookkeeper.services.invoice_service import InvoiceService
from bookkeeper.utils.errors import ValidationError


class TestInvoiceTotals:

    def test_eighteen_percent_split(self):
        items = [
            InvoiceItem(description="Dell Inspiron 15 Laptop", hsn="8471", quantity=1, rate=Decimal("45000")),
            InvoiceItem(description="Logitech Wireless Mouse", hsn="8471", quantity=2, rate=Decimal("650")),
        ]
        totals = InvoiceService(gst_rate=Decimal("18")).compute_totals(items)

        assert totals.subtotal == Decimal("46300.00")
        assert totals.cgst == Decimal("4167.00")
        assert totals.sgst == Decimal("4167.00")
        assert totals.total == Decimal("54634.00")

    def test_rounds_to_paise(self):
        totals = InvoiceService(gst_rate=Decimal("18")).compute_totals(
            [InvoiceItem(quantity=1, rate=Decimal("10.05"))]
        )
        assert totals.cgst == Decimal("0.90")
        assert totals.total == Decimal("11.85")

    def test_no_items(self):
        totals = InvoiceService(gst_rate=Decimal("18")).compute_totals([])
        assert totals.total == Decimal("0.00")

    def test_rejects_negative_rate(self):
        with pytest.raises(ValidationError):
            InvoiceService().compute_totals([InvoiceItem(quantity=1, rate=Decimal("-5"))])
