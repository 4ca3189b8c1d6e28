"""
Report Models
Pydantic models for balances, reports and invoice totals
"""

import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel

from .master import LedgerGroup, Nature
from .transaction import VoucherType


class Balance(BaseModel):
    amount: Decimal
    nature: Nature
    net: Decimal
    natural_side: Nature


class TrialBalanceRow(BaseModel):
    ledger_id: str
    ledger_name: str
    group: LedgerGroup
    debit: Optional[Decimal] = None
    credit: Optional[Decimal] = None


class ProfitAndLoss(BaseModel):
    revenue: Decimal
    cost_of_goods: Decimal
    direct_expenses: Decimal
    gross_profit: Decimal
    net_profit: Decimal


class DayBookEntry(BaseModel):
    voucher_id: str
    type: VoucherType
    reference: Optional[str] = None
    party: str
    narration: str = ""
    amount: Decimal


class DayBook(BaseModel):
    date: datetime.date
    entries: List[DayBookEntry]
    total: Decimal


class DashboardSummary(BaseModel):
    total_sales: Decimal
    total_purchases: Decimal
    total_receipts: Decimal
    total_payments: Decimal
    cash_balance: Decimal
    recent_vouchers: List[DayBookEntry]


class InvoiceItem(BaseModel):
    description: str = ""
    hsn: str = ""
    quantity: Decimal = Decimal("1")
    rate: Decimal = Decimal("0")


class InvoiceTotals(BaseModel):
    subtotal: Decimal
    cgst: Decimal
    sgst: Decimal
    total: Decimal
