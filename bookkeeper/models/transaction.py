"""
Transaction Data Models
Pydantic models for vouchers and their exported ledger entries
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class VoucherType(str, Enum):
    SALES = "Sales"
    PURCHASE = "Purchase"
    RECEIPT = "Receipt"
    PAYMENT = "Payment"
    JOURNAL = "Journal"
    CONTRA = "Contra"


class Voucher(BaseModel):
    """A recorded transaction against one party ledger"""
    model_config = ConfigDict(frozen=True)

    id: str
    date: datetime.date
    type: VoucherType
    ledger_id: str
    amount: Decimal
    narration: str = ""
    invoice_number: Optional[str] = None

    @property
    def reference(self) -> str:
        """Invoice number, or the voucher id when none was entered"""
        return self.invoice_number or self.id


class VoucherCreate(BaseModel):
    type: Optional[VoucherType] = None
    ledger_id: Optional[str] = None
    amount: Decimal = Decimal("0")
    date: Optional[datetime.date] = None
    narration: str = ""
    invoice_number: Optional[str] = None


class LedgerEntry(BaseModel):
    """One leg of an exported double entry.

    positive marks the leg whose Tally amount is positive. Tally writes the
    inverse flag on the wire: ISDEEMEDPOSITIVE is "No" for a positive leg
    and "Yes" for a negative one.
    """
    ledger_name: str
    positive: bool
    amount: Decimal


class VoucherEntries(BaseModel):
    """A voucher resolved into its party and contra legs"""
    voucher_id: str
    type: VoucherType
    date: datetime.date
    narration: str = ""
    reference: str
    party_ledger_name: str
    entries: List[LedgerEntry]
