"""
Master Data Models
Pydantic models for ledgers and the company profile
"""

from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class LedgerGroup(str, Enum):
    ASSET = "Asset"
    LIABILITY = "Liability"
    INCOME = "Income"
    EXPENSE = "Expense"
    BANK = "Bank"
    CASH = "Cash"
    SUNDRY_DEBTOR = "Sundry Debtor"
    SUNDRY_CREDITOR = "Sundry Creditor"


class Nature(str, Enum):
    DEBIT = "Debit"
    CREDIT = "Credit"


class Ledger(BaseModel):
    """An account; vouchers refer to it by id only"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    group: LedgerGroup
    opening_balance: Decimal = Decimal("0")
    gst_number: Optional[str] = None
    contact: Optional[str] = None


class LedgerCreate(BaseModel):
    name: str = ""
    group: LedgerGroup = LedgerGroup.SUNDRY_DEBTOR
    opening_balance: Decimal = Decimal("0")
    gst_number: Optional[str] = None
    contact: Optional[str] = None


class CompanyProfile(BaseModel):
    name: str = ""
    address: str = ""
    gst_number: str = ""
    phone: str = ""
    email: str = ""
