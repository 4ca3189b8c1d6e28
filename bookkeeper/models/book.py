"""
Book Models
Snapshot of a whole set of books, used for backup and restore
"""

from typing import List
from pydantic import BaseModel

from .master import CompanyProfile, Ledger
from .transaction import Voucher


class BookData(BaseModel):
    company: CompanyProfile = CompanyProfile()
    ledgers: List[Ledger] = []
    vouchers: List[Voucher] = []
