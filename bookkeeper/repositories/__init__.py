# Repositories Package
# Data Access Layer

from .ledger_repository import LedgerRegistry
from .voucher_repository import VoucherJournal

__all__ = [
    "LedgerRegistry",
    "VoucherJournal"
]
