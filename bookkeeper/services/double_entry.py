"""
Double Entry Module
Infers the two ledger legs of each voucher for the Tally export
"""

from typing import Dict

from ..models.transaction import LedgerEntry, Voucher, VoucherEntries, VoucherType
from ..repositories import LedgerRegistry
from ..utils.constants import CASH_ACCOUNT, PURCHASE_ACCOUNT, SALES_ACCOUNT


# Fixed contra ledger per voucher type, not the actual payment instrument
CONTRA_LEDGER: Dict[VoucherType, str] = {
    VoucherType.SALES: SALES_ACCOUNT,
    VoucherType.PURCHASE: PURCHASE_ACCOUNT,
    VoucherType.RECEIPT: CASH_ACCOUNT,
    VoucherType.PAYMENT: CASH_ACCOUNT,
    VoucherType.JOURNAL: CASH_ACCOUNT,
    VoucherType.CONTRA: CASH_ACCOUNT,
}

PARTY_DEBIT_TYPES = (VoucherType.SALES, VoucherType.PAYMENT)


def is_party_debit(voucher_type: VoucherType) -> bool:
    return voucher_type in PARTY_DEBIT_TYPES


def contra_ledger_name(voucher_type: VoucherType) -> str:
    return CONTRA_LEDGER[voucher_type]


def build_entries(voucher: Voucher, registry: LedgerRegistry) -> VoucherEntries:
    """
    Party leg and contra leg for one voucher.

    The contra leg mirrors the party leg, so the pair always nets to zero.
    """
    party_name = registry.name_of(voucher.ledger_id)
    party_debit = is_party_debit(voucher.type)

    party = LedgerEntry(
        ledger_name=party_name,
        positive=party_debit,
        amount=voucher.amount if party_debit else -voucher.amount
    )
    contra = LedgerEntry(
        ledger_name=contra_ledger_name(voucher.type),
        positive=not party.positive,
        amount=-party.amount
    )

    return VoucherEntries(
        voucher_id=voucher.id,
        type=voucher.type,
        date=voucher.date,
        narration=voucher.narration,
        reference=voucher.reference,
        party_ledger_name=party_name,
        entries=[party, contra]
    )
