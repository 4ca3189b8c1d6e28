"""
Balance Service Module
Derives a ledger's running balance and debit/credit nature from its
opening balance and the vouchers that name it as party.

Only the party ledger moves: a voucher is never posted to a matching
contra ledger here. The Tally export infers the second leg on its own.
"""

from decimal import Decimal
from typing import Dict, Iterable, Optional

from ..models.master import Ledger, LedgerGroup, Nature
from ..models.report import Balance
from ..models.transaction import Voucher, VoucherType


NATURAL_SIDE: Dict[LedgerGroup, Nature] = {
    LedgerGroup.ASSET: Nature.DEBIT,
    LedgerGroup.EXPENSE: Nature.DEBIT,
    LedgerGroup.CASH: Nature.DEBIT,
    LedgerGroup.BANK: Nature.DEBIT,
    LedgerGroup.SUNDRY_DEBTOR: Nature.DEBIT,
    LedgerGroup.LIABILITY: Nature.CREDIT,
    LedgerGroup.INCOME: Nature.CREDIT,
    LedgerGroup.SUNDRY_CREDITOR: Nature.CREDIT,
}

# Journal and Contra vouchers do not move the party balance
VOUCHER_SIDE: Dict[VoucherType, Optional[Nature]] = {
    VoucherType.SALES: Nature.DEBIT,
    VoucherType.RECEIPT: Nature.DEBIT,
    VoucherType.PURCHASE: Nature.CREDIT,
    VoucherType.PAYMENT: Nature.CREDIT,
    VoucherType.JOURNAL: None,
    VoucherType.CONTRA: None,
}


def natural_side(group: LedgerGroup) -> Nature:
    return NATURAL_SIDE[group]


def balance_of(ledger: Ledger, vouchers: Iterable[Voucher]) -> Balance:
    """
    Balance of one ledger over the given vouchers

    net = opening + (Sales + Receipt) - (Purchase + Payment), reported
    as abs(net) with Debit for net >= 0 and Credit for net < 0.
    """
    debit_total = Decimal("0")
    credit_total = Decimal("0")

    for voucher in vouchers:
        if voucher.ledger_id != ledger.id:
            continue
        side = VOUCHER_SIDE[voucher.type]
        if side is Nature.DEBIT:
            debit_total += voucher.amount
        elif side is Nature.CREDIT:
            credit_total += voucher.amount

    net = ledger.opening_balance + debit_total - credit_total

    return Balance(
        amount=abs(net),
        nature=Nature.CREDIT if net < 0 else Nature.DEBIT,
        net=net,
        natural_side=natural_side(ledger.group)
    )
