"""
Report Service Module
Trial balance, profit & loss, day book and dashboard figures
"""

import datetime
from decimal import Decimal
from typing import Iterable, List

from ..models.master import LedgerGroup, Nature
from ..models.report import (
    DashboardSummary,
    DayBook,
    DayBookEntry,
    ProfitAndLoss,
    TrialBalanceRow,
)
from ..models.transaction import Voucher, VoucherType
from ..repositories import LedgerRegistry, VoucherJournal
from ..utils.constants import RECENT_VOUCHER_COUNT
from ..utils.decorators import timed
from .balance_service import balance_of


def total_of(journal: VoucherJournal, voucher_type: VoucherType) -> Decimal:
    """Sum of amounts over every voucher of one type"""
    return sum((v.amount for v in journal.by_type(voucher_type)), Decimal("0"))


@timed
def compute_trial_balance(registry: LedgerRegistry, journal: VoucherJournal) -> List[TrialBalanceRow]:
    """
    One row per ledger with a non-zero balance, in registry order.

    Column totals are not computed.
    """
    vouchers = list(journal)
    rows = []

    for ledger in registry:
        balance = balance_of(ledger, vouchers)
        if balance.net == 0:
            continue

        is_debit = balance.nature is Nature.DEBIT
        rows.append(TrialBalanceRow(
            ledger_id=ledger.id,
            ledger_name=ledger.name,
            group=ledger.group,
            debit=balance.amount if is_debit else None,
            credit=None if is_debit else balance.amount
        ))

    return rows


@timed
def compute_profit_and_loss(journal: VoucherJournal) -> ProfitAndLoss:
    revenue = total_of(journal, VoucherType.SALES)
    cost_of_goods = total_of(journal, VoucherType.PURCHASE)
    direct_expenses = total_of(journal, VoucherType.PAYMENT)
    gross_profit = revenue - cost_of_goods

    return ProfitAndLoss(
        revenue=revenue,
        cost_of_goods=cost_of_goods,
        direct_expenses=direct_expenses,
        gross_profit=gross_profit,
        net_profit=gross_profit - direct_expenses
    )


def _day_book_entries(registry: LedgerRegistry, vouchers: Iterable[Voucher]) -> List[DayBookEntry]:
    return [
        DayBookEntry(
            voucher_id=v.id,
            type=v.type,
            reference=v.invoice_number,
            party=registry.name_of(v.ledger_id),
            narration=v.narration,
            amount=v.amount
        )
        for v in vouchers
    ]


def compute_day_book(registry: LedgerRegistry, journal: VoucherJournal, date: datetime.date) -> DayBook:
    entries = _day_book_entries(registry, journal.by_date(date))
    return DayBook(
        date=date,
        entries=entries,
        total=sum((e.amount for e in entries), Decimal("0"))
    )


def cash_balance(registry: LedgerRegistry, journal: VoucherJournal) -> Decimal:
    """Opening balance of the first Cash ledger plus receipts less payments"""
    cash_ledger = next((l for l in registry if l.group is LedgerGroup.CASH), None)
    opening = cash_ledger.opening_balance if cash_ledger else Decimal("0")
    return opening + total_of(journal, VoucherType.RECEIPT) - total_of(journal, VoucherType.PAYMENT)


def compute_dashboard(registry: LedgerRegistry, journal: VoucherJournal) -> DashboardSummary:
    recent = list(journal)[-RECENT_VOUCHER_COUNT:]
    recent.reverse()

    return DashboardSummary(
        total_sales=total_of(journal, VoucherType.SALES),
        total_purchases=total_of(journal, VoucherType.PURCHASE),
        total_receipts=total_of(journal, VoucherType.RECEIPT),
        total_payments=total_of(journal, VoucherType.PAYMENT),
        cash_balance=cash_balance(registry, journal),
        recent_vouchers=_day_book_entries(registry, recent)
    )
