"""
Shared fixtures: a small set of books with one dangling voucher
"""

import datetime
from decimal import Decimal

import pytest

from bookkeeper.models.master import Ledger, LedgerGroup
from bookkeeper.models.transaction import Voucher, VoucherType
from bookkeeper.repositories import LedgerRegistry, VoucherJournal
from bookkeeper.services.book_service import BookService
from bookkeeper.services.database_service import DatabaseService


@pytest.fixture
def cash_ledger():
    return Ledger(id="1", name="Cash", group=LedgerGroup.CASH, opening_balance=Decimal("50000"))


@pytest.fixture
def sales_ledger():
    return Ledger(id="3", name="Sales Account", group=LedgerGroup.INCOME)


@pytest.fixture
def creditor_ledger():
    return Ledger(id="6", name="Tech Solutions", group=LedgerGroup.SUNDRY_CREDITOR)


@pytest.fixture
def registry(cash_ledger, sales_ledger, creditor_ledger):
    return LedgerRegistry([cash_ledger, sales_ledger, creditor_ledger])


@pytest.fixture
def purchase_voucher():
    return Voucher(
        id="V002",
        date=datetime.date(2024, 4, 2),
        type=VoucherType.PURCHASE,
        ledger_id="6",
        amount=Decimal("25000"),
        narration="Purchased computer parts",
        invoice_number="INV-99"
    )


@pytest.fixture
def dangling_sales_voucher():
    """Points at ledger 5, which is not in the registry"""
    return Voucher(
        id="V003",
        date=datetime.date(2024, 4, 5),
        type=VoucherType.SALES,
        ledger_id="5",
        amount=Decimal("45000"),
        narration="Sold 5 Laptops"
    )


@pytest.fixture
def journal(purchase_voucher, dangling_sales_voucher):
    return VoucherJournal([purchase_voucher, dangling_sales_voucher])


@pytest.fixture
def make_voucher():
    def _make(voucher_id, voucher_type, ledger_id, amount, date=datetime.date(2024, 4, 1), **kwargs):
        return Voucher(
            id=voucher_id,
            date=date,
            type=voucher_type,
            ledger_id=ledger_id,
            amount=Decimal(str(amount)),
            **kwargs
        )
    return _make


@pytest.fixture
def database(tmp_path):
    return DatabaseService(str(tmp_path / "books.db"))


@pytest.fixture
def book(database):
    return BookService(database)
