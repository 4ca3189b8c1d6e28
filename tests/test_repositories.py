"""
Tests for the ledger registry and voucher journal
"""

import datetime
from decimal import Decimal

import pytest

from bookkeeper.models.master import Ledger, LedgerGroup
from bookkeeper.models.transaction import Voucher, VoucherType
from bookkeeper.repositories import LedgerRegistry, VoucherJournal
from bookkeeper.utils.constants import UNKNOWN_LEDGER
from bookkeeper.utils.errors import ValidationError


class TestLedgerRegistry:
    """Tests for LedgerRegistry."""

    def test_keeps_insertion_order(self, registry):
        assert [l.id for l in registry] == ["1", "3", "6"]

    def test_find_returns_none_when_missing(self, registry):
        assert registry.find("1").name == "Cash"
        assert registry.find("missing") is None

    def test_duplicate_names_are_distinct_accounts(self, registry):
        """Two ledgers may share a name; they stay separate by id."""
        registry.add(Ledger(id="9", name="Cash", group=LedgerGroup.CASH))
        assert len(registry) == 4
        assert {l.id for l in registry if l.name == "Cash"} == {"1", "9"}

    def test_rejects_empty_name(self, registry):
        with pytest.raises(ValidationError):
            registry.add(Ledger(id="9", name="   ", group=LedgerGroup.ASSET))
        assert len(registry) == 3

    def test_rejects_duplicate_id(self, registry):
        with pytest.raises(ValidationError):
            registry.add(Ledger(id="1", name="Other", group=LedgerGroup.ASSET))

    def test_remove_is_noop_when_absent(self, registry):
        assert registry.remove("missing") is False
        assert registry.remove("3") is True
        assert registry.find("3") is None
        assert len(registry) == 2

    def test_remove_leaves_vouchers_untouched(self, registry, journal, purchase_voucher):
        registry.remove("6")
        assert list(journal)[0] == purchase_voucher
        assert registry.name_of("6") == UNKNOWN_LEDGER

    def test_search_by_name_or_gstin(self):
        registry = LedgerRegistry([
            Ledger(id="5", name="Ramesh Traders", group=LedgerGroup.SUNDRY_DEBTOR, gst_number="27ABCDE1234F1Z5"),
            Ledger(id="6", name="Tech Solutions Ltd", group=LedgerGroup.SUNDRY_CREDITOR, gst_number="27XYZAB5678L1Z2"),
        ])
        assert [l.id for l in registry.search("ramesh")] == ["5"]
        assert [l.id for l in registry.search("xyzab")] == ["6"]
        assert len(registry.search("")) == 2


class TestVoucherJournal:
    """Tests for VoucherJournal."""

    def test_rejects_negative_amount(self, journal):
        bad = Voucher(
            id="V9",
            date=datetime.date(2024, 4, 9),
            type=VoucherType.PAYMENT,
            ledger_id="1",
            amount=Decimal("-1")
        )
        with pytest.raises(ValidationError):
            journal.add(bad)
        assert len(journal) == 2

    def test_rejects_missing_ledger(self, journal):
        bad = Voucher(
            id="V9",
            date=datetime.date(2024, 4, 9),
            type=VoucherType.PAYMENT,
            ledger_id="",
            amount=Decimal("10")
        )
        with pytest.raises(ValidationError):
            journal.add(bad)
        assert len(journal) == 2

    def test_accepts_zero_amount(self, journal, make_voucher):
        journal.add(make_voucher("V9", VoucherType.JOURNAL, "1", 0))
        assert len(journal) == 3

    def test_remove_by_id(self, journal):
        assert journal.remove("nope") is False
        assert journal.remove("V002") is True
        assert [v.id for v in journal] == ["V003"]

    def test_by_date_is_lazy_and_ordered(self, make_voucher):
        day = datetime.date(2024, 4, 1)
        journal = VoucherJournal([
            make_voucher("A", VoucherType.SALES, "1", 10, date=day),
            make_voucher("B", VoucherType.SALES, "1", 20, date=datetime.date(2024, 4, 2)),
            make_voucher("C", VoucherType.RECEIPT, "1", 30, date=day),
        ])
        result = journal.by_date(day)
        assert not isinstance(result, list)
        assert [v.id for v in result] == ["A", "C"]

    def test_voucher_is_immutable(self, purchase_voucher):
        with pytest.raises(Exception):
            purchase_voucher.type = VoucherType.SALES

    def test_reference_falls_back_to_id(self, purchase_voucher, dangling_sales_voucher):
        assert purchase_voucher.reference == "INV-99"
        assert dangling_sales_voucher.reference == "V003"
