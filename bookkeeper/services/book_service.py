"""
Book Service Module
Owns the session's ledger registry, voucher journal and company profile.
Generates ids, defaults dates, validates input and saves after every change.
"""

import datetime
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import ValidationError as SchemaError

from ..config import config
from ..models.book import BookData
from ..models.master import CompanyProfile, Ledger, LedgerCreate, LedgerGroup
from ..models.report import DashboardSummary, DayBook, ProfitAndLoss, TrialBalanceRow
from ..models.transaction import Voucher, VoucherCreate, VoucherType
from ..repositories import LedgerRegistry, VoucherJournal
from ..utils.errors import ValidationError
from ..utils.helpers import generate_id
from ..utils.logger import logger
from . import report_service
from .database_service import DatabaseService, database_service
from .xml_builder import export_interchange_document


def sample_book() -> BookData:
    """Starter books for a fresh install"""
    ledgers = [
        Ledger(id="1", name="Cash Account", group=LedgerGroup.CASH, opening_balance=Decimal("50000")),
        Ledger(id="2", name="HDFC Bank", group=LedgerGroup.BANK, opening_balance=Decimal("150000")),
        Ledger(id="3", name="Sales Account", group=LedgerGroup.INCOME),
        Ledger(id="4", name="Purchase Account", group=LedgerGroup.EXPENSE),
        Ledger(id="5", name="Ramesh Traders", group=LedgerGroup.SUNDRY_DEBTOR, gst_number="27ABCDE1234F1Z5"),
        Ledger(id="6", name="Tech Solutions Ltd", group=LedgerGroup.SUNDRY_CREDITOR, gst_number="27XYZAB5678L1Z2"),
        Ledger(id="7", name="Office Rent", group=LedgerGroup.EXPENSE),
        Ledger(id="8", name="Electricity Bill", group=LedgerGroup.EXPENSE),
    ]
    vouchers = [
        Voucher(id="V001", date=datetime.date(2024, 4, 1), type=VoucherType.RECEIPT, ledger_id="1",
                amount=Decimal("50000"), narration="Capital Introduction"),
        Voucher(id="V002", date=datetime.date(2024, 4, 2), type=VoucherType.PURCHASE, ledger_id="6",
                amount=Decimal("25000"), narration="Purchased computer parts", invoice_number="INV-99"),
        Voucher(id="V003", date=datetime.date(2024, 4, 5), type=VoucherType.SALES, ledger_id="5",
                amount=Decimal("45000"), narration="Sold 5 Laptops", invoice_number="NAC-001"),
        Voucher(id="V004", date=datetime.date(2024, 4, 6), type=VoucherType.PAYMENT, ledger_id="7",
                amount=Decimal("12000"), narration="Office Rent Paid via Cash"),
    ]
    return BookData(
        company=CompanyProfile(**config.company.model_dump()),
        ledgers=ledgers,
        vouchers=vouchers
    )


class BookService:
    """Session holder for one set of books"""

    def __init__(self, database: DatabaseService = None):
        self.database = database or database_service
        self.company = CompanyProfile(**config.company.model_dump())
        self.registry = LedgerRegistry()
        self.journal = VoucherJournal()

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def snapshot(self) -> BookData:
        return BookData(
            company=self.company,
            ledgers=list(self.registry),
            vouchers=list(self.journal)
        )

    def replace(self, book: BookData) -> None:
        """Swap in a whole book; nothing changes if any entry is invalid"""
        registry = LedgerRegistry(book.ledgers)
        journal = VoucherJournal(book.vouchers)
        self.company = book.company
        self.registry = registry
        self.journal = journal

    async def _commit(
        self,
        company: CompanyProfile = None,
        registry: LedgerRegistry = None,
        journal: VoucherJournal = None
    ) -> None:
        """Save staged stores, then swap them in. A failed save leaves the session untouched."""
        company = company or self.company
        registry = registry if registry is not None else self.registry
        journal = journal if journal is not None else self.journal

        await self.database.save_book(BookData(
            company=company,
            ledgers=list(registry),
            vouchers=list(journal)
        ))
        self.company = company
        self.registry = registry
        self.journal = journal

    async def load(self) -> None:
        book = await self.database.load_book()
        if book is None:
            book = sample_book() if config.database.seed_sample_data else BookData(
                company=CompanyProfile(**config.company.model_dump())
            )
            logger.info("No saved books found, starting a new set")
            await self._commit(book.company, LedgerRegistry(book.ledgers), VoucherJournal(book.vouchers))
            return
        self.replace(book)

    # ------------------------------------------------------------------
    # Ledgers
    # ------------------------------------------------------------------

    async def create_ledger(self, request: LedgerCreate) -> Ledger:
        if not request.name or not request.name.strip():
            logger.warning("Rejected ledger without a name")
            raise ValidationError("Ledger name is required")

        registry = self.registry.copy()
        ledger = registry.add(Ledger(
            id=generate_id(),
            name=request.name.strip(),
            group=request.group,
            opening_balance=request.opening_balance,
            gst_number=request.gst_number or None,
            contact=request.contact or None
        ))
        await self._commit(registry=registry)
        return ledger

    async def delete_ledger(self, ledger_id: str) -> bool:
        registry = self.registry.copy()
        removed = registry.remove(ledger_id)
        if removed:
            await self._commit(registry=registry)
        return removed

    def list_ledgers(self, search: Optional[str] = None) -> List[Ledger]:
        return self.registry.search(search)

    def get_ledger(self, ledger_id: str) -> Optional[Ledger]:
        return self.registry.find(ledger_id)

    # ------------------------------------------------------------------
    # Vouchers
    # ------------------------------------------------------------------

    async def create_voucher(self, request: VoucherCreate, today: datetime.date = None) -> Voucher:
        if request.type is None:
            logger.warning("Rejected voucher without a type")
            raise ValidationError("Voucher type is required")
        if not request.ledger_id:
            logger.warning("Rejected voucher without a party ledger")
            raise ValidationError("Voucher party ledger is required")
        if request.amount < 0:
            logger.warning(f"Rejected voucher with negative amount {request.amount}")
            raise ValidationError("Voucher amount must not be negative", details=str(request.amount))

        journal = self.journal.copy()
        voucher = journal.add(Voucher(
            id=generate_id(),
            date=request.date or today or datetime.date.today(),
            type=request.type,
            ledger_id=request.ledger_id,
            amount=request.amount,
            narration=request.narration,
            invoice_number=request.invoice_number or None
        ))
        await self._commit(journal=journal)
        return voucher

    async def delete_voucher(self, voucher_id: str) -> bool:
        journal = self.journal.copy()
        removed = journal.remove(voucher_id)
        if removed:
            await self._commit(journal=journal)
        return removed

    def list_vouchers(self, voucher_type: Optional[VoucherType] = None) -> List[Voucher]:
        if voucher_type is None:
            return list(self.journal)
        return list(self.journal.by_type(voucher_type))

    # ------------------------------------------------------------------
    # Reports and export
    # ------------------------------------------------------------------

    def day_book(self, date: datetime.date) -> DayBook:
        return report_service.compute_day_book(self.registry, self.journal, date)

    def trial_balance(self) -> List[TrialBalanceRow]:
        return report_service.compute_trial_balance(self.registry, self.journal)

    def profit_and_loss(self) -> ProfitAndLoss:
        return report_service.compute_profit_and_loss(self.journal)

    def dashboard(self) -> DashboardSummary:
        return report_service.compute_dashboard(self.registry, self.journal)

    def export_tally_xml(self) -> str:
        return export_interchange_document(self.registry, self.journal)

    # ------------------------------------------------------------------
    # Company, backup and restore
    # ------------------------------------------------------------------

    async def update_company(self, profile: CompanyProfile) -> CompanyProfile:
        await self._commit(company=profile)
        logger.info(f"Company profile updated: {profile.name}")
        return profile

    def backup(self) -> str:
        return self.snapshot().model_dump_json(indent=2)

    async def restore(self, payload: Union[str, bytes]) -> BookData:
        """Replace the whole book with a backup document"""
        try:
            book = BookData.model_validate_json(payload)
        except SchemaError as e:
            logger.warning(f"Rejected backup file: {e.error_count()} errors")
            raise ValidationError("Invalid backup file", details=str(e)) from e

        await self._commit(book.company, LedgerRegistry(book.ledgers), VoucherJournal(book.vouchers))
        logger.info(f"Books restored: {len(book.ledgers)} ledgers, {len(book.vouchers)} vouchers")
        return book


# Global service instance
book_service = BookService()
