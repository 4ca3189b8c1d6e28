"""
Database Service Module
Persists the company profile, ledgers and vouchers to SQLite
"""

import aiosqlite
import datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional

from ..config import config
from ..models.book import BookData
from ..models.master import CompanyProfile, Ledger
from ..models.transaction import Voucher
from ..utils.errors import StorageError
from ..utils.logger import logger


SCHEMA = [
    """CREATE TABLE IF NOT EXISTS company (
        id INTEGER PRIMARY KEY CHECK (id = 1),
        name TEXT NOT NULL DEFAULT '',
        address TEXT NOT NULL DEFAULT '',
        gst_number TEXT NOT NULL DEFAULT '',
        phone TEXT NOT NULL DEFAULT '',
        email TEXT NOT NULL DEFAULT ''
    )""",
    """CREATE TABLE IF NOT EXISTS mst_ledger (
        position INTEGER NOT NULL,
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        ledger_group TEXT NOT NULL,
        opening_balance TEXT NOT NULL,
        gst_number TEXT,
        contact TEXT
    )""",
    """CREATE TABLE IF NOT EXISTS trn_voucher (
        position INTEGER NOT NULL,
        id TEXT NOT NULL,
        date TEXT NOT NULL,
        voucher_type TEXT NOT NULL,
        ledger_id TEXT NOT NULL,
        amount TEXT NOT NULL,
        narration TEXT NOT NULL DEFAULT '',
        invoice_number TEXT
    )""",
]


class DatabaseService:
    """Service for SQLite persistence of the books"""

    def __init__(self, db_path: str = None):
        self.db_path = db_path or config.database.path

    async def _connect(self) -> aiosqlite.Connection:
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        connection = await aiosqlite.connect(self.db_path, timeout=30.0)
        connection.row_factory = aiosqlite.Row
        for statement in SCHEMA:
            await connection.execute(statement)
        return connection

    async def load_book(self) -> Optional[BookData]:
        """Load the saved book, or None when nothing has been saved yet"""
        try:
            db = await self._connect()
            try:
                async with db.execute("SELECT * FROM company WHERE id = 1") as cursor:
                    company_row = await cursor.fetchone()
                if company_row is None:
                    return None

                async with db.execute("SELECT * FROM mst_ledger ORDER BY position") as cursor:
                    ledger_rows = await cursor.fetchall()
                async with db.execute("SELECT * FROM trn_voucher ORDER BY position") as cursor:
                    voucher_rows = await cursor.fetchall()
            finally:
                await db.close()
        except aiosqlite.Error as e:
            logger.error(f"Failed to load books from {self.db_path}: {e}")
            raise StorageError("Could not load books", details=str(e)) from e

        try:
            book = self._decode_rows(company_row, ledger_rows, voucher_rows)
        except (ValueError, ArithmeticError) as e:  # pydantic errors are ValueErrors
            logger.error(f"Unreadable books in {self.db_path}: {e}")
            raise StorageError("Stored books are corrupt", details=str(e)) from e
        logger.info(f"Loaded {len(book.ledgers)} ledgers, {len(book.vouchers)} vouchers from {self.db_path}")
        return book

    def _decode_rows(self, company_row, ledger_rows, voucher_rows) -> BookData:
        return BookData(
            company=CompanyProfile(
                name=company_row["name"],
                address=company_row["address"],
                gst_number=company_row["gst_number"],
                phone=company_row["phone"],
                email=company_row["email"]
            ),
            ledgers=[
                Ledger(
                    id=row["id"],
                    name=row["name"],
                    group=row["ledger_group"],
                    opening_balance=Decimal(row["opening_balance"]),
                    gst_number=row["gst_number"],
                    contact=row["contact"]
                )
                for row in ledger_rows
            ],
            vouchers=[
                Voucher(
                    id=row["id"],
                    date=datetime.date.fromisoformat(row["date"]),
                    type=row["voucher_type"],
                    ledger_id=row["ledger_id"],
                    amount=Decimal(row["amount"]),
                    narration=row["narration"],
                    invoice_number=row["invoice_number"]
                )
                for row in voucher_rows
            ]
        )

    async def save_book(self, book: BookData) -> None:
        """Replace the stored book in a single transaction"""
        try:
            db = await self._connect()
            try:
                await db.execute("DELETE FROM company")
                await db.execute("DELETE FROM mst_ledger")
                await db.execute("DELETE FROM trn_voucher")

                company = book.company
                await db.execute(
                    "INSERT INTO company (id, name, address, gst_number, phone, email) VALUES (1, ?, ?, ?, ?, ?)",
                    (company.name, company.address, company.gst_number, company.phone, company.email)
                )
                await db.executemany(
                    "INSERT INTO mst_ledger VALUES (?, ?, ?, ?, ?, ?, ?)",
                    [
                        (i, l.id, l.name, l.group.value, str(l.opening_balance), l.gst_number, l.contact)
                        for i, l in enumerate(book.ledgers)
                    ]
                )
                await db.executemany(
                    "INSERT INTO trn_voucher VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                    [
                        (i, v.id, v.date.isoformat(), v.type.value, v.ledger_id, str(v.amount), v.narration, v.invoice_number)
                        for i, v in enumerate(book.vouchers)
                    ]
                )
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise
            finally:
                await db.close()
        except aiosqlite.Error as e:
            logger.error(f"Failed to save books to {self.db_path}: {e}")
            raise StorageError("Could not save books", details=str(e)) from e

        logger.debug(f"Saved {len(book.ledgers)} ledgers, {len(book.vouchers)} vouchers")

    def get_database_size(self) -> int:
        """Get database file size in bytes"""
        db_file = Path(self.db_path)
        return db_file.stat().st_size if db_file.exists() else 0


# Global service instance
database_service = DatabaseService()
