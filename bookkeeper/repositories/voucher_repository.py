"""
Voucher Repository
Insertion-ordered journal of vouchers
"""

import datetime
from typing import Iterable, Iterator, List

from ..models.transaction import Voucher, VoucherType
from ..utils.errors import ValidationError
from ..utils.logger import logger


class VoucherJournal:
    """Holds recorded vouchers. Create and delete only, no edits."""

    def __init__(self, vouchers: Iterable[Voucher] = ()):
        self._vouchers: List[Voucher] = []
        for voucher in vouchers:
            self.add(voucher)

    def __iter__(self) -> Iterator[Voucher]:
        return iter(list(self._vouchers))

    def __len__(self) -> int:
        return len(self._vouchers)

    def copy(self) -> "VoucherJournal":
        clone = VoucherJournal()
        clone._vouchers = list(self._vouchers)
        return clone

    def add(self, voucher: Voucher) -> Voucher:
        if not isinstance(voucher.type, VoucherType):
            raise ValidationError("Voucher type is required")
        if not voucher.ledger_id:
            raise ValidationError("Voucher party ledger is required")
        if voucher.amount is None or voucher.amount < 0:
            raise ValidationError(
                "Voucher amount must not be negative",
                details=f"{voucher.id}: {voucher.amount}"
            )

        self._vouchers.append(voucher)
        logger.info(f"Voucher added: {voucher.type.value} {voucher.amount} on {voucher.date} [{voucher.id}]")
        return voucher

    def remove(self, voucher_id: str) -> bool:
        remaining = [v for v in self._vouchers if v.id != voucher_id]
        if len(remaining) == len(self._vouchers):
            return False
        self._vouchers = remaining
        logger.info(f"Voucher removed: {voucher_id}")
        return True

    def by_date(self, date: datetime.date) -> Iterator[Voucher]:
        """Vouchers dated on the given day, lazily, in entry order"""
        return (v for v in self._vouchers if v.date == date)

    def by_ledger(self, ledger_id: str) -> Iterator[Voucher]:
        return (v for v in self._vouchers if v.ledger_id == ledger_id)

    def by_type(self, *types: VoucherType) -> Iterator[Voucher]:
        return (v for v in self._vouchers if v.type in types)
