"""
Ledger Repository
In-memory registry of ledgers, keyed on id and kept in insertion order
"""

from typing import Dict, Iterable, Iterator, List, Optional

from ..models.master import Ledger
from ..utils.constants import UNKNOWN_LEDGER
from ..utils.errors import ValidationError
from ..utils.helpers import matches_search
from ..utils.logger import logger


class LedgerRegistry:
    """Holds the chart of accounts. Names are not unique; ids are."""

    def __init__(self, ledgers: Iterable[Ledger] = ()):
        self._ledgers: Dict[str, Ledger] = {}
        for ledger in ledgers:
            self.add(ledger)

    def __iter__(self) -> Iterator[Ledger]:
        return iter(list(self._ledgers.values()))

    def __len__(self) -> int:
        return len(self._ledgers)

    def __contains__(self, ledger_id: str) -> bool:
        return ledger_id in self._ledgers

    def copy(self) -> "LedgerRegistry":
        clone = LedgerRegistry()
        clone._ledgers = dict(self._ledgers)
        return clone

    def add(self, ledger: Ledger) -> Ledger:
        if not ledger.id:
            raise ValidationError("Ledger id is required")
        if not ledger.name or not ledger.name.strip():
            raise ValidationError("Ledger name is required")
        if ledger.group is None:
            raise ValidationError("Ledger group is required")
        if ledger.id in self._ledgers:
            raise ValidationError(f"Ledger id already exists: {ledger.id}")

        self._ledgers[ledger.id] = ledger
        logger.info(f"Ledger added: {ledger.name} ({ledger.group.value}) [{ledger.id}]")
        return ledger

    def remove(self, ledger_id: str) -> bool:
        """Remove a ledger; vouchers pointing at it are left alone"""
        ledger = self._ledgers.pop(ledger_id, None)
        if ledger is None:
            return False
        logger.info(f"Ledger removed: {ledger.name} [{ledger_id}]")
        return True

    def find(self, ledger_id: str) -> Optional[Ledger]:
        return self._ledgers.get(ledger_id)

    def name_of(self, ledger_id: str) -> str:
        ledger = self.find(ledger_id)
        if ledger is None:
            logger.debug(f"Ledger {ledger_id} not found, using '{UNKNOWN_LEDGER}'")
            return UNKNOWN_LEDGER
        return ledger.name

    def search(self, term: Optional[str] = None) -> List[Ledger]:
        """Ledgers whose name or GSTIN contains the term"""
        if not term:
            return list(self)
        return [l for l in self if matches_search(term, l.name, l.gst_number)]
