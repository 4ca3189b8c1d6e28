"""
XML Builder Module
Generates the Tally "Import Data" XML document for the voucher journal
"""

from typing import List

from ..models.transaction import LedgerEntry, VoucherEntries
from ..repositories import LedgerRegistry, VoucherJournal
from ..utils.constants import TALLY_IMPORT_ENVELOPE_END, TALLY_IMPORT_ENVELOPE_START
from ..utils.decorators import timed
from ..utils.errors import ExportFailure
from ..utils.helpers import escape_xml_text, format_tally_amount, format_tally_date
from ..utils.logger import logger
from .double_entry import build_entries


class XMLBuilder:
    """Builds Tally import XML from double-entry vouchers"""

    def _deemed_positive(self, entry: LedgerEntry) -> str:
        # Tally flags the negative-amount leg as deemed positive
        return "No" if entry.positive else "Yes"

    def build_ledger_entry_xml(self, entry: LedgerEntry) -> str:
        retval = '      <ALLLEDGERENTRIES.LIST>\n'
        retval += f'       <LEDGERNAME>{escape_xml_text(entry.ledger_name)}</LEDGERNAME>\n'
        retval += f'       <ISDEEMEDPOSITIVE>{self._deemed_positive(entry)}</ISDEEMEDPOSITIVE>\n'
        retval += f'       <AMOUNT>{format_tally_amount(entry.amount)}</AMOUNT>\n'
        retval += '      </ALLLEDGERENTRIES.LIST>\n'
        return retval

    def build_voucher_xml(self, voucher: VoucherEntries) -> str:
        """VOUCHER block: type, date, narration, reference, party, then both legs"""
        retval = f'     <VOUCHER VCHTYPE="{voucher.type.value}" ACTION="Create">\n'
        retval += f'      <DATE>{format_tally_date(voucher.date)}</DATE>\n'
        retval += f'      <NARRATION>{escape_xml_text(voucher.narration)}</NARRATION>\n'
        retval += f'      <VOUCHERNUMBER>{escape_xml_text(voucher.reference)}</VOUCHERNUMBER>\n'
        retval += f'      <PARTYLEDGERNAME>{escape_xml_text(voucher.party_ledger_name)}</PARTYLEDGERNAME>\n'

        for entry in voucher.entries:
            retval += self.build_ledger_entry_xml(entry)

        retval += '     </VOUCHER>\n'
        return retval

    def build_import_xml(self, vouchers: List[VoucherEntries]) -> str:
        retval = TALLY_IMPORT_ENVELOPE_START
        for voucher in vouchers:
            retval += self.build_voucher_xml(voucher)
        retval += TALLY_IMPORT_ENVELOPE_END
        return retval


# Global instance
xml_builder = XMLBuilder()


@timed
def export_interchange_document(registry: LedgerRegistry, journal: VoucherJournal) -> str:
    """
    Serialize every voucher in the journal, or none at all.

    Raises ExportFailure if the document cannot be built.
    """
    vouchers = list(journal)
    try:
        document = xml_builder.build_import_xml([build_entries(v, registry) for v in vouchers])
    except Exception as e:
        logger.error(f"Tally export failed after reading {len(vouchers)} vouchers: {e}")
        raise ExportFailure("Tally export could not be completed", details=str(e)) from e

    logger.info(f"Tally export built for {len(vouchers)} vouchers")
    return document
