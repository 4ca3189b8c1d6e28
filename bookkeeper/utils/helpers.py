"""
Helper Functions Module
Utility functions used across the application
"""

import secrets
import string
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from html import escape as html_escape


ID_ALPHABET = string.ascii_uppercase + string.digits
TWO_PLACES = Decimal("0.01")


def generate_id(length: int = 9) -> str:
    """Generate an upper-case alphanumeric identifier"""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def format_tally_date(value: date) -> str:
    """Format a date as Tally's YYYYMMDD (digits only)"""
    return value.strftime("%Y%m%d")


def format_tally_amount(amount: Decimal) -> str:
    """Plain decimal notation: 45000, -45000, 1250.5"""
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount.normalize(), "f")


def escape_xml_text(value: str) -> str:
    """Escape &, < and > for XML element text"""
    if value is None:
        return ""
    return html_escape(str(value), quote=False)


def round_money(amount: Decimal) -> Decimal:
    """Round to paise"""
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def matches_search(term: str, *values) -> bool:
    """Case-insensitive substring match against any of the given values"""
    needle = term.lower()
    return any(needle in value.lower() for value in values if value)
