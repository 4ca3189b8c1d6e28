"""
Constants Module
Application-wide constants
"""

# Application Info
APP_NAME = "NAC Bookkeeper"
APP_VERSION = "1.0.0"

# Sentinel shown wherever a voucher points at a deleted ledger
UNKNOWN_LEDGER = "Unknown Ledger"

# Contra ledgers inferred by the Tally export
SALES_ACCOUNT = "Sales Account"
PURCHASE_ACCOUNT = "Purchase Account"
CASH_ACCOUNT = "Cash Account"

# Tally Import XML
TALLY_IMPORT_ENVELOPE_START = (
    '<ENVELOPE>\n'
    ' <HEADER>\n'
    '  <TALLYREQUEST>Import Data</TALLYREQUEST>\n'
    ' </HEADER>\n'
    ' <BODY>\n'
    '  <IMPORTDATA>\n'
    '   <REQUESTDESC>\n'
    '    <REPORTNAME>Vouchers</REPORTNAME>\n'
    '   </REQUESTDESC>\n'
    '   <REQUESTDATA>\n'
    '    <TALLYMESSAGE xmlns:UDF="TallyUDF">\n'
)
TALLY_IMPORT_ENVELOPE_END = (
    '    </TALLYMESSAGE>\n'
    '   </REQUESTDATA>\n'
    '  </IMPORTDATA>\n'
    ' </BODY>\n'
    '</ENVELOPE>'
)

# Dashboard
RECENT_VOUCHER_COUNT = 5

# Error Codes
class ErrorCode:
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EXPORT_FAILED = "EXPORT_FAILED"
    STORAGE_ERROR = "STORAGE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

# Health Status
class HealthStatus:
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
