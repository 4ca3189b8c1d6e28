# Services Package
# Business Logic Layer

from .balance_service import balance_of, natural_side
from .report_service import compute_trial_balance, compute_profit_and_loss
from .xml_builder import XMLBuilder, export_interchange_document
from .invoice_service import InvoiceService
from .database_service import DatabaseService
from .book_service import BookService
from .health_service import HealthService

__all__ = [
    "balance_of",
    "natural_side",
    "compute_trial_balance",
    "compute_profit_and_loss",
    "XMLBuilder",
    "export_interchange_document",
    "InvoiceService",
    "DatabaseService",
    "BookService",
    "HealthService"
]
