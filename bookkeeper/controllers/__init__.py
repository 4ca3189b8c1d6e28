# Controllers Package
# MVC Controller Layer

from .ledger_controller import router as ledger_router
from .voucher_controller import router as voucher_router
from .report_controller import router as report_router
from .export_controller import router as export_router
from .invoice_controller import router as invoice_router
from .config_controller import router as config_router
from .health_controller import router as health_router

__all__ = [
    "ledger_router",
    "voucher_router",
    "report_router",
    "export_router",
    "invoice_router",
    "config_router",
    "health_router"
]
