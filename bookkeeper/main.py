"""
NAC Bookkeeper
Main Application Entry Point
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import config
from .utils.constants import APP_NAME, APP_VERSION
from .utils.errors import BookError
from .utils.logger import setup_logger, logger
from .services.book_service import book_service
from .views.json_view import JsonView
from .controllers.ledger_controller import router as ledger_router
from .controllers.voucher_controller import router as voucher_router
from .controllers.report_controller import router as report_router
from .controllers.export_controller import router as export_router
from .controllers.invoice_controller import router as invoice_router
from .controllers.config_controller import router as config_router
from .controllers.health_controller import router as health_router


# Setup logging
setup_logger(config.logging)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{APP_NAME} starting...")
    await book_service.load()
    logger.info(f"Books loaded: {len(book_service.registry)} ledgers, {len(book_service.journal)} vouchers")
    yield
    logger.info(f"{APP_NAME} shutting down...")


# Create FastAPI application
app = FastAPI(
    title=APP_NAME,
    description="Ledger and voucher bookkeeping with Tally XML export",
    version=APP_VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BookError)
async def book_error_handler(request: Request, exc: BookError):
    """Translate book errors into JSON error bodies"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=JsonView.book_error(exc))


# Include routers
app.include_router(ledger_router, prefix="/api/ledgers", tags=["Ledgers"])
app.include_router(voucher_router, prefix="/api/vouchers", tags=["Vouchers"])
app.include_router(report_router, prefix="/api/reports", tags=["Reports"])
app.include_router(export_router, prefix="/api/export", tags=["Export"])
app.include_router(invoice_router, prefix="/api/invoices", tags=["Invoices"])
app.include_router(config_router, prefix="/api/company", tags=["Company"])
app.include_router(health_router, prefix="/api/health", tags=["Health"])


@app.get("/")
async def root():
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs"
    }


@app.get("/api/info")
async def info():
    """System information"""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "company": book_service.company.name,
        "database": {
            "path": book_service.database.db_path
        }
    }
