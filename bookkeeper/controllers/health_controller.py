"""
Health Controller
Reports whether the books are loaded and the database is readable
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..services.health_service import health_service
from ..utils.constants import HealthStatus

router = APIRouter()


def _respond(report: dict) -> JSONResponse:
    status_code = 200 if report["status"] == HealthStatus.HEALTHY else 503
    return JSONResponse(status_code=status_code, content=report)


@router.get("")
async def health_check():
    return _respond(await health_service.check_all())


@router.get("/database")
async def database_health():
    """Database file is present and the saved books decode"""
    return _respond(await health_service.check_database())


@router.get("/books")
async def books_health():
    """Ledger and voucher counts of the loaded session"""
    return _respond(health_service.check_books())
