"""
Export Controller
Handles Tally XML export, backup and restore endpoints
"""

from datetime import date
from fastapi import APIRouter, Request
from fastapi.responses import Response

from ..config import config
from ..services.book_service import book_service
from ..views.json_view import JsonView

router = APIRouter()


@router.get("/tally")
async def export_tally():
    """Download all vouchers as Tally import XML"""
    content = book_service.export_tally_xml()
    filename = f"{config.export.file_prefix}_{date.today().isoformat()}.xml"
    return Response(
        content=content,
        media_type="application/xml",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@router.get("/backup")
async def download_backup():
    """Download the whole book as JSON"""
    filename = f"NAC_Backup_{date.today().isoformat()}.json"
    return Response(
        content=book_service.backup(),
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@router.post("/restore")
async def restore_backup(request: Request):
    """Replace the whole book with an uploaded backup"""
    payload = await request.body()
    book = await book_service.restore(payload)
    return JsonView.success(
        "Books restored",
        {"ledgers": len(book.ledgers), "vouchers": len(book.vouchers)}
    )
