"""
Config Controller
Handles company profile API endpoints
"""

from fastapi import APIRouter

from ..config import CompanyConfig, config, save_config
from ..models.master import CompanyProfile
from ..services.book_service import book_service
from ..utils.logger import logger
from ..views.json_view import JsonView

router = APIRouter()


@router.get("")
async def get_company():
    """Get the company profile"""
    return book_service.company


@router.put("")
async def update_company(profile: CompanyProfile):
    """Update the company profile"""
    updated = await book_service.update_company(profile)
    return JsonView.success("Company profile updated", updated)


@router.post("/defaults")
async def save_company_defaults():
    """Write the current profile to config.yaml as the default for new books"""
    config.company = CompanyConfig(**book_service.company.model_dump())
    save_config(config)
    logger.info(f"Company defaults saved: {config.company.name}")
    return JsonView.success("Company defaults saved", config.company)
