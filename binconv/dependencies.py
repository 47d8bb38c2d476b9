from fastapi import Depends

from .config import Settings, get_settings
from .services.conversion_service import ConversionService


async def get_conversion_service(settings: Settings = Depends(get_settings)) -> ConversionService:
    """Get ConversionService instance bound to the current settings."""
    return ConversionService(settings)
