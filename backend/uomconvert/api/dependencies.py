"""FastAPI dependencies"""
from fastapi import Depends, Request

from uomconvert.conversion import ConversionService, ConverterRegistry


def get_registry(request: Request) -> ConverterRegistry:
    """Get the application's converter registry."""
    return request.app.state.registry


def get_conversion_service(
    registry: ConverterRegistry = Depends(get_registry)
) -> ConversionService:
    """Get conversion service instance."""
    return ConversionService(registry)
