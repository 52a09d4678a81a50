"""Conversion service: resolves unit names and converts values."""

import logging
from typing import List, Tuple

from uomconvert.common.schemas import ConversionResponse
from uomconvert.conversion.converter import Converter, UnitDescriptor
from uomconvert.conversion.exceptions import ConversionError, UnknownUnitError
from uomconvert.conversion.registry import ConverterRegistry

logger = logging.getLogger(__name__)


class ConversionService:
    """Service converting values between units held in a registry."""

    def __init__(self, registry: ConverterRegistry):
        """Initialize conversion service.

        Args:
            registry: ConverterRegistry to resolve unit names against
        """
        self.registry = registry

    def resolve(self, from_unit: str, to_unit: str) -> Tuple[Converter, Converter]:
        """Look up source and target converters.

        Raises:
            UnknownUnitError: If either name is not registered
        """
        source = self.registry.get(from_unit)
        if source is None:
            raise UnknownUnitError(from_unit)
        target = self.registry.get(to_unit)
        if target is None:
            raise UnknownUnitError(to_unit)
        return source, target

    def to_value(self, value: float, from_unit: str, to_unit: str) -> float:
        """Convert value from one unit to another.

        Args:
            value: The numeric value to convert
            from_unit: Name of the unit to convert from (case-insensitive)
            to_unit: Name of the unit to convert to (case-insensitive)

        Returns:
            The converted value

        Raises:
            UnknownUnitError: If either unit is not registered
            IncompatibleUnitsError: If the units do not share base unit and category
        """
        source, target = self.resolve(from_unit, to_unit)
        return source.convert(value, target)

    def describe(self, value: float, from_unit: str, to_unit: str) -> ConversionResponse:
        """Convert value and describe the outcome as a response envelope.

        Conversion errors are reported in the envelope instead of raised.
        """
        try:
            source, target = self.resolve(from_unit, to_unit)
            result = source.convert(value, target)
        except ConversionError as e:
            logger.info(f"Conversion {from_unit} -> {to_unit} failed: {e}")
            return ConversionResponse(ok=False, message=str(e))

        return ConversionResponse(
            ok=True,
            message="success",
            result=result,
            category=target.category,
            from_unit=from_unit,
            from_symbol=source.symbol,
            to_unit=to_unit,
            to_symbol=target.symbol,
            base_unit=target.base_unit,
        )

    def to_json(self, value: float, from_unit: str, to_unit: str) -> bytes:
        """Convert value and return the response envelope as JSON bytes."""
        response = self.describe(value, from_unit, to_unit)
        return response.model_dump_json(by_alias=True).encode("utf-8")

    def categories(self) -> List[str]:
        return self.registry.categories()

    def units_by_category(self, category: str) -> List[UnitDescriptor]:
        return self.registry.units_by_category(category)
