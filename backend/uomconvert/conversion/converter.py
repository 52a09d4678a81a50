"""Unit converters.

A converter describes one unit of measurement and knows how to express a
value of that unit in its category's base unit and back. Two converters can
convert between each other when they share both base unit and category.
"""
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict

from .exceptions import (
    IncompatibleUnitsError,
    MissingDataError,
    NonFiniteValueError,
    ZeroNotAllowedError,
)


@dataclass(frozen=True)
class UnitDescriptor:
    """Read-only description of a unit"""
    name: str
    symbol: str
    category: str
    base_unit: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "symbol": self.symbol,
            "category": self.category,
            "baseUOM": self.base_unit,
        }


class Converter(ABC):
    """Abstract base class for unit converters"""

    @property
    @abstractmethod
    def descriptor(self) -> UnitDescriptor:
        """Descriptor of the unit this converter represents"""
        pass

    @abstractmethod
    def to_base(self, value: float) -> float:
        """Express value (in this unit) in the base unit"""
        pass

    @abstractmethod
    def from_base(self, value: float) -> float:
        """Express a base unit value in this unit"""
        pass

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def symbol(self) -> str:
        return self.descriptor.symbol

    @property
    def category(self) -> str:
        return self.descriptor.category

    @property
    def base_unit(self) -> str:
        return self.descriptor.base_unit

    def convert(self, value: float, target: "Converter") -> float:
        """Convert value from this unit to the target unit.

        Args:
            value: Value expressed in this unit
            target: Converter of the unit to convert to

        Returns:
            The value expressed in the target unit

        Raises:
            IncompatibleUnitsError: If target is not a converter, or does not
                share base unit and category with this converter
            NonFiniteValueError: If value or the result is NaN or infinite
        """
        if not isinstance(target, Converter):
            raise IncompatibleUnitsError()
        if self.base_unit != target.base_unit or self.category != target.category:
            raise IncompatibleUnitsError()
        if not math.isfinite(value):
            raise NonFiniteValueError()
        result = target.from_base(self.to_base(value))
        if not math.isfinite(result):
            raise NonFiniteValueError()
        return result


class LinearConverter(Converter):
    """Converter for units related to their base unit by an affine transform.

    ``base_value = value * factor + offset``
    """

    __slots__ = ("_descriptor", "_factor", "_offset")

    def __init__(
        self,
        name: str,
        symbol: str,
        base_unit: str,
        category: str,
        factor: float,
        offset: float = 0.0,
    ):
        """Build a linear converter.

        Raises:
            MissingDataError: If name, base_unit or category is empty
            ZeroNotAllowedError: If factor is zero
            NonFiniteValueError: If factor or offset is NaN or infinite
        """
        if not name or not base_unit or not category:
            raise MissingDataError()
        if factor == 0:
            raise ZeroNotAllowedError()
        if not math.isfinite(factor) or not math.isfinite(offset):
            raise NonFiniteValueError()

        object.__setattr__(self, "_descriptor", UnitDescriptor(name, symbol, category, base_unit))
        object.__setattr__(self, "_factor", float(factor))
        object.__setattr__(self, "_offset", float(offset))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def descriptor(self) -> UnitDescriptor:
        return self._descriptor

    @property
    def factor(self) -> float:
        return self._factor

    @property
    def offset(self) -> float:
        return self._offset

    def to_base(self, value: float) -> float:
        return value * self._factor + self._offset

    def from_base(self, value: float) -> float:
        return (value - self._offset) / self._factor

    def __eq__(self, other) -> bool:
        if not isinstance(other, LinearConverter):
            return NotImplemented
        return (
            self._descriptor == other._descriptor
            and self._factor == other._factor
            and self._offset == other._offset
        )

    def __hash__(self) -> int:
        return hash((self._descriptor, self._factor, self._offset))

    def __repr__(self) -> str:
        return (
            f"LinearConverter(name={self.name!r}, symbol={self.symbol!r}, "
            f"base_unit={self.base_unit!r}, category={self.category!r}, "
            f"factor={self._factor!r}, offset={self._offset!r})"
        )
