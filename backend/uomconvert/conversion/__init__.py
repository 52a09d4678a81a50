"""Conversion module for units of measurement."""

from .exceptions import (
    ConversionError,
    UnknownUnitError,
    CategoryMismatchError,
    MissingDataError,
    ZeroNotAllowedError,
    IncompatibleUnitsError,
    NonFiniteValueError,
    UnitFileError,
)
from .converter import (
    Converter,
    LinearConverter,
    UnitDescriptor,
)
from .reader import (
    ConverterReader,
    LinearFileReader,
)
from .registry import ConverterRegistry
from .service import ConversionService

__all__ = [
    'ConversionError',
    'UnknownUnitError',
    'CategoryMismatchError',
    'MissingDataError',
    'ZeroNotAllowedError',
    'IncompatibleUnitsError',
    'NonFiniteValueError',
    'UnitFileError',
    'Converter',
    'LinearConverter',
    'UnitDescriptor',
    'ConverterReader',
    'LinearFileReader',
    'ConverterRegistry',
    'ConversionService',
]
