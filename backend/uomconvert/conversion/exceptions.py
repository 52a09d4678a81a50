"""Errors raised while building converters and converting values"""
from typing import Optional


class ConversionError(Exception):
    """Base exception for unit conversion errors"""
    pass


class UnknownUnitError(ConversionError):
    """Raised when a unit name is not in the registry"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown unit: {name}")


class CategoryMismatchError(ConversionError):
    """Raised when units belong to different categories"""

    def __init__(self, message: str = "units are not in the same category"):
        super().__init__(message)


class MissingDataError(ConversionError):
    """Raised when a required converter field is empty"""

    def __init__(self, message: str = "missing data"):
        super().__init__(message)


class ZeroNotAllowedError(ConversionError):
    """Raised when a conversion factor is zero"""

    def __init__(self, message: str = "zero not allowed"):
        super().__init__(message)


class IncompatibleUnitsError(ConversionError):
    """Raised when source and target do not share base unit and category"""

    def __init__(self, message: str = "incompatible units"):
        super().__init__(message)


class UnitFileError(ConversionError):
    """Raised when a unit data file cannot be read or parsed"""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"invalid unit file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NonFiniteValueError(ConversionError):
    """Raised when a factor, offset or value is NaN or infinite"""

    def __init__(self, message: str = "non-finite number not allowed"):
        super().__init__(message)
