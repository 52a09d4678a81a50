"""Readers that build converters from unit data files"""
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from .converter import Converter, LinearConverter
from .exceptions import UnitFileError

logger = logging.getLogger(__name__)


class ConverterReader(ABC):
    """Abstract base class for converter file readers"""

    @abstractmethod
    def read_file(self, path: str) -> List[Converter]:
        """Read one file and return the converters it defines"""
        pass


class LinearUnitEntry(BaseModel):
    """One unit in a linear unit data file"""
    name: str = ""
    symbol: str = ""
    baseunit: Optional[str] = None
    factor: float = Field(default=0.0, allow_inf_nan=False)
    offset: float = Field(default=0.0, allow_inf_nan=False)


class LinearUnitFile(BaseModel):
    """Layout of a linear unit data file"""
    category: str = ""
    description: str = ""
    baseunit: str = ""
    units: List[LinearUnitEntry] = Field(default_factory=list)


class LinearFileReader(ConverterReader):
    """Reads JSON files describing linear units of one category.

    Every unit takes the file's ``category`` and ``baseunit``.
    """

    def read_file(self, path: str) -> List[Converter]:
        layout = self._load_layout(path)

        converters: List[Converter] = []
        for unit in layout.units:
            converters.append(
                LinearConverter(
                    name=unit.name,
                    symbol=unit.symbol,
                    base_unit=layout.baseunit,
                    category=layout.category,
                    factor=unit.factor,
                    offset=unit.offset,
                )
            )
        logger.debug(f"Read {len(converters)} units from {path} ({layout.category})")
        return converters

    def _load_layout(self, path: str) -> LinearUnitFile:
        try:
            with open(Path(path), 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except OSError as e:
            raise UnitFileError(path, str(e)) from e
        except json.JSONDecodeError as e:
            raise UnitFileError(path, f"invalid JSON: {e}") from e

        try:
            return LinearUnitFile.model_validate(raw)
        except ValidationError as e:
            raise UnitFileError(path, f"schema mismatch: {e.error_count()} error(s)") from e
