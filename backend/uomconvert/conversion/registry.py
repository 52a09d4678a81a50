"""Thread-safe in-memory store of unit converters"""
import glob
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from .converter import Converter, UnitDescriptor
from .reader import ConverterReader

logger = logging.getLogger(__name__)


class _SharedExclusiveLock:
    """Lock allowing many concurrent readers or a single writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def shared(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ConverterRegistry:
    """Store of converters keyed by case-insensitive unit name.

    Readers (get, categories, units_by_category, names) run concurrently;
    writers (add, remove, clear) run alone.
    """

    def __init__(self):
        self._lock = _SharedExclusiveLock()
        self._data: Dict[str, Converter] = {}

    def get(self, name: str) -> Optional[Converter]:
        """Look up a converter by name, ignoring case. Returns None if absent."""
        with self._lock.shared():
            return self._data.get(name.lower())

    def add(self, converter: Converter) -> None:
        """Add a converter, replacing any converter with the same name."""
        with self._lock.exclusive():
            self._data[converter.name.lower()] = converter
        logger.debug(f"Added converter: {converter.name}")

    def remove(self, name: str) -> None:
        """Remove a converter by name. Does nothing if it is not stored."""
        with self._lock.exclusive():
            removed = self._data.pop(name.lower(), None)
        if removed is not None:
            logger.debug(f"Removed converter: {removed.name}")

    def clear(self) -> None:
        """Remove every converter."""
        with self._lock.exclusive():
            self._data = {}
        logger.debug("Cleared converter registry")

    def categories(self) -> List[str]:
        """Distinct categories of stored converters, sorted ignoring case."""
        with self._lock.shared():
            categories = {c.category for c in self._data.values()}
        return sorted(categories, key=str.lower)

    def units_by_category(self, category: str) -> List[UnitDescriptor]:
        """Descriptors of converters in category (exact match), sorted by name ignoring case."""
        with self._lock.shared():
            units = [c.descriptor for c in self._data.values() if c.category == category]
        return sorted(units, key=lambda u: u.name.lower())

    def names(self) -> List[str]:
        with self._lock.shared():
            names = [c.name for c in self._data.values()]
        return sorted(names, key=str.lower)

    def add_from_files(self, reader: ConverterReader, pattern: str) -> int:
        """Load converters from every ``*.json`` file matching a glob pattern.

        Stops at the first file that fails; converters from files read
        before the failure stay in the registry.

        Args:
            reader: Reader that turns one file into a list of converters
            pattern: Glob pattern of data files

        Returns:
            Number of converters added

        Raises:
            UnitFileError: If a file cannot be read or parsed
            ConversionError: If a file defines an invalid converter
        """
        total = 0
        for path in sorted(glob.glob(pattern)):
            if not path.endswith(".json"):
                continue
            converters = reader.read_file(path)
            for converter in converters:
                self.add(converter)
            total += len(converters)
            logger.info(f"Loaded {len(converters)} converters from {path}")

        logger.info(f"Loaded {total} converters matching {pattern}")
        return total

    def __len__(self) -> int:
        with self._lock.shared():
            return len(self._data)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.get(name) is not None
