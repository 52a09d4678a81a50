"""Load the unit data files into a fresh registry and print a summary"""
import sys

from uomconvert.common.config import settings
from uomconvert.conversion import ConversionError, ConverterRegistry, LinearFileReader


def check_unit_files(pattern: str) -> int:
    """Load every data file matching pattern and report what was found"""
    registry = ConverterRegistry()
    try:
        total = registry.add_from_files(LinearFileReader(), pattern)
    except ConversionError as e:
        print(f"Failed: {e}")
        return 1

    for category in registry.categories():
        units = registry.units_by_category(category)
        print(f"{category} ({len(units)} units, base: {units[0].base_unit})")
        for unit in units:
            print(f"  {unit.name:<24} {unit.symbol}")

    print(f"\n{total} units in {len(registry.categories())} categories")
    return 0


if __name__ == "__main__":
    pattern = sys.argv[1] if len(sys.argv) > 1 else settings.units.data_glob
    print(f"Checking unit files: {pattern}")
    sys.exit(check_unit_files(pattern))
