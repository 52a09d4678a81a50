"""Pytest configuration and shared fixtures"""
import json

import pytest
from fastapi.testclient import TestClient

from uomconvert.api.dependencies import get_registry
from uomconvert.conversion import ConverterRegistry, LinearConverter
from uomconvert.main import app


@pytest.fixture
def joule():
    return LinearConverter("joule", "J", "joule", "Energy", 1.0)


@pytest.fixture
def kilojoule():
    return LinearConverter("kilojoule", "kJ", "joule", "Energy", 1000.0)


@pytest.fixture
def celsius():
    return LinearConverter("Celsius", "°C", "kelvin", "Temperature", 1.0, 273.15)


@pytest.fixture
def fahrenheit():
    return LinearConverter("Fahrenheit", "°F", "kelvin", "Temperature", 5 / 9, 273.15 - 32 * 5 / 9)


@pytest.fixture
def registry(joule, kilojoule, celsius, fahrenheit):
    """Registry holding a small energy and temperature data set"""
    registry = ConverterRegistry()
    for converter in (joule, kilojoule, celsius, fahrenheit):
        registry.add(converter)
    return registry


@pytest.fixture
def write_unit_file(tmp_path):
    """Write a unit data file into tmp_path and return its path"""
    def _write(filename, content):
        path = tmp_path / filename
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def energy_file_content():
    return {
        "category": "Energy",
        "description": "Energy units",
        "baseunit": "joule",
        "units": [
            {"name": "joule", "symbol": "J", "baseunit": "joule", "factor": 1},
            {"name": "kilojoule", "symbol": "kJ", "baseunit": "joule", "factor": 1000, "offset": 0},
            {"name": "kilowatt-hour", "symbol": "kWh", "baseunit": "joule", "factor": 3600000},
        ],
    }


@pytest.fixture(scope="function")
def client(registry):
    """Create FastAPI test client backed by the test registry"""
    app.dependency_overrides[get_registry] = lambda: registry

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
