"""Tests for the conversion API endpoints."""

import json

import pytest


class TestHealth:
    """Test service endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["units"] == 4


class TestConvertEndpoint:
    """Test GET /api/v1/convert."""

    def test_convert(self, client):
        """Test a successful conversion."""
        response = client.get("/api/v1/convert", params={"value": 1000, "from": "joule", "to": "kilojoule"})
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert data["ok"] is True
        assert data["result"] == 1.0
        assert data["category"] == "Energy"
        assert data["tosymbol"] == "kJ"

    def test_convert_temperature(self, client):
        """Test an offset conversion."""
        response = client.get("/api/v1/convert", params={"value": 100, "from": "Celsius", "to": "FAHRENHEIT"})
        assert response.json()["result"] == pytest.approx(212.0)

    def test_unknown_unit(self, client):
        """Test failures are reported in the envelope."""
        response = client.get("/api/v1/convert", params={"value": 1, "from": "furlong", "to": "joule"})
        assert response.status_code == 200
        assert response.json() == {"ok": False, "message": "unknown unit: furlong"}

    def test_missing_parameter(self, client):
        """Test missing query parameters are rejected."""
        response = client.get("/api/v1/convert", params={"value": 1, "from": "joule"})
        assert response.status_code == 422

    @pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
    def test_non_finite_value(self, client, value):
        """Test NaN and infinite values are rejected."""
        response = client.get("/api/v1/convert", params={"value": value, "from": "joule", "to": "kilojoule"})
        assert response.status_code == 422

    def test_non_numeric_value(self, client):
        """Test non-numeric values are rejected."""
        response = client.get("/api/v1/convert", params={"value": "abc", "from": "joule", "to": "kilojoule"})
        assert response.status_code == 422


class TestListingEndpoints:
    """Test category and unit listings."""

    def test_categories(self, client):
        response = client.get("/api/v1/categories")
        assert response.status_code == 200
        assert response.json() == {"categories": ["Energy", "Temperature"]}

    def test_units(self, client):
        response = client.get("/api/v1/categories/Energy/units")
        assert response.status_code == 200
        assert response.json() == {
            "category": "Energy",
            "units": [
                {"name": "joule", "symbol": "J", "category": "Energy", "baseUOM": "joule"},
                {"name": "kilojoule", "symbol": "kJ", "category": "Energy", "baseUOM": "joule"},
            ],
        }

    def test_units_unknown_category(self, client):
        response = client.get("/api/v1/categories/Nothing/units")
        assert response.status_code == 200
        assert response.json()["units"] == []


class TestUnitEndpoints:
    """Test adding and removing units."""

    def test_add_unit(self, client, registry):
        """Test a new unit becomes convertible."""
        response = client.post("/api/v1/units", json={
            "name": "megajoule",
            "symbol": "MJ",
            "baseunit": "joule",
            "category": "Energy",
            "factor": 1000000,
        })
        assert response.status_code == 201
        assert response.json()["baseUOM"] == "joule"
        assert registry.get("MEGAJOULE").offset == 0.0

        data = client.get("/api/v1/convert", params={"value": 1, "from": "megajoule", "to": "kilojoule"}).json()
        assert data["result"] == 1000.0

    def test_add_unit_zero_factor(self, client):
        """Test invalid units are rejected."""
        response = client.post("/api/v1/units", json={
            "name": "nothing",
            "baseunit": "joule",
            "category": "Energy",
            "factor": 0,
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "zero not allowed"

    @pytest.mark.parametrize("field", ["factor", "offset"])
    def test_add_unit_non_finite(self, client, registry, field):
        """Test NaN factors and offsets are rejected."""
        body = {"name": "bad", "baseunit": "joule", "category": "Energy", "factor": 1, "offset": 0}
        body[field] = "NaN"
        content = json.dumps(body).replace('"NaN"', "NaN")
        response = client.post(
            "/api/v1/units",
            content=content,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert registry.get("bad") is None

    def test_add_unit_missing_field(self, client):
        """Test request validation."""
        response = client.post("/api/v1/units", json={"name": "x", "factor": 1})
        assert response.status_code == 422

    def test_remove_unit(self, client, registry):
        response = client.delete("/api/v1/units/KILOJOULE")
        assert response.status_code == 200
        assert registry.get("kilojoule") is None

    def test_remove_unknown_unit(self, client):
        response = client.delete("/api/v1/units/furlong")
        assert response.status_code == 404
