"""
Tests for the FastAPI application.
"""

import pytest
from fastapi.testclient import TestClient

from coordkit.api.main import app

CONVERT = "/api/v1/coordinates/convert"


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(app)


def test_root_endpoint(client: TestClient) -> None:
    """Test the root endpoint returns correct information."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "coordkit API"
    assert data["version"] == "0.1.0"
    assert set(data.keys()) == {"name", "version", "description"}


def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestListSystems:
    """Tests for GET /coordinates/systems."""

    def test_lists_all_notations(self, client: TestClient) -> None:
        response = client.get("/api/v1/coordinates/systems")

        assert response.status_code == 200
        data = response.json()
        assert [system["name"] for system in data["systems"]] == [
            "dd",
            "ddm",
            "dms",
            "mgrs",
            "utm",
        ]
        assert data["systems"][0]["label"] == "Decimal Degrees"
        assert data["default_system"] == "dd"
        assert data["default_format"] == "LATLON"


class TestConvert:
    """Tests for POST /coordinates/convert."""

    def test_convert_text(self, client: TestClient) -> None:
        """Text is rendered in every notation and ordering."""
        response = client.post(
            CONVERT,
            json={
                "input": "40° 42' 46.08\" N / 74° 0' 21.6\" W",
                "system": "dms",
                "format": "LATLON",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["raw"] == {"LAT": 40.7128, "LON": -74.006}
        assert data["formats"]["dd"] == {
            "LATLON": "40.7128 N / 74.006 W",
            "LONLAT": "74.006 W / 40.7128 N",
        }
        assert data["formats"]["dms"]["LATLON"] == "40 42 46.08 N / 74 0 21.6 W"
        assert data["formats"]["utm"]["LATLON"].startswith("18N ")
        assert data["formats"]["mgrs"]["LATLON"].startswith("18T ")

    def test_convert_pair(self, client: TestClient) -> None:
        response = client.post(CONVERT, json={"input": [-74.006, 40.7128], "format": "LONLAT"})

        assert response.status_code == 200
        assert response.json()["raw"] == {"LAT": 40.7128, "LON": -74.006}

    def test_convert_object(self, client: TestClient) -> None:
        response = client.post(CONVERT, json={"input": {"Latitude": 1.5, "Longitude": 2.5}})

        assert response.status_code == 200
        assert response.json()["formats"]["dd"]["LATLON"] == "1.5 N / 2.5 E"

    def test_invalid_coordinate(self, client: TestClient) -> None:
        """Every parse message is listed in the error response."""
        response = client.post(CONVERT, json={"input": "91 N / 181 E"})

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "PARSE_ERROR"
        assert data["details"]["system"] == "dd"
        assert [error["message"] for error in data["errors"]] == [
            "[ERROR] Degrees value (91) exceeds max value (90).",
            "[ERROR] Degrees value (181) exceeds max value (180).",
        ]
        assert all(error["field"] == "input" for error in data["errors"])

    def test_invalid_object(self, client: TestClient) -> None:
        response = client.post(CONVERT, json={"input": {"x": 1, "y": 2}})

        assert response.status_code == 422
        assert response.json()["error_code"] == "PARSE_ERROR"

    def test_unknown_system(self, client: TestClient) -> None:
        """Request validation failures use the validation error code."""
        response = client.post(CONVERT, json={"input": "1 / 2", "system": "geohash"})

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["errors"]

    def test_missing_input(self, client: TestClient) -> None:
        response = client.post(CONVERT, json={"system": "dd"})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
