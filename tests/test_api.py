"""
FastAPI endpoint tests for the LEI Validator API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from api import app
from fastapi.testclient import TestClient

from lei_validator import __version__

client = TestClient(app)

VALID_LEI = "213800D1L3R2MWV39G88"


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data == {"status": "healthy", "version": __version__}


class TestValidateEndpoint:
    def test_accepts_valid_lei(self) -> None:
        resp = client.post("/validate", json={"lei": VALID_LEI})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["errors"] == []
        assert data["lei"] == VALID_LEI

    def test_parts_use_camel_case(self) -> None:
        data = client.post("/validate", json={"lei": VALID_LEI}).json()
        assert data["parts"] == {
            "louPrefix": "2138",
            "entityPart": "00D1L3R2MWV39G",
            "checkDigits": "88",
        }

    def test_lowercase_is_canonicalised(self) -> None:
        data = client.post("/validate", json={"lei": VALID_LEI.lower()}).json()
        assert data["is_valid"] is True
        assert data["lei"] == VALID_LEI

    def test_rejects_bad_checksum(self) -> None:
        data = client.post("/validate", json={"lei": "213800D1L3R2MWV39G89"}).json()
        assert data["is_valid"] is False
        assert data["errors"] == ["Invalid check digits"]

    def test_rejects_wrong_length_with_200(self) -> None:
        resp = client.post("/validate", json={"lei": "2138"})
        assert resp.status_code == 200
        assert resp.json()["errors"] == ["LEI must be exactly 20 characters long"]


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/validate", json={})
        assert resp.status_code == 422

    def test_non_string_lei_returns_422(self) -> None:
        resp = client.post("/validate", json={"lei": 12345})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/validate")
        assert resp.status_code == 422


class TestPartsEndpoint:
    def test_parts(self) -> None:
        resp = client.get(f"/lei/{VALID_LEI}/parts")
        assert resp.status_code == 200
        assert resp.json() == {
            "louPrefix": "2138",
            "entityPart": "00D1L3R2MWV39G",
            "checkDigits": "88",
        }

    def test_parts_of_short_value(self) -> None:
        data = client.get("/lei/ab/parts").json()
        assert data == {"louPrefix": "AB", "entityPart": "", "checkDigits": ""}


class TestCheckDigitsEndpoint:
    def test_generates_check_digits(self) -> None:
        resp = client.post("/check-digits", json={"partial_lei": "213800d1l3r2mwv39g"})
        assert resp.status_code == 200
        assert resp.json() == {
            "partial_lei": "213800D1L3R2MWV39G",
            "check_digits": "88",
            "lei": VALID_LEI,
        }

    def test_wrong_length_returns_422(self) -> None:
        resp = client.post("/check-digits", json={"partial_lei": "2138"})
        assert resp.status_code == 422
        assert "18 characters" in resp.json()["detail"]

    def test_invalid_characters_return_422(self) -> None:
        resp = client.post("/check-digits", json={"partial_lei": "213800D1L3R2MWV3-G"})
        assert resp.status_code == 422
        assert "invalid characters" in resp.json()["detail"]
