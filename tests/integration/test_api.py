"""End-to-end tests for the HTTP surface, with a scripted oracle and the in-memory store."""

import re
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from freezegun import freeze_time

from siren.api.app import create_app
from siren.api.dependencies import get_oracle_client, get_repository
from siren.config import Settings
from siren.core.exceptions import OracleError, RepositoryError
from siren.services.extraction import ERROR_PAYLOAD
from tests.conftest import FIRE_REPORT, ScriptedOracle

pytestmark = pytest.mark.integration

INTAKE_URL = "/api/chiron/audio-output"
TIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$")


class TestAudioOutput:
    def test_extracts_and_stores_report(self, client):
        with freeze_time("2025-09-15 12:20:45", real_asyncio=True):
            response = client.post(INTAKE_URL, json={"text": FIRE_REPORT})

        assert response.status_code == 200
        assert response.json() == {
            "department": "fire",
            "priority": "high",
            "location": "Building B",
            "summary": "Fire incident with two cars burning",
            "time": "2025-09-15 12:20",
        }

        listed = client.get("/api/siren/db/fire").json()
        assert len(listed) == 1
        assert listed[0]["id"]
        assert listed[0]["summary"] == "Fire incident with two cars burning"
        assert listed[0]["name"] is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"json": {"text": None}},
            {"json": {"text": ""}},
            {"json": {"text": "  \n "}},
            {"json": {}},
            {},
        ],
        ids=["null", "empty", "blank", "no-text-key", "no-body"],
    )
    def test_missing_text_is_400(self, kwargs, client, oracle, repository):
        response = client.post(INTAKE_URL, **kwargs)

        assert response.status_code == 400
        assert response.json() == {"error": "Text is missing"}
        assert oracle.prompts == []
        assert len(repository) == 0

    def test_oracle_failure_stores_fallback(self, app, client, repository):
        app.dependency_overrides[get_oracle_client] = lambda: ScriptedOracle(error=OracleError("quota exceeded"))

        response = client.post(INTAKE_URL, json={"text": "Man collapsed at the station"})

        assert response.status_code == 200
        body = response.json()
        assert body["summary"] == "Man collapsed at the station"
        assert body["status"] == "Unknown"
        assert TIME_PATTERN.match(body["time"])
        assert len(repository) == 1

    def test_unexpected_failure_returns_error_payload(self, app, client, repository):
        app.dependency_overrides[get_oracle_client] = lambda: ScriptedOracle(error=RuntimeError("boom"))

        response = client.post(INTAKE_URL, json={"text": FIRE_REPORT})

        assert response.status_code == 200
        assert response.json() == ERROR_PAYLOAD
        assert len(repository) == 0

    def test_store_outage_is_503(self, app, client):
        broken = MagicMock()
        broken.save = AsyncMock(side_effect=RepositoryError("connection refused", operation="save"))
        app.dependency_overrides[get_repository] = lambda: broken

        response = client.post(INTAKE_URL, json={"text": FIRE_REPORT})

        assert response.status_code == 503
        assert response.json() == {"error": "connection refused"}


class TestRecords:
    def _seed(self, client, **fields):
        response = client.post("/api/siren/db", json=fields)
        assert response.status_code == 201
        return response.json()

    def test_list_filters_and_sorts_by_time(self, client):
        self._seed(client, department="police", time="2025-09-15 12:20", summary="later")
        self._seed(client, department="police", time="2025-01-01 08:00", summary="earlier")
        self._seed(client, department="fire", time="2024-01-01 00:00", summary="other department")

        response = client.get("/api/siren/db/police")

        assert response.status_code == 200
        assert [record["summary"] for record in response.json()] == ["earlier", "later"]

    def test_list_unknown_department_is_empty(self, client):
        response = client.get("/api/siren/db/space")

        assert response.status_code == 200
        assert response.json() == []

    def test_listed_records_carry_every_field(self, client):
        created = self._seed(client, department="IT", name="Kushwanth", priority="HIGH")

        (listed,) = client.get("/api/siren/db/IT").json()

        assert listed == created
        assert set(listed) == {"id", "name", "department", "time", "priority", "location", "summary", "status"}

    def test_delete_removes_record(self, client, repository):
        created = self._seed(client, department="forest", summary="Smoke seen")

        response = client.delete(f"/api/siren/db/{created['id']}")

        assert response.status_code == 200
        assert response.content == b""
        assert client.get("/api/siren/db/forest").json() == []
        assert len(repository) == 0

    def test_delete_unknown_id_still_succeeds(self, client):
        response = client.delete("/api/siren/db/does-not-exist")

        assert response.status_code == 200
        assert response.content == b""

    def test_invalid_record_is_500_and_not_saved(self, client, repository):
        response = client.post("/api/siren/db", json={"department": ["fire", "police"]})

        assert response.status_code == 500
        assert response.json()["error"].startswith("Failed to parse and save incident record")
        assert len(repository) == 0


class TestServiceBehaviour:
    def test_health(self, client):
        response = client.get("/api/health/")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"] == {"database": "healthy", "oracle": "configured"}

    def test_request_id_is_echoed(self, client):
        response = client.get("/api/siren/db/fire", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
        assert "X-Processing-Time" in response.headers

    def test_request_id_is_generated(self, client):
        response = client.get("/api/siren/db/fire")

        assert response.headers["X-Request-ID"]

    def test_unhandled_error_is_generic_500(self, app, client):
        broken = MagicMock()
        broken.find_by_department = AsyncMock(side_effect=RuntimeError("driver exploded"))
        app.dependency_overrides[get_repository] = lambda: broken

        response = client.get("/api/siren/db/fire")

        assert response.status_code == 500
        assert response.json() == {"error": "An internal server error occurred"}
        assert "driver exploded" not in response.text


class TestMalformedBodies:
    @pytest.mark.parametrize(
        "content",
        [b'{"department": "fire",', b'[{"department": "fire"}]', b'"fire"', b""],
        ids=["truncated-json", "array", "string", "empty"],
    )
    def test_unparseable_record_is_500_and_not_saved(self, content, client, repository):
        response = client.post("/api/siren/db", content=content, headers={"Content-Type": "application/json"})

        assert response.status_code == 500
        assert response.json()["error"].startswith("Failed to parse and save incident record: ")
        assert len(repository) == 0

    @pytest.mark.parametrize(
        "body",
        [{"text": 5}, {"text": ["fire"]}, {"text": {"nested": "report"}}],
        ids=["number", "list", "object"],
    )
    def test_non_string_text_is_400(self, body, client, oracle, repository):
        response = client.post(INTAKE_URL, json=body)

        assert response.status_code == 400
        assert set(response.json()) == {"error"}
        assert response.json()["error"].startswith("Invalid request: ")
        assert "text" in response.json()["error"]
        assert oracle.prompts == []
        assert len(repository) == 0

    def test_malformed_intake_json_is_400(self, client):
        response = client.post(INTAKE_URL, content=b'{"text": ', headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")


def test_health_reports_app_settings(repository, oracle):
    settings = Settings(
        _env_file=None, environment="staging", app_version="9.9.9", storage_backend="memory", gemini_api_key="k"
    )
    application = create_app(settings)
    application.dependency_overrides[get_repository] = lambda: repository
    application.dependency_overrides[get_oracle_client] = lambda: oracle

    with TestClient(application) as client:
        body = client.get("/api/health/").json()

    assert body["version"] == "9.9.9"
    assert body["environment"] == "staging"
