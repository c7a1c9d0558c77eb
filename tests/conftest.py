"""
Pytest configuration and shared fixtures for the SIREN test suite.

Provides an in-memory record store, a scripted oracle and a FastAPI test
client wired to both.
"""

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment before imports
os.environ["ENVIRONMENT"] = "test"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["LOG_LEVEL"] = "WARNING"

from siren.api.app import create_app  # noqa: E402
from siren.api.dependencies import get_oracle_client, get_repository  # noqa: E402
from siren.config import Settings  # noqa: E402
from siren.repositories import InMemoryIncidentRepository  # noqa: E402
from siren.services import IncidentBridgeService  # noqa: E402

FIRE_REPLY = (
    "```json\n"
    "{\n"
    '  "department": "fire",\n'
    '  "priority": "high",\n'
    '  "location": "Building B",\n'
    '  "summary": "Fire incident with two cars burning"\n'
    "}\n"
    "```"
)

FIRE_REPORT = "There is a fire in Building B and two cars are burning."


class ScriptedOracle:
    """Stands in for the Gemini client: replies with canned text or raises."""

    def __init__(self, reply: str = FIRE_REPLY, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass


@pytest.fixture
def repository() -> InMemoryIncidentRepository:
    return InMemoryIncidentRepository()


@pytest.fixture
def bridge(repository) -> IncidentBridgeService:
    return IncidentBridgeService(repository)


@pytest.fixture
def oracle() -> ScriptedOracle:
    return ScriptedOracle()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, environment="test", storage_backend="memory", gemini_api_key="test-key")


@pytest.fixture
def app(settings, repository, oracle):
    """FastAPI application with the store and oracle swapped for test doubles."""
    application = create_app(settings)
    application.dependency_overrides[get_repository] = lambda: repository
    application.dependency_overrides[get_oracle_client] = lambda: oracle
    return application


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: integration test")
