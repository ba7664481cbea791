import os

# Settings are read once when app.main is imported.
os.environ["GENAI_CLIENT_SECRET"] = "test-secret"
os.environ["PROJECT"] = "test-project"
os.environ["GENAI_BACKEND"] = "rest"

import pytest

from app.gateway.base import ModelGateway
from app.main import app
from app.summaries.service import SummaryService, get_summary_service


class FakeGateway(ModelGateway):
    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeCredentials:
    async def get_access_token(self) -> str:
        return "fake-token"


@pytest.fixture
def use_gateway():
    """Route the app's summary service through the given gateway."""
    def _use(gateway: ModelGateway) -> ModelGateway:
        app.dependency_overrides[get_summary_service] = lambda: SummaryService(gateway)
        return gateway

    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
def fake_gateway(use_gateway):
    return use_gateway(FakeGateway(reply="## Web Traffic\n\n> Search leads.\n---"))


@pytest.fixture
def web_traffic_query():
    return {
        "title": "Web Traffic",
        "note_text": "",
        "queryBody": {"fields": "source, amount"},
        "queryData": [
            {"source": "organic", "amount": 120},
            {"source": "search", "amount": 9875},
        ],
    }


@pytest.fixture
def fake_credentials():
    return FakeCredentials()
