import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from decal_forge.main import app
from decal_forge.core.graph.workflow import UiSpecOrchestrator, get_orchestrator
from decal_forge.schemas.ui_spec import ImageResult, TitleResult, StoryResult


def _service(result):
    service = MagicMock()
    service.generate = AsyncMock(return_value=result)
    return service


@pytest.fixture(name="painter")
def painter_fixture():
    """Image collaborator that returns an unblocked image."""
    return _service(ImageResult(blocked=False, media="img://1"))


@pytest.fixture(name="curator")
def curator_fixture():
    return _service(TitleResult(title="Dragon's Breath"))


@pytest.fixture(name="storyteller")
def storyteller_fixture():
    return _service(StoryResult(story="Long ago a dragon guarded the valley.", audio="aud://1"))


@pytest.fixture(name="orchestrator")
def orchestrator_fixture(painter, curator, storyteller):
    return UiSpecOrchestrator(painter=painter, curator=curator, storyteller=storyteller)


@pytest.fixture(name="client")
def client_fixture(orchestrator: UiSpecOrchestrator):

    def get_orchestrator_override():
        return orchestrator

    app.dependency_overrides[get_orchestrator] = get_orchestrator_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="groq_client")
def groq_client_fixture():
    """
    Fake AsyncGroq client. Set the reply with `groq_client.reply("...")`.
    """
    client = MagicMock()
    client.chat.completions.create = AsyncMock()

    def reply(content):
        completion = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
        client.chat.completions.create.return_value = completion

    client.reply = reply
    return client
