import pytest
import sys
from pathlib import Path
from httpx import ASGITransport, AsyncClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.main import app
from app.api.routes.drafting import get_drafting_handler
from app.core.config import Settings
from app.services.drafting.generation import GenerationClient
from app.services.drafting.service import DraftingHandler

class FakeGenerationClient(GenerationClient):
    """Records every call; returns a canned response or raises a canned error."""

    def __init__(self):
        self.response = ""
        self.error = None
        self.calls = []

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.response

@pytest.fixture
def settings():
    """Settings with a credential, isolated from any local .env file."""
    return Settings(_env_file=None, LLM_API_KEY="test-key")

@pytest.fixture
def unconfigured_settings():
    return Settings(_env_file=None, LLM_API_KEY=None)

@pytest.fixture
def fake_llm():
    return FakeGenerationClient()

@pytest.fixture
def handler(settings, fake_llm):
    return DraftingHandler(settings, client=fake_llm)

@pytest.fixture
async def client(handler):
    """Test client for the FastAPI app with the generation backend faked out."""
    app.dependency_overrides[get_drafting_handler] = lambda: handler
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
