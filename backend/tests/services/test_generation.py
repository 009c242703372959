import asyncio

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from app.core.config import Settings
from app.core.exceptions import BackendError, ConfigurationError, EmptyResponseError
from app.core.factory import get_llm
from app.services.drafting.generation import LangChainGenerationClient, message_text

class RecordingChatModel:
    """Stands in for a chat model: records messages, returns or raises what it is told."""

    def __init__(self, content="", error=None, delay=0.0):
        self.content = content
        self.error = error
        self.delay = delay
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.content)

@pytest.mark.asyncio
async def test_generate_returns_text():
    client = LangChainGenerationClient(FakeListChatModel(responses=['  {"facts": {}}  ']))
    assert await client.generate("system", "user") == '{"facts": {}}'

@pytest.mark.asyncio
async def test_generate_sends_system_and_user_messages():
    llm = RecordingChatModel(content="ok")
    await LangChainGenerationClient(llm).generate("SYS", "USER")

    assert len(llm.calls) == 1
    system, human = llm.calls[0]
    assert isinstance(system, SystemMessage) and system.content == "SYS"
    assert isinstance(human, HumanMessage) and human.content == "USER"

@pytest.mark.asyncio
async def test_backend_failure_raises_backend_error():
    llm = RecordingChatModel(error=RuntimeError("rate limited"))
    with pytest.raises(BackendError, match="rate limited"):
        await LangChainGenerationClient(llm).generate("s", "u")
    assert len(llm.calls) == 1

@pytest.mark.asyncio
async def test_timeout_raises_backend_error():
    llm = RecordingChatModel(content="late", delay=1.0)
    with pytest.raises(BackendError, match="timed out"):
        await LangChainGenerationClient(llm, timeout=0.01).generate("s", "u")

@pytest.mark.asyncio
async def test_empty_content_raises_empty_response():
    with pytest.raises(EmptyResponseError):
        await LangChainGenerationClient(RecordingChatModel(content="   ")).generate("s", "u")

def test_message_text_unwraps_content_blocks():
    assert message_text(" plain ") == "plain"
    assert message_text([{"type": "text", "text": "a"}, {"type": "image_url"}, "b"]) == "ab"
    assert message_text(None) == ""

def test_factory_builds_openai_client():
    settings = Settings(_env_file=None, LLM_API_KEY="sk-test", LLM_MODEL="gpt-4o-mini")
    llm = get_llm(settings)

    assert isinstance(llm, ChatOpenAI)
    assert llm.model_name == "gpt-4o-mini"
    assert llm.temperature == 0.2
    assert llm.max_retries == 0

def test_factory_requires_credential():
    with pytest.raises(ConfigurationError):
        get_llm(Settings(_env_file=None, LLM_API_KEY=None))

def test_factory_rejects_unknown_provider():
    with pytest.raises(ConfigurationError):
        get_llm(Settings(_env_file=None, LLM_API_KEY="k", LLM_PROVIDER="mistral"))
