import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import SystemMessage, HumanMessage

from app.core.exceptions import BackendError, EmptyResponseError

logger = logging.getLogger(__name__)


class GenerationClient(ABC):
    """Prompt pair in, text out. One call per drafting request, no retries."""

    @abstractmethod
    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        ...


def message_text(content: Any) -> str:
    """Unwrap AIMessage.content (plain string or list of content blocks) to text."""
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts).strip()
    return ""


class LangChainGenerationClient(GenerationClient):
    """Generation backed by any LangChain chat model (ChatOpenAI, ChatGroq, ...)."""

    def __init__(self, llm: BaseChatModel, timeout: Optional[float] = None):
        self.llm = llm
        self.timeout = timeout

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]
        try:
            response = await asyncio.wait_for(self.llm.ainvoke(messages), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"Generation timed out after {self.timeout}s")
            raise BackendError(f"Generation timed out after {self.timeout}s")
        except Exception as e:
            logger.error(f"Generation failed: {e}")
            raise BackendError(str(e)) from e

        text = message_text(response.content)
        if not text:
            raise EmptyResponseError("Backend returned no text content")

        logger.info(f"Generation returned {len(text)} chars")
        return text
