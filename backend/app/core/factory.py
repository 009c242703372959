from functools import lru_cache
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_groq import ChatGroq
from langchain_openai import ChatOpenAI
from app.core.config import Settings
from app.core.exceptions import ConfigurationError

@lru_cache()
def get_llm(settings: Settings) -> BaseChatModel:
    """
    Factory to return the configured LLM provider.

    Provider-side retries are disabled: one drafting request is one model call.
    """
    if not settings.LLM_API_KEY:
        raise ConfigurationError("LLM_API_KEY is not set")

    provider = settings.LLM_PROVIDER.lower()

    if provider == "openai":
        return ChatOpenAI(
            api_key=settings.LLM_API_KEY,
            model=settings.LLM_MODEL,
            temperature=settings.LLM_TEMPERATURE,
            top_p=settings.LLM_TOP_P,
            max_tokens=settings.LLM_MAX_TOKENS,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            max_retries=0
        )
    if provider == "groq":
        return ChatGroq(
            api_key=settings.LLM_API_KEY,
            model=settings.LLM_MODEL,
            temperature=settings.LLM_TEMPERATURE,
            top_p=settings.LLM_TOP_P,
            max_tokens=settings.LLM_MAX_TOKENS,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            max_retries=0
        )

    raise ConfigurationError(f"Unsupported LLM Provider: {provider}")
