from functools import lru_cache
from typing import Optional, Tuple
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: Tuple[str, ...] = ("*",)

    # LLM (OpenAI / Groq)
    LLM_PROVIDER: str = "openai"
    LLM_API_KEY: Optional[str] = None  # Checked per request, not at startup
    LLM_MODEL: str = "gpt-4o"
    LLM_TEMPERATURE: float = 0.2
    LLM_TOP_P: float = 0.9
    LLM_MAX_TOKENS: int = 4096
    LLM_TIMEOUT_SECONDS: float = 120.0

    # Source text caps (characters, applied from the start of the text)
    CASE_TEXT_MAX_CHARS: int = 20000
    GR_TEXT_MAX_CHARS: int = 20000
    LEGAL_TEXT_MAX_CHARS: int = 8000

    # ============================================
    # JURISDICTION (office + appeal policy)
    # ============================================

    OFFICE_DESIGNATION_EN: str = "Chief Executive Officer"
    OFFICE_DESIGNATION_MR: str = "मुख्य कार्यकारी अधिकारी"
    OFFICE_BODY_EN: str = "Zilla Parishad, Chandrapur"
    OFFICE_BODY_MR: str = "जिल्हा परिषद, चंद्रपूर"

    # Options: "single" (60 days) or "two_tier" (30 days, then 60 days)
    APPEAL_POLICY: str = "single"
    APPEAL_AUTHORITY_EN: str = "the competent appellate authority"
    APPEAL_AUTHORITY_MR: str = "सक्षम अपीलीय प्राधिकरण"
    FIRST_APPEAL_AUTHORITY_EN: str = "the Divisional Commissioner"
    FIRST_APPEAL_AUTHORITY_MR: str = "विभागीय आयुक्त"
    SECOND_APPEAL_AUTHORITY_EN: str = "the State Government"
    SECOND_APPEAL_AUTHORITY_MR: str = "राज्य शासन"

    class Config:
        env_file = ".env"
        case_sensitive = True
        frozen = True

@lru_cache()
def get_settings() -> Settings:
    """
    Process-wide settings, read once from the environment / .env file.
    """
    return Settings()
