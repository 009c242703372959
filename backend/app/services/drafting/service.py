import logging
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, DraftingError, InvalidMethodError
from app.core.factory import get_llm
from app.services.drafting.extractor import extract, extract_text
from app.services.drafting.generation import GenerationClient, LangChainGenerationClient
from app.services.drafting.models import OutputFormat
from app.services.drafting.normalizer import normalize_payload
from app.services.drafting.renderer import PromptRenderer

logger = logging.getLogger(__name__)


class RequestState(str, Enum):
    RECEIVED = "received"
    METHOD_CHECKED = "method_checked"
    NORMALIZED = "normalized"
    RENDERED = "rendered"
    GENERATED = "generated"
    EXTRACTED = "extracted"
    RESPONDED = "responded"
    ERRORED = "errored"


class HandlerOutcome(BaseModel):
    status_code: int
    body: Dict[str, Any]
    state: RequestState


class DraftingHandler:
    """
    Orchestrates one drafting request:
    method check -> credential check -> normalize -> render -> generate -> extract.

    Only the credential check and the generation call can fail the request.
    A response the extractor cannot parse still succeeds, carrying `raw`.
    """

    def __init__(self, settings: Settings, client: Optional[GenerationClient] = None):
        self.settings = settings
        self.client = client
        self.renderer = PromptRenderer.from_settings(settings)

    def _get_client(self) -> GenerationClient:
        if self.client is None:
            self.client = LangChainGenerationClient(
                get_llm(self.settings), timeout=self.settings.LLM_TIMEOUT_SECONDS
            )
        return self.client

    async def handle(self, method: str, payload: Any, today: Optional[date] = None) -> HandlerOutcome:
        state = RequestState.RECEIVED
        try:
            method = method.upper()
            if method == "GET":
                return HandlerOutcome(status_code=200, body={"ok": True}, state=RequestState.RESPONDED)
            if method != "POST":
                raise InvalidMethodError()
            state = RequestState.METHOD_CHECKED

            # Fail fast: never spend a model call on a request that cannot succeed
            if not self.settings.LLM_API_KEY:
                raise ConfigurationError("LLM_API_KEY is not set")

            record = normalize_payload(payload, today=today)
            state = RequestState.NORMALIZED
            logger.info(
                f"Drafting request: lang={record.language.value} mode={record.mode.value} "
                f"case={record.case_number or '-'}"
            )

            system_prompt, user_prompt = self.renderer.render(record)
            state = RequestState.RENDERED

            raw_text = await self._get_client().generate(system_prompt, user_prompt)
            state = RequestState.GENERATED

            if record.output_format == OutputFormat.TEXT:
                body = extract_text(raw_text, record).model_dump()
            else:
                result = extract(raw_text, record.mode)
                if result.raw is not None:
                    logger.warning(f"Returning degraded raw draft for case={record.case_number or '-'}")
                body = result.model_dump(by_alias=True)
            state = RequestState.EXTRACTED

            return HandlerOutcome(status_code=200, body=body, state=RequestState.RESPONDED)

        except DraftingError as e:
            logger.error(f"Drafting request failed at {state.value}: {e}")
            return HandlerOutcome(status_code=e.status_code, body=e.to_body(), state=RequestState.ERRORED)
