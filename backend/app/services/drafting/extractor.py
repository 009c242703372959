"""
Response Extractor.

Parses backend text into a DraftResult. Generative backends do not always
honour "return only JSON", so parsing is two-stage:

1. the whole text as JSON;
2. the span from the first "{" to the last "}" (prose- or fence-wrapped JSON).

The second stage is a best-effort heuristic and can be fooled by stray braces
in surrounding prose. When both stages fail the text is returned as `raw`
so a reviewer can still salvage the draft.
"""
import json
import logging
from typing import Any, Dict, Optional

from app.core.exceptions import EmptyResponseError, MalformedOutputError
from app.services.drafting.models import CaseRecord, DraftMode, DraftResult, LegacyDraft
from app.services.drafting.renderer import ARTIFACT_NAMES

logger = logging.getLogger(__name__)

# Text key expected for each mode besides "facts"
MODE_TEXT_KEYS = {
    DraftMode.DECISION: "decisionText",
    DraftMode.ORDER: "orderText",
}


def _load_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def parse_object(raw_text: str) -> Dict[str, Any]:
    data = _load_object(raw_text)
    if data is not None:
        return data

    start_idx = raw_text.find("{")
    end_idx = raw_text.rfind("}")
    if start_idx != -1 and end_idx > start_idx:
        data = _load_object(raw_text[start_idx:end_idx + 1])
        if data is not None:
            return data

    raise MalformedOutputError("No JSON object found in model output")


def _text_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        text = value
    elif isinstance(value, (dict, list)):
        text = json.dumps(value, ensure_ascii=False)
    else:
        text = str(value)
    return text.strip() or None


def extract(raw_text: str, mode: DraftMode) -> DraftResult:
    if not raw_text or not raw_text.strip():
        raise EmptyResponseError("Backend returned an empty response")

    try:
        data = parse_object(raw_text.strip())
    except MalformedOutputError as e:
        logger.warning(f"Structured extraction failed, returning raw text: {e}")
        return DraftResult(raw=raw_text)

    facts = data.get("facts")
    result = DraftResult(facts=facts if isinstance(facts, dict) else None)

    text_key = MODE_TEXT_KEYS.get(mode)
    if text_key == "decisionText":
        result.decision_text = _text_value(data.get(text_key))
    elif text_key == "orderText":
        result.order_text = _text_value(data.get(text_key))
    return result


def extract_text(raw_text: str, record: CaseRecord) -> LegacyDraft:
    """Single-string variant: title by language/mode, content is the model text."""
    if not raw_text or not raw_text.strip():
        raise EmptyResponseError("Backend returned an empty response")
    return LegacyDraft(
        title=ARTIFACT_NAMES[(record.language, record.mode)],
        content=raw_text.strip(),
    )
