"""
CaseInput Normalizer.

Turns an untyped caller payload into a CaseRecord. Absence is valid input:
every missing or malformed field falls back to its default and nothing here
raises.
"""
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from app.services.drafting.models import (
    CaseFacts, CaseRecord, DraftMode, GRReference, Language, OutputFormat
)

LANGUAGE_ALIASES: Dict[str, Language] = {
    "mr": Language.MARATHI,
    "marathi": Language.MARATHI,
    "en": Language.ENGLISH,
    "english": Language.ENGLISH,
}

FACT_TEXT_FIELDS = {
    "village": "village",
    "taluka": "taluka",
    "hearingDate": "hearing_date",
    "hearingTime": "hearing_time",
    "subject": "subject",
}

FACT_KNOWN_KEYS = set(FACT_TEXT_FIELDS) | {"references", "grs", "localResidencyFlag"}


def format_today(today: Optional[date] = None) -> str:
    return (today or date.today()).strftime("%d/%m/%Y")


def _text(value: Any) -> str:
    """None -> "", anything else -> its trimmed string form."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _source(value: Any) -> str:
    """Long-form source text is kept exactly as supplied."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _first_text(payload: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = _text(payload.get(key))
        if value:
            return value
    return ""


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _language(payload: Mapping[str, Any]) -> Language:
    raw = _first_text(payload, "language", "lang").lower()
    return LANGUAGE_ALIASES.get(raw, Language.MARATHI)


def _mode(payload: Mapping[str, Any]) -> DraftMode:
    raw = _text(payload.get("mode")).lower()
    try:
        return DraftMode(raw)
    except ValueError:
        return DraftMode.ORDER


def _output_format(payload: Mapping[str, Any]) -> OutputFormat:
    raw = _first_text(payload, "output", "format").lower()
    try:
        return OutputFormat(raw)
    except ValueError:
        return OutputFormat.JSON


def _references(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [ref for ref in (_text(item) for item in value) if ref]


def _grs(value: Any) -> List[GRReference]:
    if not isinstance(value, (list, tuple)):
        return []
    grs = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        gr = GRReference(
            dept=_text(item.get("dept")),
            number=_text(item.get("number")),
            date=_text(item.get("date")),
            topic=_text(item.get("topic")),
        )
        # An entry with nothing in it is not a reference
        if any((gr.dept, gr.number, gr.date, gr.topic)):
            grs.append(gr)
    return grs


def normalize_facts(value: Any) -> CaseFacts:
    raw = _mapping(value)
    data: Dict[str, Any] = {
        attr: _text(raw.get(key)) for key, attr in FACT_TEXT_FIELDS.items()
    }
    data["references"] = _references(raw.get("references"))
    data["grs"] = _grs(raw.get("grs"))

    flag = raw.get("localResidencyFlag")
    data["local_residency_flag"] = flag if isinstance(flag, (bool, int, float)) else None

    # Unknown detected facts travel to the prompt untouched
    extras = {
        key: extra for key, extra in raw.items()
        if isinstance(key, str)
        and key not in FACT_KNOWN_KEYS
        and key not in CaseFacts.model_fields
    }
    return CaseFacts(**data, **extras)


def normalize_payload(payload: Any, today: Optional[date] = None) -> CaseRecord:
    """
    Build a CaseRecord from a caller payload.

    Accepts the nested shape (`texts: {caseText, grText, legalText}`) and the
    flattened shape (the same keys at top level). Nested values win when both
    are present.
    """
    body = _mapping(payload)
    texts = _mapping(body.get("texts"))

    def source(key: str) -> str:
        nested = _source(texts.get(key))
        return nested if nested.strip() else _source(body.get(key))

    return CaseRecord(
        language=_language(body),
        mode=_mode(body),
        output_format=_output_format(body),
        case_number=_text(body.get("caseNumber")),
        applicant_name=_text(body.get("applicantName")),
        case_description=_text(body.get("caseDescription")),
        legal_sections_user=_first_text(body, "legalSections", "legalSectionsUser"),
        selected_case_type=_text(body.get("selectedCaseType")),
        case_text=source("caseText"),
        gr_text=source("grText"),
        legal_text=source("legalText"),
        facts=normalize_facts(body.get("facts")),
        today=format_today(today),
    )
