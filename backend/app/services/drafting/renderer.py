"""
Prompt Template Engine.

Renders a CaseRecord into a (system prompt, user prompt) pair. Rendering is
pure string work: no external calls, no inference. Any slot whose source
value is absent renders the placeholder sentinel verbatim.
"""
import json
from enum import Enum
from string import Template
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from app.core.config import Settings
from app.core.exceptions import ConfigurationError
from app.services.drafting.models import (
    CaseRecord, DraftMode, GRReference, Language, OutputFormat
)
from app.services.drafting.prompts import (
    INPUT_BLOCK, JSON_OUTPUT_RULES, MODE_RULES, SYSTEM_PROMPT, TEXT_OUTPUT_RULES, FACTS_SCHEMA
)
from app.services.drafting.templates import (
    PLACEHOLDER,
    ORDER_EN_TEMPLATE, DECISION_EN_TEMPLATE, ORDER_EN_TASK, DECISION_EN_TASK,
    ORDER_MR_TEMPLATE, DECISION_MR_TEMPLATE, ORDER_MR_TASK, DECISION_MR_TASK,
    RESIDENCY_DIRECTIVE_EN, RESIDENCY_FINDING_EN, RESIDENCY_DIRECTIVE_MR, RESIDENCY_FINDING_MR,
    APPEAL_SINGLE_EN, APPEAL_TWO_TIER_EN, APPEAL_SINGLE_MR, APPEAL_TWO_TIER_MR,
    GR_REFERENCE_EN, GR_REFERENCE_MR, ANALYZE_TASK,
)

LANGUAGE_NAMES = {Language.MARATHI: "Marathi", Language.ENGLISH: "English"}

ARTIFACT_NAMES = {
    (Language.ENGLISH, DraftMode.ORDER): "Order",
    (Language.ENGLISH, DraftMode.DECISION): "Decision",
    (Language.ENGLISH, DraftMode.ANALYZE): "Facts",
    (Language.MARATHI, DraftMode.ORDER): "आदेश",
    (Language.MARATHI, DraftMode.DECISION): "निर्णय",
    (Language.MARATHI, DraftMode.ANALYZE): "तथ्ये",
}

# (language, mode) -> (skeleton, task)
TEMPLATE_FAMILIES: Dict[Tuple[Language, DraftMode], Tuple[Template, Template]] = {
    (Language.MARATHI, DraftMode.DECISION): (DECISION_MR_TEMPLATE, DECISION_MR_TASK),
    (Language.MARATHI, DraftMode.ORDER): (ORDER_MR_TEMPLATE, ORDER_MR_TASK),
    (Language.ENGLISH, DraftMode.DECISION): (DECISION_EN_TEMPLATE, DECISION_EN_TASK),
    (Language.ENGLISH, DraftMode.ORDER): (ORDER_EN_TEMPLATE, ORDER_EN_TASK),
}


class AppealPolicy(str, Enum):
    SINGLE = "single"       # 60 days to the competent appellate authority
    TWO_TIER = "two_tier"   # 30 days to a first-level authority, then 60 days to a second


class Jurisdiction(BaseModel):
    """Office identity and appeal policy printed on every draft."""
    model_config = ConfigDict(frozen=True)

    designation_en: str = "Chief Executive Officer"
    designation_mr: str = "मुख्य कार्यकारी अधिकारी"
    body_en: str = "Zilla Parishad, Chandrapur"
    body_mr: str = "जिल्हा परिषद, चंद्रपूर"
    appeal_policy: AppealPolicy = AppealPolicy.SINGLE
    appeal_authority_en: str = "the competent appellate authority"
    appeal_authority_mr: str = "सक्षम अपीलीय प्राधिकरण"
    first_appeal_authority_en: str = "the Divisional Commissioner"
    first_appeal_authority_mr: str = "विभागीय आयुक्त"
    second_appeal_authority_en: str = "the State Government"
    second_appeal_authority_mr: str = "राज्य शासन"

    @classmethod
    def from_settings(cls, settings: Settings) -> "Jurisdiction":
        try:
            policy = AppealPolicy(settings.APPEAL_POLICY.lower())
        except ValueError:
            raise ConfigurationError(
                f"Unsupported APPEAL_POLICY: {settings.APPEAL_POLICY} (expected 'single' or 'two_tier')"
            )
        return cls(
            designation_en=settings.OFFICE_DESIGNATION_EN,
            designation_mr=settings.OFFICE_DESIGNATION_MR,
            body_en=settings.OFFICE_BODY_EN,
            body_mr=settings.OFFICE_BODY_MR,
            appeal_policy=policy,
            appeal_authority_en=settings.APPEAL_AUTHORITY_EN,
            appeal_authority_mr=settings.APPEAL_AUTHORITY_MR,
            first_appeal_authority_en=settings.FIRST_APPEAL_AUTHORITY_EN,
            first_appeal_authority_mr=settings.FIRST_APPEAL_AUTHORITY_MR,
            second_appeal_authority_en=settings.SECOND_APPEAL_AUTHORITY_EN,
            second_appeal_authority_mr=settings.SECOND_APPEAL_AUTHORITY_MR,
        )

    def pick(self, name: str, language: Language) -> str:
        return getattr(self, f"{name}_{language.value}")

    def appeal_clause(self, language: Language) -> str:
        if self.appeal_policy == AppealPolicy.TWO_TIER:
            template = APPEAL_TWO_TIER_MR if language == Language.MARATHI else APPEAL_TWO_TIER_EN
        else:
            template = APPEAL_SINGLE_MR if language == Language.MARATHI else APPEAL_SINGLE_EN
        return template.substitute(
            authority=self.pick("appeal_authority", language),
            first_authority=self.pick("first_appeal_authority", language),
            second_authority=self.pick("second_appeal_authority", language),
        )


class SourceLimits(BaseModel):
    """Hard caps on embedded source documents, in characters."""
    model_config = ConfigDict(frozen=True)

    case_text: int = 20000
    gr_text: int = 20000
    legal_text: int = 8000

    @classmethod
    def from_settings(cls, settings: Settings) -> "SourceLimits":
        return cls(
            case_text=settings.CASE_TEXT_MAX_CHARS,
            gr_text=settings.GR_TEXT_MAX_CHARS,
            legal_text=settings.LEGAL_TEXT_MAX_CHARS,
        )


def truncate(text: str, limit: int) -> str:
    """Keep the first `limit` characters. A cap, not a summary."""
    return text[:max(limit, 0)]


def slot(value: Optional[str]) -> str:
    return value if value else PLACEHOLDER


def format_gr(gr: GRReference, language: Language) -> str:
    template = GR_REFERENCE_MR if language == Language.MARATHI else GR_REFERENCE_EN
    return template.substitute(
        number=slot(gr.number),
        date=slot(gr.date),
        dept=f", {gr.dept}" if gr.dept else "",
        topic=f": {gr.topic}" if gr.topic else "",
    )


def format_references(record: CaseRecord) -> str:
    lines: List[str] = list(record.facts.references)
    lines.extend(format_gr(gr, record.language) for gr in record.facts.grs)
    if not lines:
        lines = [PLACEHOLDER]
    return "\n".join(f"{i}) {line}" for i, line in enumerate(lines, 1))


class PromptRenderer:
    def __init__(self, jurisdiction: Optional[Jurisdiction] = None, limits: Optional[SourceLimits] = None):
        self.jurisdiction = jurisdiction or Jurisdiction()
        self.limits = limits or SourceLimits()

    @classmethod
    def from_settings(cls, settings: Settings) -> "PromptRenderer":
        return cls(Jurisdiction.from_settings(settings), SourceLimits.from_settings(settings))

    def render(self, record: CaseRecord) -> Tuple[str, str]:
        return self.render_system(record), self.render_user(record)

    def render_system(self, record: CaseRecord) -> str:
        language = record.language
        if record.output_format == OutputFormat.TEXT:
            output_rules = TEXT_OUTPUT_RULES.substitute(artifact=ARTIFACT_NAMES[(language, record.mode)])
        else:
            output_rules = JSON_OUTPUT_RULES[record.mode.value].substitute(facts_schema=FACTS_SCHEMA)

        return SYSTEM_PROMPT.substitute(
            office_designation=self.jurisdiction.designation_en,
            office_body=self.jurisdiction.body_en,
            placeholder=PLACEHOLDER,
            language_name=LANGUAGE_NAMES[language],
            mode_rules=MODE_RULES[record.mode.value],
            output_rules=output_rules,
        )

    def render_user(self, record: CaseRecord) -> str:
        return f"{self.render_inputs(record)}\n\n{self.render_task(record)}"

    def render_inputs(self, record: CaseRecord) -> str:
        # Only facts that were actually supplied
        facts = {
            key: value for key, value in record.facts.model_dump(by_alias=True).items()
            if value not in ("", [], None)
        }
        return INPUT_BLOCK.safe_substitute(
            language=record.language.value,
            mode=record.mode.value,
            today=record.today,
            case_number=slot(record.case_number),
            applicant_name=slot(record.applicant_name),
            case_type=slot(record.selected_case_type),
            case_description=slot(record.case_description),
            legal_sections=slot(record.legal_sections_user),
            facts_json=json.dumps(facts, ensure_ascii=False, indent=2, default=str),
            case_text=slot(truncate(record.case_text, self.limits.case_text)),
            gr_text=slot(truncate(record.gr_text, self.limits.gr_text)),
            legal_text=slot(truncate(record.legal_text, self.limits.legal_text)),
        )

    def render_task(self, record: CaseRecord) -> str:
        if record.mode == DraftMode.ANALYZE:
            return ANALYZE_TASK.substitute(language_name=LANGUAGE_NAMES[record.language])

        skeleton, task = TEMPLATE_FAMILIES[(record.language, record.mode)]
        return task.substitute(
            placeholder=PLACEHOLDER,
            skeleton=skeleton.safe_substitute(self._slots(record)),
        )

    def _slots(self, record: CaseRecord) -> Dict[str, str]:
        language = record.language
        facts = record.facts
        applicant = slot(record.applicant_name)

        flag = facts.local_residency_flag
        flag = None if flag is None else bool(flag)
        if language == Language.MARATHI:
            directive, finding = RESIDENCY_DIRECTIVE_MR[flag], RESIDENCY_FINDING_MR[flag]
        else:
            directive, finding = RESIDENCY_DIRECTIVE_EN[flag], RESIDENCY_FINDING_EN[flag]

        designation = self.jurisdiction.pick("designation", language)
        body = self.jurisdiction.pick("body", language)
        return {
            "office_designation": designation,
            "office_designation_upper": designation.upper(),
            "office_body": body,
            "office_body_upper": body.upper(),
            "case_number": slot(record.case_number),
            "today": record.today,
            "subject": slot(facts.subject),
            "references": format_references(record),
            "applicant_name": applicant,
            "village": slot(facts.village),
            "taluka": slot(facts.taluka),
            "hearing_date": slot(facts.hearing_date),
            "hearing_time": slot(facts.hearing_time),
            "provisions": slot(record.legal_sections_user),
            "residency_directive": Template(directive).substitute(
                applicant_name=applicant, placeholder=PLACEHOLDER
            ),
            "residency_finding": Template(finding).substitute(placeholder=PLACEHOLDER),
            "appeal_clause": self.jurisdiction.appeal_clause(language),
        }


def render(record: CaseRecord) -> Tuple[str, str]:
    """Render with the default jurisdiction and source limits."""
    return PromptRenderer().render(record)
