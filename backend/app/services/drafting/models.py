from typing import List, Optional, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum

class Language(str, Enum):
    MARATHI = "mr"
    ENGLISH = "en"

class DraftMode(str, Enum):
    ANALYZE = "analyze"
    DECISION = "decision"
    ORDER = "order"

class OutputFormat(str, Enum):
    JSON = "json"   # Structured DraftResult
    TEXT = "text"   # Legacy {title, content}

class GRReference(BaseModel):
    """A Government Resolution cited as legal basis"""
    dept: str = ""
    number: str = ""
    date: str = ""
    topic: str = ""

class CaseFacts(BaseModel):
    """Structured facts supplied by the caller or by an earlier analyze pass"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    village: str = ""
    taluka: str = ""
    hearing_date: str = Field(default="", alias="hearingDate")
    hearing_time: str = Field(default="", alias="hearingTime")
    subject: str = ""
    references: List[str] = Field(default_factory=list)
    grs: List[GRReference] = Field(default_factory=list)
    local_residency_flag: Optional[Union[bool, int, float]] = Field(
        default=None, alias="localResidencyFlag",
        description="Passed through unconverted; None when not supplied"
    )

class CaseRecord(BaseModel):
    """Canonical drafting request, built fresh for every call"""
    model_config = ConfigDict(populate_by_name=True)

    language: Language = Language.MARATHI
    mode: DraftMode = DraftMode.ORDER
    output_format: OutputFormat = Field(default=OutputFormat.JSON, alias="outputFormat")

    case_number: str = Field(default="", alias="caseNumber")
    applicant_name: str = Field(default="", alias="applicantName")
    case_description: str = Field(default="", alias="caseDescription")
    legal_sections_user: str = Field(default="", alias="legalSectionsUser")
    selected_case_type: str = Field(default="", alias="selectedCaseType")

    case_text: str = Field(default="", alias="caseText", description="Raw OCR/parsed case file")
    gr_text: str = Field(default="", alias="grText", description="Raw Government Resolution text")
    legal_text: str = Field(default="", alias="legalText", description="Other legal provisions")

    facts: CaseFacts = Field(default_factory=CaseFacts)
    today: str = Field(..., description="Request date, dd/mm/yyyy")

class DraftResult(BaseModel):
    """Output of one pipeline run"""
    model_config = ConfigDict(populate_by_name=True)

    facts: Optional[Dict[str, Any]] = None
    decision_text: Optional[str] = Field(default=None, alias="decisionText")
    order_text: Optional[str] = Field(default=None, alias="orderText")
    raw: Optional[str] = Field(default=None, description="Only set when structured extraction failed")

class LegacyDraft(BaseModel):
    """Single-string draft returned for output format 'text'"""
    title: str
    content: str

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
