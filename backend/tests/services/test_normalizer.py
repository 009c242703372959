from datetime import date

from app.services.drafting.models import DraftMode, Language, OutputFormat
from app.services.drafting.normalizer import normalize_payload

DAY = date(2024, 3, 5)

def test_empty_payload_uses_defaults():
    """Absence is valid input, not an error."""
    record = normalize_payload({}, today=DAY)

    assert record.language == Language.MARATHI
    assert record.mode == DraftMode.ORDER
    assert record.output_format == OutputFormat.JSON
    assert record.applicant_name == ""
    assert record.case_text == ""
    assert record.facts.references == []
    assert record.facts.grs == []
    assert record.facts.local_residency_flag is None
    assert record.today == "05/03/2024"

def test_non_mapping_payload_does_not_raise():
    for payload in (None, "text", 42, ["a", "b"]):
        record = normalize_payload(payload, today=DAY)
        assert record.mode == DraftMode.ORDER

def test_language_aliases():
    assert normalize_payload({"language": "English"}).language == Language.ENGLISH
    assert normalize_payload({"language": "en"}).language == Language.ENGLISH
    assert normalize_payload({"lang": "marathi"}).language == Language.MARATHI
    assert normalize_payload({"lang": "en"}).language == Language.ENGLISH
    assert normalize_payload({"language": "fr"}).language == Language.MARATHI

def test_unknown_mode_falls_back_to_order():
    assert normalize_payload({"mode": "DECISION"}).mode == DraftMode.DECISION
    assert normalize_payload({"mode": "analyze"}).mode == DraftMode.ANALYZE
    assert normalize_payload({"mode": "summarize"}).mode == DraftMode.ORDER
    assert normalize_payload({"mode": 7}).mode == DraftMode.ORDER

def test_free_text_is_trimmed_and_coerced():
    record = normalize_payload({
        "caseNumber": 1234,
        "applicantName": "  Sunita Patil \n",
        "legalSections": "Sec 95 ",
        "selectedCaseType": None,
    })

    assert record.case_number == "1234"
    assert record.applicant_name == "Sunita Patil"
    assert record.legal_sections_user == "Sec 95"
    assert record.selected_case_type == ""

def test_legal_sections_user_key_is_accepted():
    record = normalize_payload({"legalSectionsUser": "Rule 4"})
    assert record.legal_sections_user == "Rule 4"

def test_nested_and_flattened_texts_are_equivalent():
    nested = normalize_payload(
        {"texts": {"caseText": "case", "grText": "gr", "legalText": "legal"}}, today=DAY
    )
    flat = normalize_payload(
        {"caseText": "case", "grText": "gr", "legalText": "legal"}, today=DAY
    )

    assert nested == flat
    assert nested.case_text == "case"

def test_nested_texts_win_over_flattened():
    record = normalize_payload({"texts": {"caseText": "nested"}, "caseText": "flat", "grText": "flat gr"})
    assert record.case_text == "nested"
    assert record.gr_text == "flat gr"

def test_facts_are_normalized():
    record = normalize_payload({
        "facts": {
            "village": " Mul ",
            "hearingDate": "12/02/2024",
            "references": ["Application dated 01/01/2024", "", None, 5],
            "grs": [
                {"dept": "RDD", "number": "ZPA-2019/12", "date": "05/06/2019", "topic": "Anganwadi"},
                {},
                "not a gr",
            ],
            "localResidencyFlag": True,
            "notes": {"source": "OCR"},
        }
    })
    facts = record.facts

    assert facts.village == "Mul"
    assert facts.hearing_date == "12/02/2024"
    assert facts.references == ["Application dated 01/01/2024", "5"]
    assert len(facts.grs) == 1
    assert facts.grs[0].number == "ZPA-2019/12"
    assert facts.local_residency_flag is True
    assert facts.model_dump(by_alias=True)["notes"] == {"source": "OCR"}

def test_single_reference_string_becomes_list():
    record = normalize_payload({"facts": {"references": "Hearing notice"}})
    assert record.facts.references == ["Hearing notice"]

def test_residency_flag_left_unconverted():
    assert normalize_payload({"facts": {"localResidencyFlag": 0}}).facts.local_residency_flag == 0
    assert normalize_payload({"facts": {"localResidencyFlag": False}}).facts.local_residency_flag is False
    assert normalize_payload({"facts": {"localResidencyFlag": "yes"}}).facts.local_residency_flag is None

def test_wrong_typed_facts_are_ignored():
    record = normalize_payload({"facts": "village=Mul", "texts": "oops"})
    assert record.facts.village == ""
    assert record.case_text == ""

def test_output_format():
    assert normalize_payload({"output": "text"}).output_format == OutputFormat.TEXT
    assert normalize_payload({"format": "TEXT"}).output_format == OutputFormat.TEXT
    assert normalize_payload({"output": "pdf"}).output_format == OutputFormat.JSON

def test_source_texts_are_kept_verbatim():
    text = "\n  1. Indented OCR line\n"
    record = normalize_payload({"texts": {"caseText": text}, "grText": 42})
    assert record.case_text == text
    assert record.gr_text == "42"
    assert record.legal_text == ""

def test_blank_nested_text_falls_back_to_flattened():
    record = normalize_payload({"texts": {"caseText": "   "}, "caseText": " flat "})
    assert record.case_text == " flat "
