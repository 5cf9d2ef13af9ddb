"""Extract — Section, document and marker-format parsing of generated text."""

from prowrite.extract.educational import (
    ParsedContent,
    Section,
    has_educational_content,
    parse_educational_content,
)
from prowrite.extract.hr_document import (
    HRDocumentBlock,
    ParsedHRResponse,
    contains_hr_document,
    detect_document_type,
    is_hr_docs_module,
    parse_hr_document,
)
from prowrite.extract.render import ParsedResponse, parse_chat_response
from prowrite.extract.structured import (
    Benefit,
    ColdEmail,
    LandingPage,
    OutputCheck,
    parse_cold_email_content,
    parse_generated_output,
    parse_landing_page_content,
    validate_cold_email_output,
    validate_landing_page_output,
)

__all__ = [
    # Educational sections
    "ParsedContent",
    "Section",
    "has_educational_content",
    "parse_educational_content",
    # HR documents
    "HRDocumentBlock",
    "ParsedHRResponse",
    "contains_hr_document",
    "detect_document_type",
    "is_hr_docs_module",
    "parse_hr_document",
    # Chat replies
    "ParsedResponse",
    "parse_chat_response",
    # Marker formats
    "Benefit",
    "ColdEmail",
    "LandingPage",
    "OutputCheck",
    "parse_cold_email_content",
    "parse_generated_output",
    "parse_landing_page_content",
    "validate_cold_email_output",
    "validate_landing_page_output",
]
