"""
HR Document Blocks — Separate a formal letter from the chat reply around it.

A reply is treated as containing a document only when three independent
checks hold on the whole text:
1. A document opening appears (date line, `To:` / `Dear` salutation, or a
   `Subject:` / `Re:` / `Ref:` header)
2. A document closing appears (sign-off line or signatory line)
3. A known document type phrase is mentioned

When they hold, the reply is scanned line by line for the document's first
and last lines. Anything the scan cannot place is returned as plain
explanation text; parsing never raises.
"""

import re
from dataclasses import dataclass
from typing import Optional

from prowrite.catalog.loader import get_document_catalog
from prowrite.catalog.models import DocumentCatalog
from prowrite.core.logging import get_component_logger
from prowrite.schema.models import ModuleType

log = get_component_logger(__name__)


@dataclass
class HRDocumentBlock:
    """The copyable document portion of a reply."""
    document_content: str
    document_type: str


@dataclass
class ParsedHRResponse:
    """A reply split around its document block."""
    explanation_before: str
    document_block: Optional[HRDocumentBlock]
    explanation_after: str


# =============================================================================
# Patterns
# =============================================================================

# Date at start of line: 12/03/2024, 12 March 2024, March 12, 2024, 2024-03-12
DATE_LINE = re.compile(
    r"^(Date:\s*)?"
    r"(\d{1,2}[\s/\-.]\w+[\s/\-.]\d{2,4}"
    r"|\w+\s+\d{1,2},?\s+\d{4}"
    r"|\d{4}[\-/]\d{2}[\-/]\d{2})",
    re.IGNORECASE | re.MULTILINE,
)
ADDRESSING_LINE = re.compile(r"^(To:|Dear\s+)", re.IGNORECASE | re.MULTILINE)
SUBJECT_LINE = re.compile(r"^(Subject:|Re:|Ref:)", re.IGNORECASE | re.MULTILINE)

DOCUMENT_START_PATTERNS = [DATE_LINE, ADDRESSING_LINE, SUBJECT_LINE]

DOCUMENT_END_PATTERNS = [
    # Sign-off on its own line
    re.compile(
        r"^(Sincerely|Regards|Best regards|Yours faithfully|Yours sincerely"
        r"|Warm regards|With regards|Respectfully),?\s*$",
        re.IGNORECASE | re.MULTILINE,
    ),
    # Signatory
    re.compile(
        r"^(Authorized Signatory|HR Manager|Human Resources|For and on behalf of)",
        re.IGNORECASE | re.MULTILINE,
    ),
]

# Lines written to the reader rather than part of the document
EXPLANATION_PATTERNS = [
    re.compile(
        r"^(Here'?s?|I'?ve|This|The following|Below|Above|Please find|Attached"
        r"|Note:|Important:|Remember:|Tips?:|Suggestion:|Explanation:|Analysis:)",
        re.IGNORECASE,
    ),
    re.compile(r"\*\*(WHY THIS WORKS|IMPROVEMENTS|FRAMEWORK|CHECKLIST|NOTES?):\*\*", re.IGNORECASE),
    re.compile(
        r"^(Let me|I can|Would you|Do you|Feel free|If you|You can|You may|Please let)",
        re.IGNORECASE,
    ),
    re.compile(r"^(---+|===+|\*\*\*+)$"),
    re.compile(
        r"^(I hope|Hope this|Is there anything|Would you like me to|Shall I|Should I|Happy to)",
        re.IGNORECASE,
    ),
    re.compile(r"^(Key (points|highlights|features|sections)|Summary:|Overview:|Breakdown:)", re.IGNORECASE),
    re.compile(r"^(Make sure|Don't forget|Keep in mind|Consider|Ensure)", re.IGNORECASE),
    # Bold bullets
    re.compile(r"^(\d+\.\s+\*\*|•\s+\*\*|-\s+\*\*)"),
]

CODE_FENCE_LINE = re.compile(r"^```\w*$")
SEPARATOR_LINE = re.compile(r"^[-=]{3,}$")
LEADING_SEPARATOR = re.compile(r"^[-=]{3,}\s*\n?")
SUBJECT_VALUE = re.compile(r"Subject:\s*(.+?)(?:\n|\Z)", re.IGNORECASE)

# Lines after the sign-off kept for signature name and title
SIGNATURE_LOOKAHEAD = 5
# Lines before a candidate start checked for explanation text
EXPLANATION_LOOKBACK = 3


# =============================================================================
# Helpers
# =============================================================================

def _is_explanation_line(line: str) -> bool:
    trimmed = line.strip()
    if not trimmed:
        return False
    return any(p.search(trimmed) for p in EXPLANATION_PATTERNS)


def _strip_code_fences(content: str) -> str:
    """Drop markdown fence lines (``` or ```text) from the content."""
    lines = content.split("\n")
    return "\n".join(line for line in lines if not CODE_FENCE_LINE.match(line.strip()))


def detect_document_type(content: str, catalog: Optional[DocumentCatalog] = None) -> str:
    """
    Resolve the document type of a document block.

    The Subject line is searched first, then the whole content. The first
    catalog entry found wins; the catalog default is used when none is.
    """
    catalog = catalog or get_document_catalog()

    subject = SUBJECT_VALUE.search(content)
    if subject:
        found = catalog.find_type(subject.group(1).strip())
        if found:
            return found

    return catalog.find_type(content) or catalog.default_type


def _find_start(lines: list[str]) -> int:
    for i, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue

        is_date = bool(DATE_LINE.search(line))
        if not (is_date or ADDRESSING_LINE.search(line) or SUBJECT_LINE.search(line)):
            continue

        after_explanation = any(
            _is_explanation_line(prev)
            for prev in lines[max(0, i - EXPLANATION_LOOKBACK):i]
        )
        if not after_explanation or is_date:
            return i
    return -1


def _find_end(lines: list[str], start: int) -> int:
    for i in range(start, len(lines)):
        line = lines[i].strip()
        if not any(p.search(line) for p in DOCUMENT_END_PATTERNS):
            continue

        end = min(i + SIGNATURE_LOOKAHEAD, len(lines) - 1)
        for j in range(i + 1, end + 1):
            if _is_explanation_line(lines[j]) or SEPARATOR_LINE.match(lines[j].strip()):
                return j - 1
        return end
    return -1


# =============================================================================
# Public API
# =============================================================================

def contains_hr_document(content: str, catalog: Optional[DocumentCatalog] = None) -> bool:
    """Check that content has a document opening, closing and type phrase."""
    catalog = catalog or get_document_catalog()

    has_start = any(p.search(content) for p in DOCUMENT_START_PATTERNS)
    has_end = any(p.search(content) for p in DOCUMENT_END_PATTERNS)
    has_type = catalog.find_type(content) is not None

    return has_start and has_end and has_type


def parse_hr_document(content: str, catalog: Optional[DocumentCatalog] = None) -> ParsedHRResponse:
    """
    Split a reply into explanation, document block and trailing explanation.

    Returns the whole content as explanation_before with no document block
    when the reply does not contain a document or its bounds can't be found.
    """
    catalog = catalog or get_document_catalog()
    unparsed = ParsedHRResponse(explanation_before=content, document_block=None, explanation_after="")

    if not contains_hr_document(content, catalog):
        return unparsed

    lines = _strip_code_fences(content).split("\n")

    start = _find_start(lines)
    end = _find_end(lines, start) if start != -1 else -1

    if start == -1 or end <= start:
        log.debug("document_bounds_not_found", start=start, end=end)
        return unparsed

    explanation_before = "\n".join(lines[:start]).strip()
    document_content = "\n".join(lines[start:end + 1]).strip()
    explanation_after = "\n".join(lines[end + 1:]).strip()
    explanation_after = LEADING_SEPARATOR.sub("", explanation_after, count=1).strip()

    document_type = detect_document_type(document_content, catalog)
    log.verbose(
        "document_block_extracted",
        document_type=document_type,
        start_line=start,
        end_line=end,
    )

    return ParsedHRResponse(
        explanation_before=explanation_before,
        document_block=HRDocumentBlock(
            document_content=document_content,
            document_type=document_type,
        ),
        explanation_after=explanation_after,
    )


def is_hr_docs_module(module_type: Optional[str]) -> bool:
    """Check whether a module type is the HR docs module."""
    return module_type == ModuleType.HR_DOCS.value
