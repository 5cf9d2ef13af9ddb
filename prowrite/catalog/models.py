"""
Catalog Models — Ordered lookup tables for section and document detection.

Table order is match priority: sections are emitted in rule order, and the
first document type found wins.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property


class SectionType(str, Enum):
    """Display category of an extracted section."""
    EXPLANATION = "explanation"
    IMPROVEMENT = "improvement"
    FRAMEWORK = "framework"
    ANALYSIS = "analysis"
    CHECKLIST = "checklist"


# Content runs until the next bold label, a markdown heading, a ==== rule,
# or the end of the text.
SECTION_TERMINATOR = r"(?=\n\n\*\*[A-Z]|\n\n##|\n\n====|\Z)"


@dataclass(frozen=True)
class SectionRule:
    """A bold `**LABEL:**` block to lift out of generated text."""
    label: str
    type: SectionType
    title: str
    icon: str = ""

    @cached_property
    def pattern(self) -> re.Pattern:
        """Compiled matcher; group 1 is the section body."""
        return re.compile(
            rf"\*\*{re.escape(self.label)}:\*\*\s*([\s\S]*?){SECTION_TERMINATOR}",
            re.IGNORECASE,
        )


@dataclass(frozen=True)
class SectionCatalog:
    """Ordered section rules."""
    name: str
    rules: tuple[SectionRule, ...] = field(default_factory=tuple)

    def labels(self) -> list[str]:
        return [r.label for r in self.rules]


@dataclass(frozen=True)
class DocumentCatalog:
    """Ordered document type phrases for HR document detection."""
    name: str
    document_types: tuple[str, ...] = field(default_factory=tuple)
    default_type: str = "HR Document"

    def find_type(self, text: str) -> str | None:
        """Return the first catalog phrase contained in text, ignoring case."""
        haystack = text.casefold()
        for doc_type in self.document_types:
            if doc_type.casefold() in haystack:
                return doc_type
        return None
