"""
Educational Sections — Lift `**LABEL:**` blocks out of generated replies.

Generated copy is often followed by commentary such as
`**WHY THIS WORKS:**` or `**COMPLIANCE CHECKLIST:**`. Those blocks are
extracted as Sections for collapsible display and removed from the main
content. Rules come from the section catalog; sections are emitted in rule
order, then in match order within a rule.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from prowrite.catalog.loader import get_section_catalog
from prowrite.catalog.models import SectionCatalog, SectionType
from prowrite.core.logging import get_component_logger

log = get_component_logger(__name__)

_EXCESS_NEWLINES = re.compile(r"\n{3,}")


@dataclass
class Section:
    """A labeled excerpt of generated text."""
    type: SectionType
    title: str
    content: str
    icon: str = ""


@dataclass
class ParsedContent:
    """Generated text split into main content and extracted sections."""
    main_content: str
    educational_sections: list[Section] = field(default_factory=list)


def parse_educational_content(
    content: str,
    catalog: Optional[SectionCatalog] = None,
) -> ParsedContent:
    """
    Extract educational sections from generated content.

    Args:
        content: Raw model output
        catalog: Section rules (default: the packaged section catalog)

    Returns:
        ParsedContent; main_content has the matched blocks removed, runs of
        3+ newlines collapsed to 2, and is trimmed
    """
    catalog = catalog or get_section_catalog()
    sections: list[Section] = []
    main_content = content

    for rule in catalog.rules:
        for match in rule.pattern.finditer(content):
            section_content = match.group(1).strip()
            if not section_content:
                continue

            sections.append(Section(
                type=rule.type,
                title=rule.title,
                content=section_content,
                icon=rule.icon,
            ))
            main_content = main_content.replace(match.group(0), "", 1)

    main_content = _EXCESS_NEWLINES.sub("\n\n", main_content).strip()

    log.verbose(
        "educational_sections_extracted",
        sections=len(sections),
        titles=[s.title for s in sections],
    )
    return ParsedContent(main_content=main_content, educational_sections=sections)


def has_educational_content(
    content: str,
    catalog: Optional[SectionCatalog] = None,
) -> bool:
    """Check whether any section label appears in the content."""
    catalog = catalog or get_section_catalog()
    return any(rule.pattern.search(content) for rule in catalog.rules)
