"""
Structured Output Parsers — Marker-based formats requested from the model.

Cold email:
    SUBJECT: <one line>
    BODY:
    <rest of text>

Landing page:
    HEADLINE: <one line>
    SUBHEADLINE: <one line>
    BENEFITS:
    - Title: description
    CTA: <one line>
    META_DESCRIPTION: <one line>

Markers are case-insensitive. Missing sections parse as empty values; the
validate_* helpers report which required sections are missing.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from prowrite.core.logging import get_component_logger
from prowrite.schema.models import ModuleType

log = get_component_logger(__name__)


# =============================================================================
# Patterns
# =============================================================================

SUBJECT = re.compile(r"SUBJECT:\s*(.+?)(?:\n|\Z)", re.IGNORECASE)
BODY = re.compile(r"BODY:\s*([\s\S]*?)\Z", re.IGNORECASE)

# HEADLINE only at text or line start, so SUBHEADLINE is not taken for it
HEADLINE = re.compile(r"(?:^|\n)HEADLINE:\s*(.+?)(?:\n|\Z)", re.IGNORECASE)
SUBHEADLINE = re.compile(r"SUBHEADLINE:\s*(.+?)(?:\n|\Z)", re.IGNORECASE)
CTA = re.compile(r"CTA:\s*(.+?)(?:\n|\Z)", re.IGNORECASE)
META_DESCRIPTION = re.compile(r"META_DESCRIPTION:\s*(.+?)(?:\n|\Z)", re.IGNORECASE)
BENEFITS = re.compile(r"BENEFITS:\s*([\s\S]*?)(?=CTA:|META_DESCRIPTION:|\Z)", re.IGNORECASE)
BULLET_PREFIX = re.compile(r"^-\s*")


# =============================================================================
# Models
# =============================================================================

@dataclass
class OutputCheck:
    """Which required sections a parsed output is missing."""
    is_valid: bool
    missing: list[str] = field(default_factory=list)


@dataclass
class ColdEmail:
    subject: str = ""
    body: str = ""

    def check(self) -> OutputCheck:
        missing = [name for name, value in (("subject", self.subject), ("body", self.body)) if not value]
        return OutputCheck(is_valid=not missing, missing=missing)


@dataclass
class Benefit:
    title: str
    description: str = ""


@dataclass
class LandingPage:
    headline: str = ""
    subheadline: str = ""
    benefits: list[Benefit] = field(default_factory=list)
    cta: str = ""
    meta_description: str = ""

    def check(self) -> OutputCheck:
        """Headline, subheadline, benefits and CTA are required; meta is optional."""
        required = (
            ("headline", bool(self.headline)),
            ("subheadline", bool(self.subheadline)),
            ("benefits", bool(self.benefits)),
            ("cta", bool(self.cta)),
        )
        missing = [name for name, present in required if not present]
        return OutputCheck(is_valid=not missing, missing=missing)


# =============================================================================
# Parsing
# =============================================================================

def _first_group(pattern: re.Pattern, content: str) -> str:
    match = pattern.search(content)
    return match.group(1).strip() if match else ""


def parse_cold_email_content(content: str) -> ColdEmail:
    """Parse SUBJECT / BODY sections of a cold email."""
    return ColdEmail(
        subject=_first_group(SUBJECT, content),
        body=_first_group(BODY, content),
    )


def validate_cold_email_output(content: str) -> OutputCheck:
    """Check that a cold email has both a subject and a body."""
    result = parse_cold_email_content(content).check()
    if not result.is_valid:
        log.verbose("cold_email_incomplete", missing=result.missing)
    return result


def _parse_benefits(block: str) -> list[Benefit]:
    benefits = []
    for line in block.split("\n"):
        if not line.strip().startswith("-"):
            continue

        clean = BULLET_PREFIX.sub("", line.strip()).strip()
        title, sep, description = clean.partition(":")
        # A leading colon is not a title separator
        if sep and title:
            benefits.append(Benefit(title=title.strip(), description=description.strip()))
        else:
            benefits.append(Benefit(title=clean))
    return benefits


def parse_landing_page_content(content: str) -> LandingPage:
    """Parse the sections of landing page copy."""
    benefits_match = BENEFITS.search(content)

    return LandingPage(
        headline=_first_group(HEADLINE, content),
        subheadline=_first_group(SUBHEADLINE, content),
        benefits=_parse_benefits(benefits_match.group(1)) if benefits_match else [],
        cta=_first_group(CTA, content),
        meta_description=_first_group(META_DESCRIPTION, content),
    )


def validate_landing_page_output(content: str) -> OutputCheck:
    """Check that landing page copy has every required section."""
    result = parse_landing_page_content(content).check()
    if not result.is_valid:
        log.verbose("landing_page_incomplete", missing=result.missing)
    return result


def parse_generated_output(
    module_type: Union[ModuleType, str],
    content: str,
) -> Optional[Union[ColdEmail, LandingPage]]:
    """
    Parse output according to the module's format.

    Returns None for modules without a marker format.
    """
    module_type = ModuleType(module_type)
    if module_type == ModuleType.COLD_EMAIL:
        return parse_cold_email_content(content)
    if module_type == ModuleType.WEBSITE_COPY:
        return parse_landing_page_content(content)
    return None
