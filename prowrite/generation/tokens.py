"""
Personalization Tokens — `{{token}}` placeholders that must survive generation.

A token is any `{{...}}` run whose body contains no closing brace. The
braces are part of the token, so `{{ name }}` and `{{name}}` are different
tokens.
"""

import re
from dataclasses import dataclass, field

from prowrite.core.logging import get_component_logger

log = get_component_logger(__name__)

TOKEN_PATTERN = re.compile(r"\{\{[^}]+\}\}")


@dataclass
class TokenPreservationResult:
    is_valid: bool
    missing_tokens: list[str] = field(default_factory=list)
    preserved_tokens: list[str] = field(default_factory=list)


def extract_tokens(content: str) -> list[str]:
    """All tokens in left-to-right order, duplicates included."""
    return [m.group(0) for m in TOKEN_PATTERN.finditer(content)]


def validate_token_preservation(expected_tokens: list[str], output_content: str) -> TokenPreservationResult:
    """
    Check that every expected token appears in the output.

    Missing and preserved lists follow the order of expected_tokens and keep
    its duplicates.
    """
    found = set(extract_tokens(output_content))

    missing = [t for t in expected_tokens if t not in found]
    preserved = [t for t in expected_tokens if t in found]

    if missing:
        log.verbose("tokens_missing", missing=missing, expected=len(expected_tokens))

    return TokenPreservationResult(
        is_valid=not missing,
        missing_tokens=missing,
        preserved_tokens=preserved,
    )
