"""
Variation Distinctness — Keep only A/B variations that differ enough.

Texts are compared after normalization (lowercase, collapsed whitespace)
using the Jaccard index of their word sets, counting only words longer than
two characters. A candidate is rejected when it normalizes to an existing
entry or is more than DISTINCTNESS_THRESHOLD similar to one.

Filtering is greedy and order-dependent: the first of two near-duplicates
is the one kept.
"""

import re

from prowrite.core.logging import get_component_logger

log = get_component_logger(__name__)

DISTINCTNESS_THRESHOLD = 0.9
MIN_WORD_LENGTH = 3

_WHITESPACE = re.compile(r"\s+")


def normalize_for_comparison(content: str) -> str:
    return _WHITESPACE.sub(" ", content.lower()).strip()


def _word_set(content: str) -> set[str]:
    return {w for w in normalize_for_comparison(content).split(" ") if len(w) >= MIN_WORD_LENGTH}


def calculate_similarity(a: str, b: str) -> float:
    """
    Jaccard similarity of the significant word sets of a and b.

    Two texts without significant words are identical (1.0).
    """
    words_a = _word_set(a)
    words_b = _word_set(b)

    if not words_a and not words_b:
        return 1.0

    return len(words_a & words_b) / len(words_a | words_b)


def is_distinct_variation(
    candidate: str,
    existing: list[str],
    threshold: float = DISTINCTNESS_THRESHOLD,
) -> bool:
    """True if candidate is neither a normalized duplicate nor too similar."""
    if not existing:
        return True

    normalized = normalize_for_comparison(candidate)

    for other in existing:
        if normalized == normalize_for_comparison(other):
            return False
        if calculate_similarity(normalized, other) > threshold:
            return False

    return True


def filter_to_distinct_variations(
    candidates: list[str],
    threshold: float = DISTINCTNESS_THRESHOLD,
) -> list[str]:
    """Greedily keep candidates distinct from those already kept, in input order."""
    distinct: list[str] = []
    for candidate in candidates:
        if is_distinct_variation(candidate, distinct, threshold):
            distinct.append(candidate)

    if len(distinct) < len(candidates):
        log.verbose("variations_filtered", kept=len(distinct), dropped=len(candidates) - len(distinct))

    return distinct
