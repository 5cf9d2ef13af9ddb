"""Generation — Token preservation, variation distinctness and sampling."""

from prowrite.generation.interfaces import (
    ContentGenerator,
    GenerationError,
    GenerationResult,
    estimate_tokens,
)
from prowrite.generation.sampler import generate_variations
from prowrite.generation.tokens import (
    TokenPreservationResult,
    extract_tokens,
    validate_token_preservation,
)
from prowrite.generation.variations import (
    DISTINCTNESS_THRESHOLD,
    calculate_similarity,
    filter_to_distinct_variations,
    is_distinct_variation,
    normalize_for_comparison,
)

__all__ = [
    # Interfaces
    "ContentGenerator",
    "GenerationError",
    "GenerationResult",
    "estimate_tokens",
    # Sampling
    "generate_variations",
    # Tokens
    "TokenPreservationResult",
    "extract_tokens",
    "validate_token_preservation",
    # Distinctness
    "DISTINCTNESS_THRESHOLD",
    "calculate_similarity",
    "filter_to_distinct_variations",
    "is_distinct_variation",
    "normalize_for_comparison",
]
