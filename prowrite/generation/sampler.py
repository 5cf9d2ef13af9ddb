"""
Variation Sampler — Ask a generator for N distinct A/B variations.

Each attempt raises the temperature a little and appends a directive asking
for a fresh version. Responses too similar to one already kept are dropped.
The attempt budget is count * MAX_ATTEMPTS_PER_VARIATION; a shortfall is
logged and the variations found so far are returned.
"""

from prowrite.core.logging import get_component_logger
from prowrite.generation.interfaces import ContentGenerator, GenerationError
from prowrite.generation.variations import DISTINCTNESS_THRESHOLD, is_distinct_variation

log = get_component_logger(__name__)

MAX_ATTEMPTS_PER_VARIATION = 3
BASE_TEMPERATURE = 0.9
TEMPERATURE_STEP = 0.02

VARIATION_DIRECTIVE = """

IMPORTANT: Generate a unique and distinct version. Be creative with different:
- Word choices and phrasing
- Sentence structures
- Opening hooks
- Call-to-action approaches
Each version should feel fresh while maintaining the same core message."""


def variation_temperature(attempt: int) -> float:
    """Sampling temperature for the given 1-based attempt."""
    return round(BASE_TEMPERATURE + attempt * TEMPERATURE_STEP, 4)


def generate_variations(
    generator: ContentGenerator,
    prompt: str,
    system_instruction: str,
    count: int = 2,
    threshold: float = DISTINCTNESS_THRESHOLD,
) -> list[str]:
    """
    Generate up to `count` mutually distinct variations.

    A single variation is generated once with the plain system instruction,
    and a GenerationError from that call propagates. For two or more, failed
    attempts are logged and count against the budget.
    """
    if count < 1:
        return []

    if count == 1:
        return [generator.generate(prompt, system_instruction).content]

    instruction = system_instruction + VARIATION_DIRECTIVE
    max_attempts = count * MAX_ATTEMPTS_PER_VARIATION
    variations: list[str] = []
    attempts = 0

    while len(variations) < count and attempts < max_attempts:
        attempts += 1
        try:
            result = generator.generate(prompt, instruction, temperature=variation_temperature(attempts))
        except GenerationError as e:
            log.warning("variation_attempt_failed", attempt=attempts, backend=generator.name, error=str(e))
            continue

        if is_distinct_variation(result.content, variations, threshold):
            variations.append(result.content)
        else:
            log.debug("variation_rejected", attempt=attempts)

    if len(variations) < count:
        log.warning(
            "variations_short",
            generated=len(variations),
            requested=count,
            attempts=attempts,
        )
    else:
        log.verbose("variations_generated", count=count, attempts=attempts)

    return variations
