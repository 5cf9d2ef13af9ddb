"""
Generation Interfaces — Abstract interface for content generators.

Generators are text sources, not authorities: their output is checked
(distinctness, token preservation, marker format) before it is used.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class GenerationError(RuntimeError):
    """A generator call failed; the caller may retry."""


@dataclass
class GenerationResult:
    """Result from one generator call."""

    content: str
    tokens: int = 0


def estimate_tokens(text: str) -> int:
    """Rough token count for backends that report no usage."""
    return math.ceil(len(text) / 4)


class ContentGenerator(ABC):
    """
    Abstract interface for content generation.

    Implementations must:
    - Return the raw generated text
    - Raise GenerationError for failures worth retrying
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for logging."""
        ...

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system_instruction: str,
        temperature: Optional[float] = None,
    ) -> GenerationResult:
        """
        Generate content for a prompt.

        Args:
            prompt: User prompt
            system_instruction: Template system prompt
            temperature: Sampling temperature (backend default if None)
        """
        ...
