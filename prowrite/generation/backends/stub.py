"""
Scripted Backend — Canned responses for tests and offline runs.

Returns the configured responses in order, cycling when exhausted. An
exception instance in the script is raised instead of returned.
"""

from typing import Optional, Union

from prowrite.generation.interfaces import (
    ContentGenerator,
    GenerationResult,
    estimate_tokens,
)


class ScriptedGenerator(ContentGenerator):
    """Generator that replays a fixed script of responses."""

    def __init__(self, responses: list[Union[str, Exception]]):
        if not responses:
            raise ValueError("ScriptedGenerator needs at least one response")
        self._responses = list(responses)
        self.calls: list[dict] = []

    @property
    def name(self) -> str:
        return "scripted"

    def generate(
        self,
        prompt: str,
        system_instruction: str,
        temperature: Optional[float] = None,
    ) -> GenerationResult:
        """Return the next scripted response."""
        response = self._responses[len(self.calls) % len(self._responses)]
        self.calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "temperature": temperature,
        })

        if isinstance(response, Exception):
            raise response
        return GenerationResult(content=response, tokens=estimate_tokens(prompt + response))
