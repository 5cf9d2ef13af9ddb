"""Generation Backends — Concrete content generators."""

from prowrite.generation.backends.stub import ScriptedGenerator

__all__ = [
    "ScriptedGenerator",
]
