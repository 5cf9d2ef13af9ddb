"""
ProWrite — structured-text utilities for generated content.

Validates template input schemas, splits model output into display
sections and document blocks, checks personalization-token preservation,
and keeps only sufficiently distinct A/B variations.
"""

__version__ = "0.1.0"
