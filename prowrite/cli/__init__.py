"""CLI — Command-line interface."""
