"""Core — Logging and shared infrastructure."""
