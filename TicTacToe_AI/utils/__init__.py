"""CLI, logging and settings helpers."""
