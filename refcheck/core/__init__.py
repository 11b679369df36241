"""Shared infrastructure for refcheck: logging, errors, console output, CLI helpers."""
