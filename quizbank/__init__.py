"""Persistence backend for the quiz question editor."""

__version__ = "0.1.0"
