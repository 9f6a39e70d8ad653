"""Steno chording engine for Gemini PR machines and JSON dictionaries."""

__version__ = "0.1.0"