"""Groq infrastructure package."""

from .groq_client import GroqClient

__all__ = ["GroqClient"]
