"""LLM infrastructure module: concrete LLM client implementations."""

from .groq_product_llm_client import GroqProductLLMClient

__all__ = [
    "GroqProductLLMClient",
]
