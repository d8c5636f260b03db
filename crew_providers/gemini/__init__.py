"""
Gemini provider package.

Exports:
- GeminiClient: adapter for the Google Generative Language API.
"""

from .client import GeminiClient

__all__ = ["GeminiClient"]
