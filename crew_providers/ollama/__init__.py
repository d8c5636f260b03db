"""
Ollama provider package.

Exports:
- OllamaClient: adapter for the Ollama REST API.
"""

from .client import OllamaClient

__all__ = ["OllamaClient"]
