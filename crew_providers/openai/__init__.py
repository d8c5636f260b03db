"""
OpenAI provider package.

Exports:
- OpenAIClient: adapter for the OpenAI Chat Completions and legacy
  Completions HTTP APIs.
"""

from .client import OpenAIClient

__all__ = ["OpenAIClient"]
