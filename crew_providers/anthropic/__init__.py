"""
Anthropic provider package.

Exports:
- AnthropicClient: adapter for the Anthropic Messages HTTP API.
"""

from .client import AnthropicClient

__all__ = ["AnthropicClient"]
