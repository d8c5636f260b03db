"""
Azure OpenAI provider package.

Exports:
- AzureOpenAIClient: OpenAI-style adapter addressing Azure deployments.
"""

from .client import AzureOpenAIClient

__all__ = ["AzureOpenAIClient"]
