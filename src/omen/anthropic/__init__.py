"""Anthropic Messages API transport.

This package provides the synchronous client the agent uses to send
requests to the provider.
"""

from omen.anthropic.client import AnthropicClient, Transport

__all__ = ["AnthropicClient", "Transport"]
