"""LLM providers for the chat agent."""

from .openai import OpenAIProvider
from .anthropic import AnthropicProvider
from .registry import DefaultProviderRegistry

__all__ = ["OpenAIProvider", "AnthropicProvider", "DefaultProviderRegistry"]
