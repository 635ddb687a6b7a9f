"""Core provider interface for the chat agent."""

from abc import ABC, abstractmethod
from typing import List, Dict, Any

from agentchat.types import Tool


class Provider(ABC):
    """Base interface for LLM providers."""

    @abstractmethod
    def get_name(self) -> str:
        """Get the name of the provider.

        Returns:
            The provider's name (e.g., 'openai', 'anthropic')
        """
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get a description of the provider."""
        pass

    @abstractmethod
    async def run_conversation(
        self,
        messages: List[Dict[str, Any]],
        tools: List[Tool]
    ) -> str:
        """Run a conversation with the provider using available tools.

        Args:
            messages: List of conversation messages, extended in place with tool traffic
            tools: List of available tools

        Returns:
            The provider's final text response

        Raises:
            ProviderError: If there's an error communicating with the provider
        """
        pass
