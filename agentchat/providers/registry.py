"""Provider registry for the chat agent."""

from typing import Dict, List

from agentchat.core import Provider, ProviderConfig, ToolExecutor
from .openai import OpenAIProvider
from .anthropic import AnthropicProvider

PROVIDER_CLASSES = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
}


class DefaultProviderRegistry:
    """Creates providers by name and keeps one instance of each."""

    def __init__(self, executor: ToolExecutor) -> None:
        """Initialize the registry.

        Args:
            executor: Tool executor handed to every provider
        """
        self.executor = executor
        self.providers: Dict[str, Provider] = {}

    def available(self) -> List[str]:
        return list(PROVIDER_CLASSES)

    def get_provider(self, name: str, config: ProviderConfig) -> Provider:
        """Get a provider by name, creating it on first use.

        Args:
            name: The name of the provider
            config: Configuration used if the provider has to be created

        Raises:
            KeyError: If the provider is not known
        """
        if name not in self.providers:
            if name not in PROVIDER_CLASSES:
                raise KeyError(f"Provider '{name}' not found")
            self.providers[name] = PROVIDER_CLASSES[name](config, self.executor)
        return self.providers[name]
