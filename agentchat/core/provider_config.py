"""Agent configuration module.

This module provides configuration for the chat agent and its LLM providers,
with support for reading from environment variables and a ``.env`` file.
"""

from typing import Optional, Dict, Any, Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dataclasses import dataclass, field

from agentchat.core.errors import ConfigError


ProviderType = Literal["openai", "anthropic"]

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant that can do various tasks. "
    "You can check the weather and the local time, schedule tasks "
    "and calculate arithmetic expressions. Expressions are evaluated "
    "left to right, with numbers and operators separated by spaces."
)


class AgentSettings(BaseSettings):
    """Global settings for the chat agent.

    Each supported provider has its own API key and model fields. Values are
    read from environment variables (case insensitive) and the env file.
    """

    chat_provider: ProviderType = Field("openai", description="Provider used by the chat client")
    system_prompt: str = Field(DEFAULT_SYSTEM_PROMPT, description="System message of every conversation")

    # OpenAI settings
    openai_api_key: Optional[str] = Field(None, description="OpenAI API key")
    openai_model: str = Field("gpt-4o", description="Default OpenAI model")
    openai_base_url: Optional[str] = Field(None, description="Optional OpenAI API base URL")

    # Anthropic settings
    anthropic_api_key: Optional[str] = Field(None, description="Anthropic API key")
    anthropic_model: str = Field("claude-3-5-sonnet-latest", description="Default Anthropic model")

    # Logging settings
    log_level: str = Field("INFO", description="Logging level name")
    log_dir: Optional[str] = Field(None, description="Directory for rotating log files")

    def __init__(self, env_file: Optional[str] = ".env", **kwargs):
        super().__init__(_env_file=env_file, **kwargs)

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore"
    )


@dataclass
class ProviderConfig:
    """Configuration for a specific LLM provider instance.

    Attributes:
        api_key: The API key for the provider
        model: The model name to use
        base_url: Optional base URL for the API
        extra_config: Additional provider-specific configuration
    """

    api_key: Optional[str] = None
    model: Optional[str] = None
    base_url: Optional[str] = None
    extra_config: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, provider: str, settings: Optional[AgentSettings] = None) -> "ProviderConfig":
        """Create a provider config from settings.

        Args:
            provider: The provider to load config for
            settings: Optional settings instance, will load from env if not provided

        Raises:
            ConfigError: If provider is not supported
        """
        if settings is None:
            settings = AgentSettings()

        provider_configs = {
            "openai": lambda: cls(
                api_key=settings.openai_api_key,
                model=settings.openai_model,
                base_url=settings.openai_base_url
            ),
            "anthropic": lambda: cls(
                api_key=settings.anthropic_api_key,
                model=settings.anthropic_model
            )
        }

        if provider not in provider_configs:
            raise ConfigError(f"Unsupported provider: {provider}")

        return provider_configs[provider]()

    @property
    def is_configured(self) -> bool:
        """Check whether a model and an API key are both present."""
        return bool(self.model) and bool(self.api_key)
