"""Core module for the chat agent."""

from .errors import (
    ProviderError,
    ConfigError,
    ToolExecutionError,
    ConfirmationRequiredError
)
from .executor import ToolExecutor
from .provider import Provider
from .provider_config import AgentSettings, ProviderConfig
from .registry import ToolRegistry

__all__ = [
    "ToolRegistry",
    "ToolExecutor",
    "Provider",
    "AgentSettings",
    "ProviderConfig",
    "ProviderError",
    "ConfigError",
    "ToolExecutionError",
    "ConfirmationRequiredError"
]
