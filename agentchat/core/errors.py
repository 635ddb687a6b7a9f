"""Error classes for the chat agent."""

from typing import Any, Dict, Optional


class ProviderError(Exception):
    """Base exception for all provider-related errors."""

    def __init__(self, message: str, *, provider_name: Optional[str] = None):
        self.provider_name = provider_name
        super().__init__(message)

    def __str__(self) -> str:
        if self.provider_name:
            return f"[{self.provider_name}] {super().__str__()}"
        return super().__str__()


class ConfigError(ProviderError):
    """Raised when there is an error in provider configuration."""
    pass


class ToolExecutionError(Exception):
    """Raised when there is an error executing a tool."""
    pass


class ConfirmationRequiredError(ToolExecutionError):
    """Raised when a tool needs human approval and nobody can give it."""

    def __init__(self, tool_name: str, parameters: Dict[str, Any]):
        self.tool_name = tool_name
        self.parameters = parameters
        super().__init__(f"Tool '{tool_name}' requires confirmation before it can run")
