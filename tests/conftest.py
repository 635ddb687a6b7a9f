"""Common test fixtures for the entire test suite."""

import pytest
from typing import Any, Dict, List, Optional, Callable

from agentchat.core import AgentSettings, ProviderConfig, ToolRegistry, ToolExecutor
from agentchat.types import Tool, ToolParameter


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Fixture to ensure no environment variables affect tests.

    This fixture runs automatically for all tests to ensure a clean environment.
    """
    env_vars = [
        "CHAT_PROVIDER", "SYSTEM_PROMPT", "LOG_LEVEL", "LOG_DIR",
        "OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL",
        "ANTHROPIC_API_KEY", "ANTHROPIC_MODEL"
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def base_tool_parameter():
    """Factory fixture for ToolParameter instances.

    Example:
        def test_something(base_tool_parameter):
            param = base_tool_parameter(param_type="string", required=True)
    """
    def _make_parameter(
        param_type: str = "string",
        description: str = "Test parameter",
        required: bool = True,
        enum: Optional[List[str]] = None,
        default: Any = None
    ) -> ToolParameter:
        return ToolParameter(
            type=param_type,
            description=description,
            required=required,
            enum=enum,
            default=default
        )
    return _make_parameter


@pytest.fixture
def base_tool():
    """Factory fixture for Tool instances."""
    def _make_tool(
        name: str,
        description: str,
        parameters: Dict[str, ToolParameter]
    ) -> Tool:
        return Tool(name=name, description=description, parameters=parameters)
    return _make_tool


@pytest.fixture
def base_provider_config():
    """Factory fixture for ProviderConfig instances built from settings.

    Example:
        def test_something(base_provider_config):
            config = base_provider_config("openai", api_key="test-key")
    """
    def _make_config(
        provider_type: str,
        api_key: Optional[str] = None,
        model: Optional[str] = None
    ) -> ProviderConfig:
        overrides: Dict[str, Any] = {}
        if api_key:
            overrides[f"{provider_type}_api_key"] = api_key
        if model:
            overrides[f"{provider_type}_model"] = model
        settings = AgentSettings(env_file=None, **overrides)
        return ProviderConfig.from_settings(provider_type, settings)
    return _make_config


@pytest.fixture
def base_tool_executor():
    """Factory fixture for a ToolExecutor with registered tools and handlers.

    Example:
        def test_something(base_tool_executor, sample_tools):
            executor = base_tool_executor(
                tools=sample_tools,
                handlers={"test_tool": handler}
            )
    """
    def _make_executor(
        tools: List[Tool],
        handlers: Dict[str, Callable],
        confirmation_handlers: Optional[Dict[str, Callable]] = None,
        confirm: Optional[Callable] = None
    ) -> ToolExecutor:
        registry = ToolRegistry()
        for tool in tools:
            registry.register_tool(tool)

        executor = ToolExecutor(registry, confirm=confirm)
        for name, handler in handlers.items():
            executor.register_handler(name, handler)
        for name, handler in (confirmation_handlers or {}).items():
            executor.register_confirmation_handler(name, handler)
        return executor
    return _make_executor


@pytest.fixture
def mock_async_handler():
    """Factory fixture for async handlers with a fixed return value or error."""
    def _make_handler(return_value: Any = None, error: Optional[Exception] = None):
        async def handler(params: Dict[str, Any]) -> Any:
            if error:
                raise error
            return return_value
        return handler
    return _make_handler


@pytest.fixture
def sample_messages():
    """A system message followed by a short exchange."""
    return [
        {"role": "system", "content": "You are a helpful AI assistant."},
        {"role": "user", "content": "Hello, can you help me?"},
        {"role": "assistant", "content": "Of course! What can I help you with?"},
        {"role": "user", "content": "What is 2 + 2?"}
    ]


@pytest.fixture
def sample_tools(base_tool, base_tool_parameter):
    """Two tools with different parameter shapes."""
    return [
        base_tool(
            name="test_tool",
            description="A test tool for demonstration",
            parameters={
                "param1": base_tool_parameter(
                    param_type="string",
                    description="A required string parameter",
                    required=True
                ),
                "param2": base_tool_parameter(
                    param_type="integer",
                    description="An optional integer parameter with enum values",
                    required=False,
                    enum=["1", "2", "3"]
                )
            }
        ),
        base_tool(
            name="another_tool",
            description="Another test tool with different parameters",
            parameters={
                "param3": base_tool_parameter(
                    param_type="boolean",
                    description="A boolean parameter",
                    required=True
                )
            }
        )
    ]
