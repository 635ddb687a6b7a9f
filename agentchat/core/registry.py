"""Tool registry for the chat agent.

This module provides a registry for managing tool definitions.
"""

from typing import Dict, List, Any, Union

from agentchat.types import Tool
from agentchat.core.formats import to_openai_format, to_anthropic_format


class ToolRegistry:
    """Registry for managing tool definitions.

    The registry maintains the tools exposed to the model. It ensures that
    tool names are unique and keeps them in registration order.
    """

    def __init__(self) -> None:
        """Initialize an empty tool registry."""
        self._tools: Dict[str, Tool] = {}

    def register_tool(self, tool: Union[Tool, Dict[str, Any]]) -> None:
        """Register a new tool in the registry.

        Args:
            tool: The tool definition to register (either a Tool object or dict)

        Raises:
            ValueError: If a tool with the same name already exists
        """
        if isinstance(tool, dict):
            tool = Tool(**tool)

        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")

        self._tools[tool.name] = tool

    def get_tool(self, name: str) -> Tool:
        """Get a tool definition by name.

        Raises:
            KeyError: If no tool with the given name exists
        """
        if name not in self._tools:
            raise KeyError(f"No tool named '{name}' is registered")
        return self._tools[name]

    def list_tools(self) -> List[Tool]:
        """Get a list of all registered tools."""
        return list(self._tools.values())

    def to_openai_format(self) -> List[Dict[str, Any]]:
        return [to_openai_format(tool) for tool in self._tools.values()]

    def to_anthropic_format(self) -> List[Dict[str, Any]]:
        return [to_anthropic_format(tool) for tool in self._tools.values()]
