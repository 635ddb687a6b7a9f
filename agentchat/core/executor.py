"""Tool executor for the chat agent.

This module runs tool calls with parameter validation. Tools come in two
flavours: tools with an automatic handler run as soon as the model asks for
them, while tools that only have a confirmation handler run after a human
approves the call.
"""

import inspect
import logging
from typing import Dict, Any, List, Optional

from agentchat.types import Tool, ToolResult, ToolHandler, ConfirmationCallback
from agentchat.core.errors import ToolExecutionError, ConfirmationRequiredError
from agentchat.core.formats import format_tool_output
from agentchat.core.registry import ToolRegistry

logger = logging.getLogger(__name__)

DENIED_MESSAGE = "Error: User denied access to tool execution"


class ToolExecutor:
    """Executor for running tools with parameter validation.

    The executor maps tool names to handlers. Automatic handlers are
    registered with ``register_handler``; handlers of tools that need human
    approval are registered with ``register_confirmation_handler`` and only
    run once the ``confirm`` callback approves the call.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        confirm: Optional[ConfirmationCallback] = None
    ) -> None:
        """Initialize a tool executor.

        Args:
            registry: The tool registry containing tool definitions
            confirm: Optional async callback asked to approve confirmation-required calls
        """
        self._registry = registry
        self._handlers: Dict[str, ToolHandler] = {}
        self._confirmation_handlers: Dict[str, ToolHandler] = {}
        self.confirm = confirm

    def register_handler(self, name: str, handler: ToolHandler) -> None:
        """Register an automatic handler for a tool.

        Raises:
            KeyError: If no tool with the given name exists in the registry
        """
        self._registry.get_tool(name)
        self._handlers[name] = handler

    def register_confirmation_handler(self, name: str, handler: ToolHandler) -> None:
        """Register the implementation of a tool that needs human approval.

        Raises:
            KeyError: If no tool with the given name exists in the registry
        """
        self._registry.get_tool(name)
        self._confirmation_handlers[name] = handler

    def requires_confirmation(self, name: str) -> bool:
        return name not in self._handlers and name in self._confirmation_handlers

    async def execute_tool(
        self,
        name: str,
        parameters: Dict[str, Any]
    ) -> ToolResult:
        """Execute a tool with the given parameters.

        Args:
            name: The name of the tool to execute
            parameters: Parameters to pass to the tool handler

        Returns:
            The result from the tool handler

        Raises:
            KeyError: If no tool with the given name exists
            ConfirmationRequiredError: If the tool needs approval and no callback is set
            ToolExecutionError: If the tool has no handler, parameters are missing,
                or the handler raises an exception
        """
        tool = self._registry.get_tool(name)
        self._validate_parameters(tool, parameters)

        if self.requires_confirmation(name):
            if self.confirm is None:
                raise ConfirmationRequiredError(name, parameters)
            approved = await self.confirm(name, parameters)
            logger.info("Tool confirmation answered", extra={
                "tool_name": name,
                "approved": approved
            })
            if not approved:
                return DENIED_MESSAGE
            handler = self._confirmation_handlers[name]
        else:
            handler = self._handlers.get(name)
            if handler is None:
                raise ToolExecutionError(f"No handler registered for tool '{name}'")

        try:
            result = handler(parameters)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            raise ToolExecutionError(f"Error executing tool '{name}': {str(e)}") from e

    async def execute_tool_for_model(self, name: str, parameters: Dict[str, Any]) -> str:
        """Execute a tool call requested by a model and render the outcome as text.

        Unknown tools and execution errors are reported back as text so the
        model can see what went wrong and try again.
        """
        try:
            result = await self.execute_tool(name, parameters)
        except KeyError as e:
            logger.warning("Model requested an unknown tool", extra={"tool_name": name})
            return f"Error: {e.args[0] if e.args else e}"
        except ToolExecutionError as e:
            logger.error("Tool call failed", extra={
                "tool_name": name,
                "error": str(e)
            })
            return f"Error: {e}"
        return format_tool_output(result)

    async def execute_tool_calls(self, tool_calls: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Execute multiple tool calls and return their results.

        Args:
            tool_calls: List of tool calls, each with ``id``, ``name`` and ``arguments``

        Returns:
            List of results, each containing the tool call ID and output
        """
        results = []
        for call in tool_calls:
            output = await self.execute_tool(call["name"], call["arguments"])
            results.append({
                "id": call["id"],
                "output": output
            })
        return results

    def _validate_parameters(self, tool: Tool, parameters: Dict[str, Any]) -> None:
        for name, param in tool.parameters.items():
            if param.required and name not in parameters:
                raise ToolExecutionError(
                    f"Missing required parameter '{name}' for tool '{tool.name}'"
                )
