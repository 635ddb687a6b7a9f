"""Type definitions for the chat agent.

This module contains the core type definitions used throughout the agent,
including Tool, ToolParameter, and related types.
"""

from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Literal,
    Optional,
    TypedDict,
    Union,
)

from pydantic import BaseModel


class ToolParameter(BaseModel):
    """Definition of a tool parameter.

    Attributes:
        type: The JSON schema type of the parameter (string, number, object, etc.)
        description: A human-readable description of the parameter
        required: Whether the parameter is required (default: False)
        default: Default value for the parameter if not provided
        enum: Optional list of allowed values for the parameter
        properties: Nested JSON schema properties for object parameters
        required_properties: Names of the nested properties that are required
    """

    type: str
    description: str
    required: bool = False
    default: Optional[Any] = None
    enum: Optional[List[str]] = None
    properties: Optional[Dict[str, Dict[str, Any]]] = None
    required_properties: Optional[List[str]] = None


class Tool(BaseModel):
    """Definition of a tool that can be called by the model.

    Attributes:
        name: The name of the tool
        description: A human-readable description of what the tool does
        parameters: Dictionary of parameter names to ToolParameter objects
    """

    name: str
    description: str
    parameters: Dict[str, ToolParameter]


class ToolCall(TypedDict, total=False):
    """A tool call requested by the model.

    Attributes:
        id: Unique identifier for the tool call
        name: Name of the tool
        arguments: Tool input parameters
    """

    id: str
    name: str
    arguments: Dict[str, Any]


class Message(TypedDict, total=False):
    """A message in a conversation (OpenAI chat format).

    Attributes:
        role: The role of the message sender
        content: The message content (can be None for tool calls)
        tool_call_id: ID of the tool call this message responds to
        tool_calls: List of tool calls made in this message
    """

    role: Literal["system", "user", "assistant", "tool"]
    content: Optional[str]
    tool_call_id: Optional[str]
    tool_calls: Optional[List[Dict[str, Any]]]


# Type aliases for tool results and handlers
ToolResult = Union[str, int, float, bool, dict, list, None]

# Support both sync and async handlers
SyncToolHandler = Callable[[Dict[str, Any]], ToolResult]
AsyncToolHandler = Callable[[Dict[str, Any]], Awaitable[ToolResult]]
ToolHandler = Union[SyncToolHandler, AsyncToolHandler]

# Decides whether a confirmation-required tool call may run
ConfirmationCallback = Callable[[str, Dict[str, Any]], Awaitable[bool]]
