from agentchat.types.models import (
    Tool,
    ToolParameter,
    ToolResult,
    ToolHandler,
    ToolCall,
    Message,
    ConfirmationCallback
)

__all__ = [
    "Tool",
    "ToolParameter",
    "ToolResult",
    "ToolHandler",
    "ToolCall",
    "Message",
    "ConfirmationCallback"
]
