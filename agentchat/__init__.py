"""agentchat: a demo chat agent with tool calling.

The assistant can look up the weather (after the user approves), tell the
local time, schedule, list and cancel tasks, and evaluate arithmetic
expressions.

Key Components:
    - Core Types: Tool, ToolParameter, ToolResult for defining tools
    - ToolRegistry: Central registry of the tools shown to the model
    - ToolExecutor: Runs tool calls, asking for confirmation where needed
    - Providers: OpenAI and Anthropic conversation runners

Example:
    ```python
    from agentchat import InMemoryTaskScheduler, create_toolset

    registry, executor = create_toolset(InMemoryTaskScheduler())
    result = await executor.execute_tool("calculate", {"expression": "2 + 2"})
    # "2 + 2 = 4"
    ```
"""

from agentchat.types import (
    Tool,
    ToolParameter,
    ToolResult,
    ToolHandler,
    ToolCall,
    Message
)
from agentchat.core import ToolRegistry, ToolExecutor
from agentchat.scheduling import InMemoryTaskScheduler, TaskScheduler
from agentchat.tools import create_toolset
from agentchat.tools.calculator import Calculation, evaluate

__all__ = [
    "Tool",
    "ToolParameter",
    "ToolResult",
    "ToolHandler",
    "ToolCall",
    "Message",
    "ToolRegistry",
    "ToolExecutor",
    "TaskScheduler",
    "InMemoryTaskScheduler",
    "create_toolset",
    "Calculation",
    "evaluate",
]

__version__ = "0.1.0"
