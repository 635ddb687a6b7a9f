"""Provider-specific tool schemas.

Converts tool definitions into the JSON schemas the OpenAI and Anthropic
tool calling APIs expect.
"""

import json
from typing import Dict, Any

from agentchat.types import Tool, ToolParameter, ToolResult


def format_tool_output(result: ToolResult) -> str:
    """Render a tool result as the text sent back to the model."""
    if isinstance(result, str):
        return result
    return json.dumps(result, default=str)


def _parameter_schema(param: ToolParameter) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "type": param.type,
        "description": param.description
    }
    if param.enum:
        schema["enum"] = param.enum
    if param.properties is not None:
        schema["properties"] = param.properties
        if param.required_properties:
            schema["required"] = param.required_properties
    return schema


def _input_schema(tool: Tool) -> Dict[str, Any]:
    properties = {}
    required = []

    for name, param in tool.parameters.items():
        properties[name] = _parameter_schema(param)
        if param.required:
            required.append(name)

    return {
        "type": "object",
        "properties": properties,
        "required": required
    }


def to_openai_format(tool: Tool) -> Dict[str, Any]:
    """Convert tool definition to OpenAI function format.

    Args:
        tool: The tool definition to convert

    Returns:
        Dict representation compatible with OpenAI's function calling format
    """
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": _input_schema(tool)
        }
    }


def to_anthropic_format(tool: Tool) -> Dict[str, Any]:
    """Convert tool definition to Anthropic's tool format.

    Args:
        tool: The tool definition to convert

    Returns:
        Dict representation compatible with Anthropic's tool calling format
    """
    return {
        "name": tool.name,
        "description": tool.description,
        "input_schema": _input_schema(tool)
    }
