"""Local time tool for the chat agent.

Runs without confirmation, it is a low-risk lookup.
"""

import logging
from typing import Dict, Any

from agentchat.types import Tool, ToolParameter

logger = logging.getLogger(__name__)


def create_local_time_tool() -> Tool:
    return Tool(
        name="getLocalTime",
        description="get the local time for a specified location",
        parameters={
            "location": ToolParameter(
                type="string",
                description="Location to get the local time for",
                required=True
            )
        }
    )


async def local_time_handler(params: Dict[str, Any]) -> str:
    logger.info("Getting local time", extra={"location": params["location"]})
    return "10am"
