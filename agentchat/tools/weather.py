"""Weather tool for the chat agent.

The weather tool needs human confirmation: the model can ask for it, but the
handler only runs once the user approves the call.

Public Interface:
    - create_weather_tool(): Create the weather tool definition
    - weather_handler(): Run an approved weather lookup
"""

import logging
from typing import Dict, Any

from agentchat.types import Tool, ToolParameter

logger = logging.getLogger(__name__)


def create_weather_tool() -> Tool:
    """Create a weather tool definition."""
    return Tool(
        name="getWeatherInformation",
        description="show the weather in a given city to the user",
        parameters={
            "city": ToolParameter(
                type="string",
                description="City to show the weather for",
                required=True
            )
        }
    )


async def weather_handler(params: Dict[str, Any]) -> str:
    """Handle an approved weather lookup.

    Args:
        params: Dictionary containing:
            - city: City name

    Returns:
        The weather report for the city
    """
    city = params["city"]
    logger.info("Getting weather information", extra={"city": city})
    return f"The weather in {city} is sunny"
