"""OpenAI provider implementation."""

import json
import logging
from typing import List, Dict, Any

from openai import AsyncOpenAI

from agentchat.core import Provider, ProviderConfig, ProviderError, ToolExecutor
from agentchat.core.formats import to_openai_format
from agentchat.types import Tool

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"
MAX_TOOL_ROUNDS = 10


class OpenAIProvider(Provider):
    """OpenAI provider implementation."""

    def __init__(self, config: ProviderConfig, executor: ToolExecutor):
        """Initialize OpenAI provider.

        Args:
            config: Provider configuration
            executor: Tool executor for handling tool calls

        Raises:
            ProviderError: If initialization fails
        """
        self.config = config
        self.executor = executor
        if not config.model:
            config.model = DEFAULT_MODEL

        try:
            self._client = AsyncOpenAI(api_key=config.api_key, base_url=config.base_url)
        except Exception as e:
            raise ProviderError(f"Failed to initialize OpenAI client: {str(e)}", provider_name="openai")

    def get_name(self) -> str:
        return "openai"

    def get_description(self) -> str:
        return "OpenAI provider supporting GPT models with function calling capabilities"

    async def run_conversation(
        self,
        messages: List[Dict[str, Any]],
        tools: List[Tool]
    ) -> str:
        """Run a conversation using OpenAI's chat completion API.

        Tool calls requested by the model are executed and their results
        appended to ``messages`` until the model answers with text.

        Raises:
            ProviderError: If there's an error communicating with OpenAI
        """
        formatted_tools = self._format_tools(tools)

        for _ in range(MAX_TOOL_ROUNDS):
            try:
                response = await self._client.chat.completions.create(
                    model=self.config.model,
                    messages=messages,
                    tools=formatted_tools
                )
            except Exception as e:
                raise ProviderError(f"Error in OpenAI conversation: {str(e)}", provider_name="openai") from e

            message = response.choices[0].message
            if not message.tool_calls:
                return message.content or ""

            messages.append({
                "role": "assistant",
                "content": message.content,
                "tool_calls": [
                    {
                        "id": tool_call.id,
                        "type": "function",
                        "function": {
                            "name": tool_call.function.name,
                            "arguments": tool_call.function.arguments
                        }
                    }
                    for tool_call in message.tool_calls
                ]
            })

            for tool_call in message.tool_calls:
                try:
                    arguments = json.loads(tool_call.function.arguments or "{}")
                except json.JSONDecodeError as e:
                    output = f"Error: invalid tool arguments: {e}"
                else:
                    logger.debug("Executing tool call", extra={
                        "tool_name": tool_call.function.name,
                        "tool_call_id": tool_call.id
                    })
                    output = await self.executor.execute_tool_for_model(
                        tool_call.function.name, arguments
                    )
                messages.append({
                    "role": "tool",
                    "tool_call_id": tool_call.id,
                    "content": output
                })

        raise ProviderError(
            f"Model kept calling tools after {MAX_TOOL_ROUNDS} rounds",
            provider_name="openai"
        )

    def _format_tools(self, tools: List[Tool]) -> List[Dict[str, Any]]:
        return [to_openai_format(tool) for tool in tools]
