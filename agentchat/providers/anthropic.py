"""Anthropic provider implementation."""

import logging
from typing import List, Dict, Any, Optional, Tuple

from anthropic import AsyncAnthropic

from agentchat.core import Provider, ProviderConfig, ProviderError, ToolExecutor
from agentchat.core.formats import to_anthropic_format
from agentchat.types import Tool

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-3-5-sonnet-latest"
DEFAULT_MAX_TOKENS = 4096
MAX_TOOL_ROUNDS = 10


class AnthropicProvider(Provider):
    """Anthropic provider implementation."""

    def __init__(self, config: ProviderConfig, executor: ToolExecutor):
        """Initialize Anthropic provider.

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
            self._client = AsyncAnthropic(api_key=config.api_key)
        except Exception as e:
            raise ProviderError(f"Failed to initialize Anthropic client: {str(e)}", provider_name="anthropic")

    def get_name(self) -> str:
        return "anthropic"

    def get_description(self) -> str:
        return "Anthropic provider supporting Claude models with tool use capabilities"

    async def run_conversation(
        self,
        messages: List[Dict[str, Any]],
        tools: List[Tool]
    ) -> str:
        """Run a conversation using Anthropic's messages API.

        The chat history is converted to Anthropic's format; tool traffic of
        this turn is kept in the converted copy only.

        Raises:
            ProviderError: If there's an error communicating with Anthropic
        """
        formatted_tools = self._format_tools(tools)
        system_message, anthropic_messages = self._convert_messages(messages)

        for _ in range(MAX_TOOL_ROUNDS):
            request: Dict[str, Any] = {
                "model": self.config.model,
                "messages": anthropic_messages,
                "tools": formatted_tools,
                "max_tokens": DEFAULT_MAX_TOKENS
            }
            if system_message:
                request["system"] = system_message

            try:
                response = await self._client.messages.create(**request)
            except Exception as e:
                raise ProviderError(f"Error in Anthropic conversation: {str(e)}", provider_name="anthropic") from e

            text_parts = []
            assistant_content = []
            tool_results = []
            for block in response.content:
                if block.type == "text":
                    text_parts.append(block.text)
                    assistant_content.append({"type": "text", "text": block.text})
                elif block.type == "tool_use":
                    assistant_content.append({
                        "type": "tool_use",
                        "id": block.id,
                        "name": block.name,
                        "input": block.input
                    })
                    logger.debug("Executing tool call", extra={
                        "tool_name": block.name,
                        "tool_call_id": block.id
                    })
                    output = await self.executor.execute_tool_for_model(block.name, block.input)
                    tool_results.append({
                        "type": "tool_result",
                        "tool_use_id": block.id,
                        "content": output
                    })

            if not tool_results:
                return " ".join(text_parts)

            anthropic_messages.append({"role": "assistant", "content": assistant_content})
            anthropic_messages.append({"role": "user", "content": tool_results})

        raise ProviderError(
            f"Model kept calling tools after {MAX_TOOL_ROUNDS} rounds",
            provider_name="anthropic"
        )

    def _convert_messages(
        self,
        messages: List[Dict[str, Any]]
    ) -> Tuple[Optional[str], List[Dict[str, Any]]]:
        """Split out the system message and keep user/assistant text turns."""
        system_message = None
        anthropic_messages = []
        for msg in messages:
            if msg["role"] == "system":
                system_message = msg["content"]
            elif msg["role"] in ("user", "assistant") and msg.get("content"):
                anthropic_messages.append({"role": msg["role"], "content": msg["content"]})
        return system_message, anthropic_messages

    def _format_tools(self, tools: List[Tool]) -> List[Dict[str, Any]]:
        return [to_anthropic_format(tool) for tool in tools]
