"""Interactive command-line chat client."""

import argparse
import asyncio
import logging
import sys
import time
from typing import Any, Dict, List, Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from agentchat.core import AgentSettings, ConfigError, Provider, ProviderConfig, ToolRegistry
from agentchat.logging_config import setup_logging
from agentchat.providers import DefaultProviderRegistry
from agentchat.scheduling import InMemoryTaskScheduler, ScheduledTask
from agentchat.tools import create_toolset
from agentchat.utils.log_utils import redact_sensitive_data, sanitize_log_message

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Chat with a tool-using assistant")
    parser.add_argument(
        "--provider", "-p",
        choices=["openai", "anthropic"],
        default=None,
        help="LLM provider (defaults to CHAT_PROVIDER or openai)"
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Path to the environment file"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for log files"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


async def _prompt(text: str) -> str:
    # Read in a thread so scheduled tasks keep firing while we wait
    return await asyncio.to_thread(input, text)


async def confirm_tool_call(name: str, parameters: Dict[str, Any]) -> bool:
    """Ask the user on the console whether a tool call may run."""
    arguments = ", ".join(f"{key}={value!r}" for key, value in parameters.items())
    print(f"\nThe assistant wants to run {name}({arguments}).")
    answer = (await _prompt("Approve? [y/N]: ")).strip().lower()
    return answer in ("y", "yes")


def on_task_fired(task: ScheduledTask) -> None:
    print(f"\nRunning scheduled task: {task.description}")


async def chat_loop(provider: Provider, registry: ToolRegistry, system_prompt: str) -> None:
    """Run an interactive chat session with the user."""
    start_time = time.time()
    logger.info("Starting chat session", extra={"provider": provider.get_name()})
    print("\nChat started! Type 'quit' to exit.")

    messages: List[Dict[str, Any]] = [{"role": "system", "content": system_prompt}]
    query_count = 0
    error_count = 0

    while True:
        query = (await _prompt("\nYou: ")).strip()
        if query.lower() == "quit":
            logger.info("User requested to quit chat session")
            break
        if not query:
            continue

        query_count += 1
        history_length = len(messages)
        messages.append({"role": "user", "content": query})
        query_start = time.time()
        try:
            response = await provider.run_conversation(messages, registry.list_tools())
        except Exception as e:
            error_count += 1
            # Drop the failed turn so the next request starts from a clean history
            del messages[history_length:]
            logger.error("Query processing error", extra={
                "query_number": query_count,
                "error": sanitize_log_message(str(e)),
                "duration_ms": int((time.time() - query_start) * 1000)
            }, exc_info=True)
            print(f"\nError processing query: {sanitize_log_message(str(e))}")
            continue

        logger.debug("Query processed", extra={
            "query_number": query_count,
            "duration_ms": int((time.time() - query_start) * 1000)
        })
        messages.append({"role": "assistant", "content": response})
        print(f"\nAssistant: {response}")

    logger.info("Chat session ended", extra={
        "total_queries": query_count,
        "failed_queries": error_count,
        "duration_ms": int((time.time() - start_time) * 1000)
    })


async def main(argv: Optional[Sequence[str]] = None) -> int:
    """Set up settings, logging, tools and provider, then chat.

    Returns:
        Process exit code
    """
    args = parse_arguments(argv)
    load_dotenv(args.env_file)
    try:
        settings = AgentSettings(env_file=args.env_file)
    except ValidationError as e:
        print(f"Error: invalid settings: {e}")
        return 1

    setup_logging("DEBUG" if args.debug else settings.log_level, args.log_dir or settings.log_dir)

    provider_name = args.provider or settings.chat_provider
    try:
        config = ProviderConfig.from_settings(provider_name, settings)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1
    logger.debug("Provider configuration loaded", extra=redact_sensitive_data({
        "provider": provider_name,
        "model": config.model,
        "api_key": config.api_key
    }))
    if not config.is_configured:
        print(f"Error: no API key configured for {provider_name}.")
        print(f"Please set the {provider_name.upper()}_API_KEY environment variable.")
        return 1

    scheduler = InMemoryTaskScheduler(on_fire=on_task_fired)
    registry, executor = create_toolset(scheduler, confirm=confirm_tool_call)
    provider = DefaultProviderRegistry(executor).get_provider(provider_name, config)

    try:
        await chat_loop(provider, registry, settings.system_prompt)
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
