"""Tools exposed to the model.

``create_toolset`` registers every tool and wires its handler: the weather
tool needs human confirmation, all other tools run automatically.
"""

from typing import Optional, Tuple

from agentchat.core import ToolRegistry, ToolExecutor
from agentchat.scheduling import TaskScheduler
from agentchat.types import ConfirmationCallback
from .calculator import create_calculator_tool, calculator_handler
from .local_time import create_local_time_tool, local_time_handler
from .scheduling import (
    SchedulingTools,
    create_schedule_task_tool,
    create_list_tasks_tool,
    create_cancel_task_tool
)
from .weather import create_weather_tool, weather_handler


def create_toolset(
    scheduler: TaskScheduler,
    confirm: Optional[ConfirmationCallback] = None
) -> Tuple[ToolRegistry, ToolExecutor]:
    """Build the registry and executor of the chat agent.

    Args:
        scheduler: Scheduler behind the scheduling tools
        confirm: Callback that approves confirmation-required tool calls

    Returns:
        Tuple of (registry, executor)
    """
    registry = ToolRegistry()
    for tool in (
        create_weather_tool(),
        create_local_time_tool(),
        create_schedule_task_tool(),
        create_list_tasks_tool(),
        create_cancel_task_tool(),
        create_calculator_tool(),
    ):
        registry.register_tool(tool)

    executor = ToolExecutor(registry, confirm=confirm)
    executor.register_confirmation_handler("getWeatherInformation", weather_handler)
    executor.register_handler("getLocalTime", local_time_handler)

    scheduling = SchedulingTools(scheduler)
    executor.register_handler("scheduleTask", scheduling.schedule_task)
    executor.register_handler("getScheduledTasks", scheduling.get_scheduled_tasks)
    executor.register_handler("cancelScheduledTask", scheduling.cancel_scheduled_task)

    executor.register_handler("calculate", calculator_handler)

    return registry, executor


__all__ = ["create_toolset"]
