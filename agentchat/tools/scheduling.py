"""Scheduling tools for the chat agent.

Three tools share one injected ``TaskScheduler``: scheduling a task, listing
scheduled tasks and canceling a task by ID. None of them raise: scheduler
failures are reported back to the model as text.

Public Interface:
    - create_schedule_task_tool(), create_list_tasks_tool(),
      create_cancel_task_tool(): Tool definitions
    - SchedulingTools: Handlers bound to a scheduler
"""

import logging
from datetime import datetime
from typing import Dict, Any, List, Union

from pydantic import ValidationError

from agentchat.scheduling import Schedule, ScheduleType, TaskScheduler
from agentchat.tools.calculator import format_number
from agentchat.types import Tool, ToolParameter
from agentchat.utils.log_utils import sanitize_log_message

logger = logging.getLogger(__name__)

# Callback name the chat client runs when a task fires
EXECUTE_TASK_CALLBACK = "executeTask"

INVALID_SCHEDULE = "Not a valid schedule input"
NO_TASKS = "No scheduled tasks found."


def create_schedule_task_tool() -> Tool:
    return Tool(
        name="scheduleTask",
        description="A tool to schedule a task to be executed at a later time",
        parameters={
            "when": ToolParameter(
                type="object",
                description="When the task should run",
                required=True,
                properties={
                    "type": {
                        "type": "string",
                        "enum": [t.value for t in ScheduleType],
                        "description": "The type of scheduling details"
                    },
                    "date": {
                        "type": "string",
                        "description": "ISO 8601 date and time, for \"scheduled\" tasks"
                    },
                    "delayInSeconds": {
                        "type": "number",
                        "description": "Seconds to wait, for \"delayed\" tasks"
                    },
                    "cron": {
                        "type": "string",
                        "description": "Cron expression, for \"cron\" tasks"
                    }
                },
                required_properties=["type"]
            ),
            "description": ToolParameter(
                type="string",
                description="What the task should do",
                required=True
            )
        }
    )


def create_list_tasks_tool() -> Tool:
    return Tool(
        name="getScheduledTasks",
        description="List all tasks that have been scheduled",
        parameters={}
    )


def create_cancel_task_tool() -> Tool:
    return Tool(
        name="cancelScheduledTask",
        description="Cancel a scheduled task using its ID",
        parameters={
            "taskId": ToolParameter(
                type="string",
                description="The ID of the task to cancel",
                required=True
            )
        }
    )


def _describe_trigger(trigger: Union[datetime, float, str]) -> str:
    if isinstance(trigger, datetime):
        return trigger.isoformat()
    if isinstance(trigger, float):
        return format_number(trigger)
    return str(trigger)


class SchedulingTools:
    """Handlers of the scheduling tools.

    Args:
        scheduler: The scheduler tasks are delegated to
    """

    def __init__(self, scheduler: TaskScheduler) -> None:
        self.scheduler = scheduler

    async def schedule_task(self, params: Dict[str, Any]) -> str:
        """Handle ``scheduleTask``.

        Returns:
            A confirmation, or the reason the task was not scheduled
        """
        try:
            when = Schedule.model_validate(params["when"])
        except ValidationError as e:
            logger.warning("Rejected schedule input", extra={"error": str(e)})
            return INVALID_SCHEDULE

        if when.type == ScheduleType.NO_SCHEDULE:
            return INVALID_SCHEDULE

        trigger = when.trigger
        try:
            if trigger is None:
                raise ValueError(f"Missing schedule value for type \"{when.type.value}\"")
            await self.scheduler.schedule(trigger, EXECUTE_TASK_CALLBACK, params["description"])
        except Exception as e:
            logger.error("Error scheduling task", extra={
                "error": sanitize_log_message(str(e))
            })
            return f"Error scheduling task: {e}"

        return f"Task scheduled for type \"{when.type.value}\" : {_describe_trigger(trigger)}"

    async def get_scheduled_tasks(self, params: Dict[str, Any]) -> Union[str, List[Dict[str, Any]]]:
        """Handle ``getScheduledTasks``.

        Returns:
            The task records, or a message when there are none
        """
        try:
            tasks = await self.scheduler.get_schedules()
        except Exception as e:
            logger.error("Error listing scheduled tasks", extra={
                "error": sanitize_log_message(str(e))
            })
            return f"Error listing scheduled tasks: {e}"

        if not tasks:
            return NO_TASKS
        return [task.model_dump(mode="json") for task in tasks]

    async def cancel_scheduled_task(self, params: Dict[str, Any]) -> str:
        """Handle ``cancelScheduledTask``."""
        task_id = params["taskId"]
        try:
            canceled = await self.scheduler.cancel_schedule(task_id)
        except Exception as e:
            logger.error("Error canceling scheduled task", extra={
                "task_id": task_id,
                "error": sanitize_log_message(str(e))
            })
            return f"Error canceling task {task_id}: {e}"

        if not canceled:
            return f"Error canceling task {task_id}: no task with that ID"
        return f"Task {task_id} has been successfully canceled."
