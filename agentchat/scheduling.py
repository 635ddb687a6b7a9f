"""Task scheduling for the chat agent.

The scheduling tools talk to a ``TaskScheduler``. A task is scheduled with
one of three triggers:

    - a ``datetime``: run once at that moment ("scheduled")
    - a number: run once after that many seconds ("delayed")
    - a string: run on a cron expression ("cron")

``InMemoryTaskScheduler`` keeps tasks in process memory and fires one-shot
tasks on the running asyncio loop. Cron tasks are recorded and listed but
never fired, since evaluating cron expressions is left to real schedulers.
"""

import asyncio
import inspect
import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Literal, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

Trigger = Union[datetime, int, float, str]


class ScheduleType(str, Enum):
    """Kinds of schedule the model can ask for."""
    NO_SCHEDULE = "no-schedule"
    SCHEDULED = "scheduled"
    DELAYED = "delayed"
    CRON = "cron"


class Schedule(BaseModel):
    """When a task should run, as requested by the model.

    Attributes:
        type: The kind of schedule
        date: Moment to run at, for "scheduled"
        delay_in_seconds: Seconds to wait, for "delayed"
        cron: Cron expression, for "cron"
    """
    model_config = ConfigDict(populate_by_name=True)

    type: ScheduleType
    date: Optional[datetime] = None
    delay_in_seconds: Optional[float] = Field(None, alias="delayInSeconds")
    cron: Optional[str] = None

    @property
    def trigger(self) -> Optional[Trigger]:
        """The field matching ``type``, None for "no-schedule"."""
        if self.type == ScheduleType.SCHEDULED:
            return self.date
        if self.type == ScheduleType.DELAYED:
            return self.delay_in_seconds
        if self.type == ScheduleType.CRON:
            return self.cron
        return None


class ScheduledTask(BaseModel):
    """A task known to the scheduler."""

    id: str
    description: Any
    callback: str
    type: Literal["scheduled", "delayed", "cron"]
    time: Optional[datetime] = None
    delay_in_seconds: Optional[float] = None
    cron: Optional[str] = None
    created_at: datetime


class TaskScheduler(ABC):
    """Interface of the scheduler behind the scheduling tools."""

    @abstractmethod
    async def schedule(self, when: Trigger, callback: str, payload: Any) -> ScheduledTask:
        """Schedule ``callback`` to run with ``payload``.

        Raises:
            ValueError: If ``when`` is not a usable trigger
        """
        pass

    @abstractmethod
    async def get_schedules(self) -> List[ScheduledTask]:
        """List pending tasks."""
        pass

    @abstractmethod
    async def cancel_schedule(self, task_id: str) -> bool:
        """Cancel a task. Returns False if no task has that ID."""
        pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryTaskScheduler(TaskScheduler):
    """Scheduler that keeps tasks in memory for the life of the process.

    Args:
        on_fire: Called with the task when a one-shot task is due; may be async
        clock: Returns the current aware datetime
    """

    def __init__(
        self,
        on_fire: Optional[Callable[[ScheduledTask], Any]] = None,
        clock: Callable[[], datetime] = _utcnow
    ) -> None:
        self.on_fire = on_fire
        self._clock = clock
        self._tasks: Dict[str, ScheduledTask] = {}
        self._timers: Dict[str, asyncio.TimerHandle] = {}
        self._pending_callbacks: Set[asyncio.Task] = set()

    async def schedule(self, when: Trigger, callback: str, payload: Any) -> ScheduledTask:
        now = self._clock()
        task_id = uuid.uuid4().hex[:12]

        if isinstance(when, datetime):
            if when.tzinfo is None:
                when = when.astimezone()
            delay = (when - now).total_seconds()
            if delay < 0:
                raise ValueError(f"Cannot schedule a task in the past: {when.isoformat()}")
            task = ScheduledTask(
                id=task_id, description=payload, callback=callback,
                type="scheduled", time=when, created_at=now
            )
        elif isinstance(when, (int, float)) and not isinstance(when, bool):
            delay = float(when)
            if delay < 0:
                raise ValueError(f"Delay must not be negative: {when}")
            task = ScheduledTask(
                id=task_id, description=payload, callback=callback,
                type="delayed", time=now + timedelta(seconds=delay),
                delay_in_seconds=delay, created_at=now
            )
        elif isinstance(when, str) and when.strip():
            delay = None
            task = ScheduledTask(
                id=task_id, description=payload, callback=callback,
                type="cron", cron=when.strip(), created_at=now
            )
        else:
            raise ValueError(f"Invalid schedule type: {when!r}")

        self._tasks[task.id] = task
        if delay is not None:
            loop = asyncio.get_running_loop()
            self._timers[task.id] = loop.call_later(delay, self._fire, task.id)

        logger.info("Task scheduled", extra={
            "task_id": task.id,
            "type": task.type,
            "callback": callback
        })
        return task

    async def get_schedules(self) -> List[ScheduledTask]:
        return list(self._tasks.values())

    async def cancel_schedule(self, task_id: str) -> bool:
        task = self._tasks.pop(task_id, None)
        if task is None:
            return False
        timer = self._timers.pop(task_id, None)
        if timer is not None:
            timer.cancel()
        logger.info("Task canceled", extra={"task_id": task_id})
        return True

    def _fire(self, task_id: str) -> None:
        self._timers.pop(task_id, None)
        task = self._tasks.pop(task_id, None)
        if task is None:
            return

        logger.info("Running scheduled task", extra={
            "task_id": task.id,
            "callback": task.callback
        })
        if self.on_fire is None:
            return

        try:
            result = self.on_fire(task)
        except Exception:
            logger.exception("Scheduled task callback failed", extra={"task_id": task.id})
            return
        if inspect.isawaitable(result):
            pending = asyncio.ensure_future(result)
            self._pending_callbacks.add(pending)
            pending.add_done_callback(self._pending_callbacks.discard)
