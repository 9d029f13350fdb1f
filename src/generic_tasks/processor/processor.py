from __future__ import annotations
from typing import Generic, TypeVar
from logging import getLogger

from generic_tasks.tasks.base import Task


logger = getLogger(__name__)

R = TypeVar("R")


class TaskProcessor(Generic[R]):
    """
    Owns one task and runs it on demand.

    execute() hands back whatever task.perform() returns, untouched:
    no caching, no retries, exceptions propagate as-is.
    """

    def __init__(self, task: Task[R]) -> None:
        self._task = task

    @property
    def task(self) -> Task[R]:
        return self._task

    def execute(self) -> R:
        logger.debug("execute %s", type(self._task).__name__)
        return self._task.perform()
