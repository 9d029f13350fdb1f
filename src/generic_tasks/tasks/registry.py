from __future__ import annotations
from typing import Any, Dict, List, Type
from logging import getLogger

from .base import Task
from .variants import EmailTask, ReportTask


logger = getLogger(__name__)


class TaskRegistry:
    def __init__(self) -> None:
        self._m: Dict[str, Type[Task[Any]]] = {}

    def register(self, task_cls: Type[Task[Any]]) -> None:
        if not callable(getattr(task_cls, "perform", None)):
            raise TypeError(f"{task_cls!r} has no perform() method")
        kind = getattr(task_cls, "kind", None)
        if not kind:
            raise TypeError(f"{task_cls!r} has no kind")
        kind = str(kind)
        self._m[kind] = task_cls
        logger.debug("registered %s for kind=%s", task_cls.__name__, kind)

    def get(self, kind: str) -> Type[Task[Any]]:
        if kind not in self._m:
            raise KeyError(f"task not found for kind={kind}")
        return self._m[kind]

    def create(self, kind: str, **config: Any) -> Task[Any]:
        """
        Builds a task of the given kind from keyword configuration.
        Unknown or missing fields raise the task class's own TypeError.
        """
        return self.get(kind)(**config)

    def kinds(self) -> List[str]:
        return list(self._m)


def default_registry() -> TaskRegistry:
    registry = TaskRegistry()
    registry.register(EmailTask)
    registry.register(ReportTask)
    return registry
