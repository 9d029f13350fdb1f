from .base import Task
from .types import TaskKind
from .variants import EmailTask, ReportTask
from .registry import TaskRegistry, default_registry

__all__ = [
    "Task",
    "TaskKind",
    "EmailTask",
    "ReportTask",
    "TaskRegistry",
    "default_registry",
]
