from __future__ import annotations
from enum import StrEnum


class TaskKind(StrEnum):
    Email = "email"
    Report = "report"
