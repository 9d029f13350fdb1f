from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

from .types import TaskKind


@dataclass(frozen=True)
class EmailTask:
    """
    Simulated email send. Nothing leaves the process.
    """

    message: str
    recipient: str

    kind: ClassVar[str] = TaskKind.Email

    def perform(self) -> str:
        return f"Email sent to: {self.recipient}, with Message: {self.message}"


# ReportTask reports the email task's type name, not its own.
REPORT_LABEL = EmailTask.__name__


@dataclass(frozen=True)
class ReportTask:
    """
    Simulated report generation.
    """

    report_name: str

    kind: ClassVar[str] = TaskKind.Report

    def perform(self) -> str:
        return f"Report {self.report_name} generated by {REPORT_LABEL}."
