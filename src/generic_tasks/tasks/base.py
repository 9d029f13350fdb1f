from __future__ import annotations
from typing import Protocol, TypeVar, runtime_checkable

R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class Task(Protocol[R_co]):
    def perform(self) -> R_co:
        """
        Runs the unit of work and returns its result.
        Takes no arguments: everything the task needs is fixed at construction.
        R_co only appears here, so a Task[bool] can stand in for a Task[int].
        """
        ...
