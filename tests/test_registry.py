from __future__ import annotations

import pytest

from generic_tasks.tasks import (
    EmailTask,
    ReportTask,
    TaskRegistry,
    default_registry,
)


class UpperTask:
    kind = "upper"

    def __init__(self, text: str) -> None:
        self.text = text

    def perform(self) -> str:
        return self.text.upper()


class NoPerform:
    kind = "nothing"


class NoKind:
    def perform(self) -> str:
        return ""


def test_default_registry_kinds() -> None:
    registry = default_registry()
    assert registry.kinds() == ["email", "report"]
    assert registry.get("email") is EmailTask
    assert registry.get("report") is ReportTask


def test_create_builds_configured_task() -> None:
    registry = default_registry()
    task = registry.create("email", message="Welcome!", recipient="john@example.com")
    assert task == EmailTask("Welcome!", "john@example.com")
    assert registry.create("report", report_name="Q1-Sales").perform() == (
        "Report Q1-Sales generated by EmailTask."
    )


def test_register_custom_task() -> None:
    registry = TaskRegistry()
    registry.register(UpperTask)
    assert registry.create("upper", text="abc").perform() == "ABC"


def test_register_replaces_kind() -> None:
    class OtherUpper(UpperTask):
        pass

    registry = TaskRegistry()
    registry.register(UpperTask)
    registry.register(OtherUpper)
    assert registry.get("upper") is OtherUpper
    assert registry.kinds() == ["upper"]


def test_unknown_kind() -> None:
    with pytest.raises(KeyError, match="kind=missing"):
        default_registry().get("missing")


def test_register_rejects_non_tasks() -> None:
    registry = TaskRegistry()
    with pytest.raises(TypeError):
        registry.register(NoPerform)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        registry.register(NoKind)  # type: ignore[arg-type]
    assert registry.kinds() == []


def test_create_with_bad_config() -> None:
    with pytest.raises(TypeError):
        default_registry().create("report", title="x")
