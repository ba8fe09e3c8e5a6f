from __future__ import annotations

from types import SimpleNamespace

from src.infrastructure.services.tasks import base
from src.infrastructure.services.tasks.energy_generation import (
    generate_energy_record,
)


def _capture(monkeypatch, level: str) -> list:
    events: list = []
    monkeypatch.setattr(
        base.logger, level, lambda event, **kwargs: events.append((event, kwargs))
    )
    return events


def test_successful_tick_logs_record_id(monkeypatch) -> None:
    events = _capture(monkeypatch, "info")

    generate_energy_record.on_success({"id": "rec-1"}, "task-1", (), {})

    assert events == [
        (
            "scheduler.tick_completed",
            {
                "task": "generate_energy_record",
                "task_id": "task-1",
                "record_id": "rec-1",
            },
        )
    ]


def test_tick_without_record_is_reported_as_skipped(monkeypatch) -> None:
    events = _capture(monkeypatch, "warning")

    generate_energy_record.on_success(None, "task-2", (), {})

    assert events[0][0] == "scheduler.tick_skipped"
    assert events[0][1]["task_id"] == "task-2"


def test_crashed_tick_logs_traceback(monkeypatch) -> None:
    events = _capture(monkeypatch, "error")
    error = RuntimeError("boom")

    generate_energy_record.on_failure(
        error, "task-3", (), {}, SimpleNamespace(traceback="Traceback ...")
    )

    event, fields = events[0]
    assert event == "scheduler.tick_crashed"
    assert fields["error"] == "boom"
    assert fields["traceback"] == "Traceback ..."
