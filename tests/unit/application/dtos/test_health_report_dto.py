from __future__ import annotations

from datetime import datetime, timezone

from src.application.dtos.health_dto import HealthReportDTO
from src.domain.entities.health import DependencyCheck, HealthReport, HealthState


def test_health_report_dto_keys_dependencies_by_name() -> None:
    report = HealthReport.from_checks(
        [
            DependencyCheck(name="mongo", state=HealthState.UP, latency_ms=4.26),
            DependencyCheck(
                name="redis", state=HealthState.DOWN, error="Connection refused"
            ),
        ],
        checked_at=datetime(2025, 10, 12, 8, tzinfo=timezone.utc),
    )

    payload = HealthReportDTO.from_domain(report).model_dump(
        mode="json", by_alias=True
    )

    assert payload["status"] == "DOWN"
    assert payload["checkedAt"] == "2025-10-12T08:00:00Z"
    assert payload["dependencies"]["mongo"] == {
        "status": "UP",
        "latencyMs": 4.3,
        "error": None,
    }
    assert payload["dependencies"]["redis"]["error"] == "Connection refused"
