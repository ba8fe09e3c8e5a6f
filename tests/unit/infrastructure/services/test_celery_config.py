from __future__ import annotations

import pytest
from celery.schedules import crontab

from src.infrastructure.services.celery_config import (
    GENERATE_ENERGY_RECORD_TASK,
    create_celery_app,
    crontab_from_expression,
)
from src.shared.consts import ENERGY_GENERATION_QUEUE


@pytest.fixture()
def fresh_settings(monkeypatch):
    monkeypatch.setattr("src.infrastructure.settings._settings", None)
    yield
    monkeypatch.setattr("src.infrastructure.settings._settings", None)


def test_create_celery_app_uses_env(monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("CELERY_BROKER_URL", "amqp://env")
    monkeypatch.setenv("CELERY_RESULT_BACKEND", "redis://env")
    monkeypatch.setenv("ENERGY_CRON_SCHEDULE", "0 */2 * * *")

    app = create_celery_app()

    assert app.conf.broker_url == "amqp://env"
    assert app.conf.result_backend == "redis://env"
    schedule = app.conf.beat_schedule["generate-energy-record"]["schedule"]
    assert schedule == crontab(minute="0", hour="*/2")


def test_create_celery_app_with_explicit_params() -> None:
    app = create_celery_app(
        broker_url="amqp://explicit",
        backend_url="redis://explicit",
        cron_schedule="*/5 * * * *",
    )

    assert app.conf.broker_url == "amqp://explicit"
    assert app.conf.result_backend == "redis://explicit"
    assert app.conf.task_routes[GENERATE_ENERGY_RECORD_TASK] == {
        "queue": ENERGY_GENERATION_QUEUE
    }
    entry = app.conf.beat_schedule["generate-energy-record"]
    assert entry["task"] == GENERATE_ENERGY_RECORD_TASK
    assert entry["schedule"] == crontab(minute="*/5")


def test_crontab_from_expression_maps_fields() -> None:
    schedule = crontab_from_expression("30 6 1 8 mon")

    assert schedule == crontab(
        minute="30", hour="6", day_of_month="1", month_of_year="8", day_of_week="mon"
    )


@pytest.mark.parametrize("expression", ["", "* * * *", "* * * * * *"])
def test_crontab_from_expression_rejects_wrong_field_count(expression: str) -> None:
    with pytest.raises(ValueError):
        crontab_from_expression(expression)
