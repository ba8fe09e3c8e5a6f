"""
Infrastructure Services - Celery Configuration

This module contains the Celery configuration for the periodic energy
record generation. The beat schedule is derived from a five-field cron
expression so the tick cadence stays configurable.
"""

from typing import Optional

from celery import Celery
from celery.schedules import crontab

from src.infrastructure.settings import get_settings
from src.shared.consts import ENERGY_GENERATION_QUEUE

GENERATE_ENERGY_RECORD_TASK = "generate_energy_record"


def crontab_from_expression(expression: str) -> crontab:
    """
    Build a Celery crontab from a standard five-field cron expression.

    Args:
        expression: "minute hour day-of-month month day-of-week"

    Raises:
        ValueError: If the expression does not have exactly five fields
    """
    fields = expression.split()
    if len(fields) != 5:
        raise ValueError(
            f"Cron expression must have 5 fields, got {len(fields)}: {expression!r}"
        )

    minute, hour, day_of_month, month_of_year, day_of_week = fields
    return crontab(
        minute=minute,
        hour=hour,
        day_of_month=day_of_month,
        month_of_year=month_of_year,
        day_of_week=day_of_week,
    )


def create_celery_app(
    broker_url: Optional[str] = None,
    backend_url: Optional[str] = None,
    cron_schedule: Optional[str] = None,
) -> Celery:
    """
    Create and configure Celery application.

    Args:
        broker_url: Message broker URL (uses settings if not provided)
        backend_url: Result backend URL (uses settings if not provided)
        cron_schedule: Energy generation cron expression (uses settings if not provided)

    Returns:
        Configured Celery application
    """
    settings = get_settings()
    effective_broker = broker_url or settings.celery.broker_url
    effective_backend = backend_url or settings.celery.result_backend
    effective_schedule = cron_schedule or settings.energy.cron_schedule

    app = Celery(
        "solar_energy_worker",
        broker=effective_broker,
        backend=effective_backend,
        include=["src.infrastructure.services.tasks.energy_generation"],
    )

    app.conf.update(
        # Task configuration
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        timezone="UTC",
        enable_utc=True,
        # Result backend configuration
        result_expires=3600,  # 1 hour
        # Task routing
        task_routes={
            GENERATE_ENERGY_RECORD_TASK: {"queue": ENERGY_GENERATION_QUEUE},
        },
        # Worker configuration
        worker_prefetch_multiplier=1,
        task_acks_late=True,
        worker_max_tasks_per_child=100,
        # Beat configuration
        beat_schedule={
            "generate-energy-record": {
                "task": GENERATE_ENERGY_RECORD_TASK,
                "schedule": crontab_from_expression(effective_schedule),
                "options": {"queue": ENERGY_GENERATION_QUEUE},
            },
        },
    )

    return app


celery_app = create_celery_app()
