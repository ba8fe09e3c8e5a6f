#!/usr/bin/env python3
"""
Worker Entry Point - Main Layer

This module serves as the entry point for the Celery worker.
The worker runs with an embedded beat scheduler so a single process both
fires the energy generation ticks and executes them, one at a time.
"""

import os
from typing import List

from src.main.config import get_settings
from src.shared import (
    ENERGY_GENERATION_QUEUE,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Configure logging with basic settings first
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

# Get structured logger
logger = get_logger(__name__)


def create_worker():
    """
    Configure and return the Celery worker.

    Similar to create_app() in app.py, this function configures
    the worker with proper settings and environment.
    """
    settings = get_settings()

    # Task modules read infrastructure settings from the environment
    os.environ.setdefault("CELERY_BROKER_URL", settings.celery.broker_url)
    os.environ.setdefault("CELERY_RESULT_BACKEND", settings.celery.result_backend_url)
    os.environ.setdefault("ENERGY_CRON_SCHEDULE", settings.energy.cron_schedule)
    os.environ.setdefault("SOLAR_UNIT_SERIAL", settings.energy.serial_number)

    from src.infrastructure.services.celery_config import create_celery_app

    worker_app = create_celery_app(
        broker_url=settings.celery.broker_url,
        backend_url=settings.celery.result_backend_url,
        cron_schedule=settings.energy.cron_schedule,
    )

    logger.info(
        "Configuring Celery worker",
        broker_url=settings.celery.broker_url,
        backend_url=settings.celery.result_backend_url,
        cron_schedule=settings.energy.cron_schedule,
        solar_unit_serial=settings.energy.serial_number,
        app_name=worker_app.main,
    )

    return worker_app


def worker_argv() -> List[str]:
    """Command line for the worker: embedded beat, one task at a time."""
    return [
        "worker",
        "--beat",
        "--loglevel=info",
        f"--queues={ENERGY_GENERATION_QUEUE}",
        "--concurrency=1",
    ]


def main():
    """Main entry point for Celery worker."""

    logger.info("Starting Celery worker")

    worker_app = create_worker()
    worker_app.worker_main(worker_argv())


if __name__ == "__main__":
    main()
