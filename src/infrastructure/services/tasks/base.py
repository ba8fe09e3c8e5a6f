"""Base class for the scheduler's periodic tasks."""

import structlog
from celery import Task

logger = structlog.get_logger(__name__)


class ScheduledTickTask(Task):
    """Periodic task that reports each tick's outcome in the worker log.

    A tick returning ``None`` has already logged its own failure and is
    reported as skipped.
    """

    ignore_result = False

    def on_success(self, retval, task_id, args, kwargs):
        if retval is None:
            logger.warning("scheduler.tick_skipped", task=self.name, task_id=task_id)
            return
        logger.info(
            "scheduler.tick_completed",
            task=self.name,
            task_id=task_id,
            record_id=retval.get("id"),
        )

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        logger.error(
            "scheduler.tick_crashed",
            task=self.name,
            task_id=task_id,
            error=str(exc),
            traceback=einfo.traceback,
            exc_info=exc,
        )
