"""Infrastructure services package."""

from . import tasks
from .celery_config import celery_app, create_celery_app, crontab_from_expression
from .dependency_probe import DependencyHealthProbe

__all__ = [
    "celery_app",
    "create_celery_app",
    "crontab_from_expression",
    "tasks",
    "DependencyHealthProbe",
]
