"""Environment utilities for resolving Docker-style secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_FILE_SUFFIX = "_FILE"


def load_secret_file_variables() -> None:
    """
    Expose the contents of ``KEY_FILE`` secrets as ``KEY``.

    Used for values such as ``DB_MONGO_URI_FILE`` or
    ``CELERY_BROKER_URL_FILE`` mounted by the container runtime. A variable
    that is already set is never overwritten. Unreadable files are logged and
    skipped.
    """

    for key, file_path in list(os.environ.items()):
        if not key.endswith(_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(_FILE_SUFFIX)]
        if os.environ.get(target_key):
            continue
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )


load_secret_file_variables()
