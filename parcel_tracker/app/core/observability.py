"""
Observability helpers.

Structured logging for store operations: every call is timed and logged
with its operation name and outcome.
"""

import time
import logging
from functools import wraps
from typing import Callable

from parcel_tracker.app.core.config import settings
from parcel_tracker.app.core.exceptions import NotFound, StorageError

# Configure structured logger
logger = logging.getLogger(settings.logger_name)


def observed(operation: str) -> Callable:
    """
    Decorator that logs a store operation with its duration and outcome.

    Failures are logged and re-raised unchanged.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            outcome = "error"
            try:
                result = func(*args, **kwargs)
                outcome = "ok"
                return result
            except NotFound:
                outcome = "not_found"
                raise
            except StorageError:
                outcome = "storage_error"
                raise
            finally:
                log_data = {
                    "operation": operation,
                    "outcome": outcome,
                    "duration_ms": round((time.time() - start_time) * 1000, 2),
                }

                # Log level based on outcome
                if outcome in ("storage_error", "error"):
                    logger.error("Store Operation Failed", extra=log_data)
                elif outcome == "not_found":
                    logger.warning("Store Lookup Missed", extra=log_data)
                else:
                    logger.debug("Store Operation", extra=log_data)
        return wrapper
    return decorator
