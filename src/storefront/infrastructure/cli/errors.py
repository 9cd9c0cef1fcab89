"""Turn storage failures into a user-facing error.

The OS error text names files under the data directory, so only its
errno reaches the log and the user sees a generic message.
"""

from __future__ import annotations

import click
import structlog

log = structlog.get_logger(__name__)

STORAGE_UNAVAILABLE = "Storage is unavailable, please try again later."


def storage_unavailable(exc: OSError) -> click.ClickException:
    log.error(
        "storage_failure",
        error=type(exc).__name__,
        errno=exc.errno,
        reason=exc.strerror,
    )
    return click.ClickException(STORAGE_UNAVAILABLE)
