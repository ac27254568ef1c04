#!/usr/bin/env python3
"""Purge read notifications past the retention window.

Meant to run on a schedule (cron or a one-off container job).

Usage:
    python scripts/purge_notifications.py [--days-old N]
"""

import argparse
import asyncio
import sys

import logfire

from askit.application.usecase.notification import (
    PurgeNotificationsRequest,
    PurgeNotificationsUseCase,
)
from askit.config import Settings
from askit.util.di.container import create_container
from askit.util.observability import configure_logfire


async def purge(days_old: int | None) -> int:
    """Run the purge in its own request scope and return the number removed."""
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(PurgeNotificationsUseCase)
            result = await use_case.execute(PurgeNotificationsRequest(days_old=days_old))
    finally:
        await container.close()

    logfire.info(
        "Notifications purged", removed=result.removed, days_old=result.days_old
    )
    return result.removed


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--days-old",
        type=int,
        default=None,
        help="Retention window in days (default: NOTIFICATIONS__PURGE_AFTER_DAYS)",
    )
    args = parser.parse_args()

    configure_logfire(Settings())

    try:
        asyncio.run(purge(args.days_old))
        return 0
    except Exception as e:
        logfire.error(
            "Notification purge failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
