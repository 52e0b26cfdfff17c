from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler


def create_scheduler() -> BackgroundScheduler:
    """Create the scheduler that runs deferred callbacks and navigations.

    A single worker runs jobs one at a time, in the order they come due.
    """
    return BackgroundScheduler(
        timezone="UTC",
        executors={"default": ThreadPoolExecutor(max_workers=1)},
    )


def schedule_once(
    scheduler: BackgroundScheduler, callback: Callable[[], Any], delay_ms: int
) -> None:
    """Run ``callback`` once, ``delay_ms`` from now. Starts the scheduler if needed."""
    if not scheduler.running:
        scheduler.start()
    scheduler.add_job(
        callback,
        "date",
        run_date=datetime.now(UTC) + timedelta(milliseconds=delay_ms),
    )
