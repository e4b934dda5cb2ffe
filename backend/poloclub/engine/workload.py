"""Workload aggregation over a horse's log entries.

All figures are recomputed from the log on every read. Entries are matched
on their calendar ``date``, never on their creation timestamp.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from poloclub.models import LogType

WEEK_DAYS = 7


@dataclass
class WorkloadSummary:
    """Daily and weekly workload for one horse."""

    today: int
    week: int
    max_chukkers_per_day: int
    overworked: bool


def _workload_deltas(logs: Iterable[Any], start: date, end: date) -> int:
    return sum(
        log.chukkers_delta or 0
        for log in logs
        if log.type == LogType.WORKLOAD.value and start <= log.date <= end
    )


def daily_workload(logs: Iterable[Any], day: date) -> int:
    """Sum of workload deltas logged exactly on ``day``."""
    return _workload_deltas(logs, day, day)


def weekly_workload(logs: Iterable[Any], reference: date) -> int:
    """Sum of workload deltas in the 7 days ending at ``reference`` inclusive."""
    return _workload_deltas(logs, reference - timedelta(days=WEEK_DAYS - 1), reference)


def is_overworked(horse: Any, logs: Iterable[Any], today: date | None = None) -> bool:
    """True once today's workload reaches the horse's daily cap."""
    today = today or date.today()
    return daily_workload(logs, today) >= horse.max_chukkers_per_day


def workload_summary(horse: Any, logs: Iterable[Any], today: date | None = None) -> WorkloadSummary:
    today = today or date.today()
    logs = list(logs)
    day_total = daily_workload(logs, today)
    return WorkloadSummary(
        today=day_total,
        week=weekly_workload(logs, today),
        max_chukkers_per_day=horse.max_chukkers_per_day,
        overworked=is_overworked(horse, logs, today),
    )
