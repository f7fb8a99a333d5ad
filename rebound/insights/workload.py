"""Task time estimation and daily workload checks."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..models.task import Task, TaskStatus
from ..utils.datetime_utils import DateLike, round_half_up, to_date

DEFAULT_TIME_ESTIMATES = {
    'Assignment': 90,
    'Quiz': 30,
    'Exam': 120,
    'Project': 180,
    'Lab': 120,
    'Reading': 60,
    'Practice': 45,
    'Other': 60,
}

MAX_REALISTIC_DAILY_MINUTES = 480  # 8 hours
MIN_HISTORY_SAMPLES = 3


@dataclass
class DailyWorkload:
    """Work due today."""

    task_count: int
    total_minutes: int
    total_hours: float
    is_realistic: bool


@dataclass
class WorkloadWarning:
    level: str
    message: str


def estimate_task_minutes(task: Task, history: Optional[Iterable[Dict]] = None) -> int:
    """Estimate how many minutes a task will take.

    Starts from a per-type default scaled up by grade weight. When the student
    has at least three recorded ``{'type', 'time_spent'}`` entries for the same
    type, their average replaces the default.
    """
    estimate = DEFAULT_TIME_ESTIMATES.get(task.task_type, 60)

    if task.weight:
        estimate = round_half_up(estimate * (1 + task.weight / 100))

    relevant = [h for h in (history or []) if h.get('type') == task.task_type]
    if len(relevant) >= MIN_HISTORY_SAMPLES:
        average = sum(h['time_spent'] for h in relevant) / len(relevant)
        estimate = round_half_up(average)

    return estimate


def calculate_daily_workload(tasks: Iterable[Task], today: DateLike) -> DailyWorkload:
    """Sum estimated time of the non-completed tasks due on ``today``."""
    today = to_date(today)
    due_today: List[Task] = [
        t for t in tasks
        if to_date(t.due_date) == today and t.status != TaskStatus.COMPLETED
    ]

    total_minutes = sum(t.estimated_minutes or 60 for t in due_today)

    return DailyWorkload(
        task_count=len(due_today),
        total_minutes=total_minutes,
        total_hours=round_half_up(total_minutes / 60 * 10) / 10,
        is_realistic=total_minutes <= MAX_REALISTIC_DAILY_MINUTES,
    )


def get_workload_warning(total_hours: float, available_hours: float) -> WorkloadWarning:
    """Compare planned work against the hours the student has."""
    if total_hours > available_hours * 1.5:
        return WorkloadWarning(
            level='critical',
            message=(
                f"You have {total_hours}h of work but only {available_hours}h available. "
                "This is unrealistic. Consider prioritizing or requesting extensions."
            ),
        )
    if total_hours > available_hours:
        return WorkloadWarning(
            level='warning',
            message=(
                f"You have {total_hours}h of work and {available_hours}h available. "
                "This is tight. Focus on high-priority tasks."
            ),
        )
    if total_hours > available_hours * 0.8:
        return WorkloadWarning(
            level='caution',
            message=(
                f"You have {total_hours}h of work and {available_hours}h available. "
                "Manageable, but stay focused."
            ),
        )
    return WorkloadWarning(
        level='good',
        message=f"You have {total_hours}h of work and {available_hours}h available. You've got this!",
    )
