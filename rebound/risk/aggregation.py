"""Build risk inputs from a student's raw tasks and daily logs."""

from datetime import date, datetime
from typing import Iterable, List, Optional

from ..models.risk import RiskInput, StudentRiskSummary
from ..models.task import DailyLog, Task, TaskStatus
from ..utils.datetime_utils import to_datetime
from .assessor import assess_risk


def _is_overdue(task: Task, now: datetime) -> bool:
    return task.status == TaskStatus.PENDING and to_datetime(task.due_date) < now


def recent_stress_history(logs: Iterable[DailyLog], history_days: int = 7) -> List[int]:
    """Stress levels of the latest ``history_days`` logs, oldest first.

    Logs without a date sort before dated ones, keeping their input order.
    """
    ordered = sorted(logs, key=lambda log: log.log_date or date.min)
    if history_days > 0:
        ordered = ordered[-history_days:]
    return [log.stress_level for log in ordered]


def build_risk_input(
    tasks: Iterable[Task],
    logs: Iterable[DailyLog],
    now: datetime,
    history_days: int = 7,
) -> RiskInput:
    """Aggregate tasks and logs into a RiskInput.

    Backlog depth is approximated by the number of pending tasks not yet due.
    """
    tasks = list(tasks)
    overdue = [t for t in tasks if _is_overdue(t, now)]
    missed = [t for t in tasks if t.status == TaskStatus.MISSED or _is_overdue(t, now)]
    upcoming = [
        t for t in tasks
        if t.status == TaskStatus.PENDING and to_datetime(t.due_date) >= now
    ]

    return RiskInput(
        stress_history=recent_stress_history(logs, history_days),
        missed_tasks_count=len(missed),
        overdue_tasks_count=len(overdue),
        backlog_depth_days=len(upcoming),
    )


def summarize_student(
    student_id: str,
    tasks: Iterable[Task],
    logs: Iterable[DailyLog],
    now: datetime,
    history_days: int = 7,
) -> StudentRiskSummary:
    """Risk row for the teacher dashboard."""
    risk_input = build_risk_input(tasks, logs, now, history_days)
    latest: Optional[int] = risk_input.stress_history[-1] if risk_input.stress_history else None
    return StudentRiskSummary(
        student_id=student_id,
        risk_level=assess_risk(risk_input),
        latest_stress=latest,
        missed_tasks=risk_input.missed_tasks_count,
    )


def rank_students(summaries: Iterable[StudentRiskSummary]) -> List[StudentRiskSummary]:
    """Order students from Critical to Low, keeping input order within a level."""
    return sorted(summaries, key=lambda s: s.risk_level.rank)
