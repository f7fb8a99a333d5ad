"""Progress analytics over a student's completed tasks and daily logs."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from ..models.task import DailyLog
from ..utils.datetime_utils import parse_date, to_datetime

RECENT_COMPLETIONS_LIMIT = 20
STRESS_TREND_LIMIT = 30


@dataclass
class CompletedTask:
    """Snapshot of a task taken when it was completed."""

    task_id: str
    completed_at: datetime
    title: str = ""
    subject: Optional[str] = None
    weight: float = 0.0
    task_type: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CompletedTask":
        """Build from a ``{task, completedAt, taskSnapshot}`` progress entry."""
        task_id = record.get('task', record.get('id'))
        if task_id is None:
            raise ValueError("Completed task record is missing 'task'")
        if not record.get('completedAt'):
            raise ValueError(f"Completed task {task_id} is missing 'completedAt'")
        try:
            completed_at = to_datetime(parse_date(record['completedAt']))
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Completed task {task_id} has an unparseable completedAt: {record['completedAt']!r}"
            ) from exc

        snapshot = record.get('taskSnapshot') or {}
        return cls(
            task_id=str(task_id),
            completed_at=completed_at,
            title=snapshot.get('title', ""),
            subject=snapshot.get('subject'),
            weight=float(snapshot.get('weightage') or 0.0),
            task_type=snapshot.get('type'),
        )


@dataclass
class StressPoint:
    log_date: Optional[date]
    stress_level: int
    available_time: float


@dataclass
class ProgressSummary:
    total_completed: int
    last_7_days: int
    last_30_days: int
    recent_completions: List[CompletedTask] = field(default_factory=list)
    stress_trend: List[StressPoint] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'totalCompleted': self.total_completed,
            'last7Days': self.last_7_days,
            'last30Days': self.last_30_days,
            'completedTasks': [
                {
                    'task': c.task_id,
                    'completedAt': c.completed_at.isoformat(),
                    'title': c.title,
                    'subject': c.subject,
                }
                for c in self.recent_completions
            ],
            'stressTrend': [
                {
                    'date': p.log_date.isoformat() if p.log_date else None,
                    'stressLevel': p.stress_level,
                    'availableTime': p.available_time,
                }
                for p in self.stress_trend
            ],
        }


def count_completed_within(completed: Iterable[CompletedTask], now: datetime, days: int) -> int:
    """Completions no more than ``days`` days before ``now`` (boundary inclusive)."""
    window = timedelta(days=days)
    return sum(1 for c in completed if now - c.completed_at <= window)


def summarize_progress(
    completed: Iterable[CompletedTask],
    logs: Iterable[DailyLog],
    now: datetime,
) -> ProgressSummary:
    """Completion counts, latest completions and recent stress trend.

    Recent completions and the stress trend are both newest first.
    """
    completed = sorted(completed, key=lambda c: c.completed_at)
    newest_logs = sorted(logs, key=lambda log: log.log_date or date.min, reverse=True)

    return ProgressSummary(
        total_completed=len(completed),
        last_7_days=count_completed_within(completed, now, 7),
        last_30_days=count_completed_within(completed, now, 30),
        recent_completions=list(reversed(completed[-RECENT_COMPLETIONS_LIMIT:])),
        stress_trend=[
            StressPoint(log.log_date, log.stress_level, log.available_time)
            for log in newest_logs[:STRESS_TREND_LIMIT]
        ],
    )
