"""Task and daily log data models."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..utils.datetime_utils import parse_date


class TaskStatus(str, Enum):
    """Lifecycle status of a task."""

    PENDING = "Pending"
    COMPLETED = "Completed"
    MISSED = "Missed"

    @property
    def is_open(self) -> bool:
        """Pending and missed tasks both count towards a subject's backlog."""
        return self in (TaskStatus.PENDING, TaskStatus.MISSED)


@dataclass
class Task:
    """Read-only view of a student's task."""

    task_id: str
    subject_id: str
    due_date: Union[date, datetime]
    weight: float = 0.0
    status: TaskStatus = TaskStatus.PENDING
    student_id: Optional[str] = None
    title: str = ""
    task_type: str = "Assignment"
    estimated_minutes: int = 60

    def __post_init__(self):
        """Coerce a plain status string into a TaskStatus."""
        if not isinstance(self.status, TaskStatus):
            self.status = TaskStatus(self.status)
        if self.weight is None:
            self.weight = 0.0

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Task":
        """Build a task from a JSON-style record.

        Accepts the ``{id, subjectId, weight, dueDate, status}`` shape used at
        the HTTP boundary; ``weightage`` and ``subject`` are accepted as aliases.
        """
        task_id = record.get('id', record.get('_id'))
        if task_id is None:
            raise ValueError("Task record is missing 'id'")

        subject_id = record.get('subjectId', record.get('subject'))
        if subject_id is None:
            raise ValueError(f"Task {task_id} is missing 'subjectId'")

        if not record.get('dueDate'):
            raise ValueError(f"Task {task_id} is missing 'dueDate'")
        try:
            due_date = parse_date(record['dueDate'])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Task {task_id} has an unparseable dueDate: {record['dueDate']!r}") from exc

        weight = record.get('weight', record.get('weightage'))
        try:
            weight = float(weight) if weight is not None else 0.0
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Task {task_id} weight must be a number, got {weight!r}") from exc
        if not 0.0 <= weight <= 100.0:
            raise ValueError(f"Task {task_id} weight must be within 0-100, got {weight}")

        status = record.get('status', TaskStatus.PENDING.value)
        try:
            status = TaskStatus(status)
        except ValueError as exc:
            raise ValueError(f"Task {task_id} has unknown status: {status!r}") from exc

        estimated = record.get('estimatedTime')
        try:
            estimated_minutes = int(estimated) if estimated is not None else 60
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Task {task_id} estimatedTime must be a number, got {estimated!r}") from exc

        return cls(
            task_id=str(task_id),
            subject_id=str(subject_id),
            due_date=due_date,
            weight=weight,
            status=status,
            student_id=record.get('studentId', record.get('student')),
            title=record.get('title', ""),
            task_type=record.get('type', "Assignment"),
            estimated_minutes=estimated_minutes,
        )

    def to_record(self) -> Dict[str, Any]:
        """Convert back to the boundary record shape."""
        record = {
            'id': self.task_id,
            'subjectId': self.subject_id,
            'weight': self.weight,
            'dueDate': self.due_date.isoformat(),
            'status': self.status.value,
            'title': self.title,
            'type': self.task_type,
            'estimatedTime': self.estimated_minutes,
        }
        if self.student_id is not None:
            record['studentId'] = self.student_id
        return record


@dataclass
class DailyLog:
    """A student's self-reported stress and available time for one day."""

    stress_level: int
    available_time: float
    student_id: Optional[str] = None
    log_date: Optional[date] = None
    notes: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "DailyLog":
        """Build a log from a ``{stressLevel, availableTime}`` record."""
        if 'stressLevel' not in record or 'availableTime' not in record:
            raise ValueError("Daily log requires 'stressLevel' and 'availableTime'")

        stress_level = record['stressLevel']
        if isinstance(stress_level, bool) or not isinstance(stress_level, int):
            raise ValueError(f"stressLevel must be an integer, got {stress_level!r}")
        if not 1 <= stress_level <= 10:
            raise ValueError(f"stressLevel must be within 1-10, got {stress_level}")

        try:
            available_time = float(record['availableTime'])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"availableTime must be a number, got {record['availableTime']!r}") from exc
        if not 0.0 <= available_time <= 24.0:
            raise ValueError(f"availableTime must be within 0-24 hours, got {available_time}")

        log_date = record.get('date')
        if log_date is not None:
            try:
                log_date = parse_date(log_date)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Daily log has an unparseable date: {log_date!r}") from exc
            if isinstance(log_date, datetime):
                log_date = log_date.date()

        return cls(
            stress_level=stress_level,
            available_time=available_time,
            student_id=record.get('studentId', record.get('student')),
            log_date=log_date,
            notes=record.get('notes'),
        )
