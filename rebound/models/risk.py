"""Risk assessment data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class RiskLevel(str, Enum):
    """Early-warning risk category shown to teachers."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """0 for Critical through 3 for Low."""
        return list(RiskLevel).index(self)


@dataclass
class RiskInput:
    """Aggregate over a student's recent history."""

    stress_history: List[int] = field(default_factory=list)
    missed_tasks_count: int = 0
    overdue_tasks_count: int = 0
    backlog_depth_days: int = 0

    @property
    def current_stress(self) -> int:
        return self.stress_history[-1] if self.stress_history else 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RiskInput":
        """Build from the camelCase shape used by the teacher dashboard."""
        history = data.get('stressHistory', [])
        if not isinstance(history, list):
            raise ValueError(f"stressHistory must be a list, got {type(history).__name__}")
        counts = {}
        for key in ('missedTasksCount', 'overdueTasksCount', 'backlogDepthDays'):
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
            counts[key] = value
        return cls(
            stress_history=[int(s) for s in history],
            missed_tasks_count=counts['missedTasksCount'],
            overdue_tasks_count=counts['overdueTasksCount'],
            backlog_depth_days=counts['backlogDepthDays'],
        )


@dataclass
class StudentRiskSummary:
    """One row of the teacher's student list."""

    student_id: str
    risk_level: RiskLevel
    latest_stress: Optional[int]
    missed_tasks: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'studentId': self.student_id,
            'riskLevel': self.risk_level.value,
            'latestStress': self.latest_stress,
            'missedTasks': self.missed_tasks,
        }
