"""Recovery plan and decision trace models."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from .task import Task


@dataclass
class ScoredTask:
    """A task together with its computed priority score."""

    task: Task
    priority_score: int
    components: Dict[str, float] = field(default_factory=dict)

    @property
    def task_id(self) -> str:
        return self.task.task_id

    def to_dict(self) -> Dict[str, Any]:
        """Task record augmented with ``priorityScore``."""
        record = self.task.to_record()
        record['priorityScore'] = self.priority_score
        return record


@dataclass
class RecoveryPlan:
    """Ranked tasks and the subset that fits into today's allowed hours."""

    strategy: str
    allowed_hours: float
    recommended_tasks: List[ScoredTask]
    all_tasks_scored: List[ScoredTask]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the response shape returned to HTTP callers."""
        return {
            'strategy': self.strategy,
            'allowedHours': self.allowed_hours,
            'recommendedTasks': [t.to_dict() for t in self.recommended_tasks],
            'allTasksScored': [t.to_dict() for t in self.all_tasks_scored],
        }


@dataclass
class PlanDecision:
    """Records whether a single scored task made it into the plan."""

    task_id: str
    priority_score: int
    selected: bool
    planned_hours_after: float
    reason: str
    constraint_applied: Optional[str] = None


@dataclass
class PlanTrace:
    """Complete trace of a planning run."""

    run_id: str
    timestamp: datetime
    stress_level: int
    available_time: float
    factor: float
    strategy: str
    config: Dict[str, Any]
    decisions: List[PlanDecision]
    scored_components: Dict[str, Dict[str, float]]
    summary_stats: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """Convert trace to dictionary for JSON export."""
        return asdict(self)

    def to_human_readable(self) -> str:
        """Generate human-readable log format."""
        lines = [
            f"=== Recovery Plan Run: {self.run_id} ===",
            f"Timestamp: {self.timestamp}",
            f"Stress level: {self.stress_level}/10",
            f"Available time: {self.available_time}h (factor {self.factor})",
            f"Strategy: {self.strategy}",
            "",
            "Configuration:",
        ]

        for key, value in self.config.items():
            lines.append(f"  {key}: {value}")

        lines.extend([
            "",
            "Decisions:",
        ])

        for decision in self.decisions:
            mark = "+" if decision.selected else "-"
            lines.append(f"  [{mark}] {decision.task_id} (score {decision.priority_score})")
            lines.append(f"    Reason: {decision.reason}")
            if decision.constraint_applied:
                lines.append(f"    Constraint: {decision.constraint_applied}")
            components = self.scored_components.get(decision.task_id)
            if components:
                formatted = ", ".join(f"{k}={v:.1f}" for k, v in components.items())
                lines.append(f"    Components: {formatted}")

        lines.extend([
            "",
            "Summary Statistics:",
        ])

        for key, value in self.summary_stats.items():
            lines.append(f"  {key}: {value}")

        lines.append("=" * 50)

        return "\n".join(lines)
