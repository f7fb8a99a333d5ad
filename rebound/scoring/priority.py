"""Recovery priority scoring."""

from datetime import date
from typing import Dict, Iterable, Optional

from ..models.task import Task
from ..utils.config import get_default_config
from ..utils.datetime_utils import DateLike, calendar_days_between, round_half_up

DEFAULT_PRIORITY_WEIGHTS = get_default_config()['priority_weights']


def count_subject_backlog(tasks: Iterable[Task]) -> Dict[str, int]:
    """Count pending or missed tasks per subject.

    Every subject present in ``tasks`` gets an entry, even when all of its
    tasks are completed.
    """
    counts: Dict[str, int] = {}
    for task in tasks:
        counts.setdefault(task.subject_id, 0)
        if task.status.is_open:
            counts[task.subject_id] += 1
    return counts


def compute_priority_components(
    task: Task,
    subject_backlog_count: int,
    stress_level: int,
    today: DateLike,
) -> Dict[str, float]:
    """Compute the four 0-100 score components for a task."""
    # Grade weight, already a percentage
    weight = task.weight or 0.0

    # Deadline urgency: reciprocal decay, saturating once due today or overdue
    days_remaining = calendar_days_between(today, task.due_date)
    if days_remaining < 0:
        urgency = 100.0
    else:
        urgency = min(100.0, 100.0 / (days_remaining + 1))

    backlog = float(min(100, subject_backlog_count * 10))

    # Comfort flip: low stress raises the score
    comfort = float((10 - stress_level) * 10)

    return {
        'weight': float(weight),
        'urgency': urgency,
        'backlog': backlog,
        'comfort': comfort,
    }


class PriorityScorer:
    """Weighted composite of grade weight, urgency, backlog and comfort."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize scorer with configuration."""
        self.config = config or {}
        self.weights = dict(self.config.get('priority_weights') or DEFAULT_PRIORITY_WEIGHTS)

    def combine(self, components: Dict[str, float]) -> int:
        """Weighted sum of components, rounded half-up."""
        raw = sum(
            components[key] * self.weights.get(key, 0.0)
            for key in components
        )
        return max(0, round_half_up(raw))

    def score(
        self,
        task: Task,
        subject_backlog_count: int,
        stress_level: int,
        today: DateLike,
    ) -> int:
        """Return the priority score of a single task."""
        components = compute_priority_components(task, subject_backlog_count, stress_level, today)
        return self.combine(components)


def calculate_priority_score(
    task: Task,
    subject_backlog_count: int,
    stress_level: int,
    today: Optional[DateLike] = None,
    weights: Optional[Dict[str, float]] = None,
) -> int:
    """Score a task with the default weights unless ``weights`` is given.

    ``today`` defaults to the current local date; pass it explicitly for
    reproducible results.
    """
    if today is None:
        today = date.today()
    config = {'priority_weights': weights} if weights else None
    return PriorityScorer(config).score(task, subject_backlog_count, stress_level, today)
