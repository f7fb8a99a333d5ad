"""Task scoring and capacity mapping."""

from .capacity import StressAdjustment, get_stress_adjustment
from .priority import (
    PriorityScorer,
    calculate_priority_score,
    compute_priority_components,
    count_subject_backlog,
)

__all__ = [
    'StressAdjustment',
    'get_stress_adjustment',
    'PriorityScorer',
    'calculate_priority_score',
    'compute_priority_components',
    'count_subject_backlog',
]
