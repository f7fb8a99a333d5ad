"""Student-facing workload insights."""

from .breakdown import breakdown_task, detect_task_type
from .perspective import analyze_perspective
from .progress import summarize_progress
from .workload import calculate_daily_workload, estimate_task_minutes, get_workload_warning

__all__ = [
    'breakdown_task',
    'detect_task_type',
    'analyze_perspective',
    'summarize_progress',
    'calculate_daily_workload',
    'estimate_task_minutes',
    'get_workload_warning',
]
