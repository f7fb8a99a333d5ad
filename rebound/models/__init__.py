"""Data models."""

from .task import Task, TaskStatus, DailyLog
from .plan import ScoredTask, RecoveryPlan, PlanDecision, PlanTrace
from .risk import RiskInput, RiskLevel, StudentRiskSummary

__all__ = [
    'Task',
    'TaskStatus',
    'DailyLog',
    'ScoredTask',
    'RecoveryPlan',
    'PlanDecision',
    'PlanTrace',
    'RiskInput',
    'RiskLevel',
    'StudentRiskSummary',
]
