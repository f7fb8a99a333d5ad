"""Recovery planning engine."""

from .planner import RecoveryPlanner, generate_recovery_plan

__all__ = ['RecoveryPlanner', 'generate_recovery_plan']
