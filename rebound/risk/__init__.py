"""Student risk assessment."""

from .assessor import assess_risk
from .aggregation import build_risk_input, rank_students, recent_stress_history, summarize_student

__all__ = [
    'assess_risk',
    'build_risk_input',
    'rank_students',
    'recent_stress_history',
    'summarize_student',
]
