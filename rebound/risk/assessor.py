"""Early-warning risk classification."""

from ..models.risk import RiskInput, RiskLevel


def assess_risk(risk_input: RiskInput) -> RiskLevel:
    """Classify a student's risk; the first matching rule wins."""
    current_stress = risk_input.current_stress
    missed = risk_input.missed_tasks_count

    if current_stress > 8 and (missed > 5 or risk_input.backlog_depth_days > 7):
        return RiskLevel.CRITICAL

    if missed >= 3 or current_stress > 7:
        return RiskLevel.HIGH

    if missed >= 1 or 5 <= current_stress <= 7:
        return RiskLevel.MEDIUM

    return RiskLevel.LOW
