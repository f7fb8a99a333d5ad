"""Stress-to-capacity mapping."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..utils.config import get_default_config


@dataclass(frozen=True)
class StressAdjustment:
    """How much of the reported time a student should actually plan for."""

    factor: float
    strategy: str
    allowed_hours: float


DEFAULT_STRESS_BANDS: List[Dict[str, Any]] = get_default_config()['stress_bands']


def get_stress_adjustment(
    stress_level: int,
    available_hours: float,
    bands: Optional[List[Dict[str, Any]]] = None,
) -> StressAdjustment:
    """Map a stress level and available hours to an allowed-hours budget.

    Bands are checked in order and the first whose ``max_stress`` is at least
    ``stress_level`` wins; a band with ``max_stress`` of None matches anything.
    """
    bands = bands or DEFAULT_STRESS_BANDS

    band = bands[-1]
    for candidate in bands:
        max_stress = candidate.get('max_stress')
        if max_stress is None or stress_level <= max_stress:
            band = candidate
            break

    factor = band['factor']
    return StressAdjustment(
        factor=factor,
        strategy=band['strategy'],
        allowed_hours=available_hours * factor,
    )
