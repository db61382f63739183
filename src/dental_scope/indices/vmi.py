"""
Volpe-Manhold Index (VMI) for lower lingual calculus.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

logger = logging.getLogger(__name__)

VMI_INDEX_TEETH: tuple[int, ...] = (31, 32, 41, 42)


class CalculusSeverity(str, Enum):
    MINIMAL = "Minimal"
    MILD = "Mild"
    MODERATE = "Moderate"
    HEAVY = "Heavy"


# (upper bound inclusive, severity, recommendation)
VMI_BANDS = [
    (1.0, CalculusSeverity.MINIMAL, "Routine prophylaxis"),
    (3.0, CalculusSeverity.MILD, "Scaling, improve lingual brushing"),
    (6.0, CalculusSeverity.MODERATE, "Thorough scaling, electric toothbrush recommended"),
]
HEAVY_RECOMMENDATION = "Ultrasonic scaling, tobacco cessation if applicable"


@dataclass(frozen=True)
class VMIResult:
    measurements: dict[int, float]
    total_score: float
    severity: CalculusSeverity
    recommendation: str

    def to_dict(self) -> dict:
        return {
            'measurements': dict(self.measurements),
            'total_score': self.total_score,
            'severity': self.severity.value,
            'recommendation': self.recommendation,
        }


def calculate_vmi(measurements: Mapping[int, float]) -> VMIResult:
    """
    Sum lingual calculus heights (mm) over the lower incisors.

    Args:
        measurements: Tooth -> calculus measurement in mm

    Returns:
        VMIResult with severity band and recommendation
    """
    used = {t: v for t, v in measurements.items() if t in VMI_INDEX_TEETH}
    if len(used) != len(measurements):
        logger.debug("Ignoring non-index teeth for VMI: %s", sorted(set(measurements) - set(used)))

    total = round(sum(used.values()), 1)

    for upper, severity, recommendation in VMI_BANDS:
        if total <= upper:
            break
    else:
        severity, recommendation = CalculusSeverity.HEAVY, HEAVY_RECOMMENDATION

    return VMIResult(
        measurements=used,
        total_score=total,
        severity=severity,
        recommendation=recommendation,
    )
