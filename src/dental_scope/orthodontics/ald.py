"""
Arch-Length Discrepancy (ALD) analysis.

Compares the summed mesiodistal widths of an arch (space required)
against the measured arch perimeter (space available).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional

from dental_scope.config import ALDThresholds, get_config

logger = logging.getLogger(__name__)

# Bolton tooth size standards, average mesiodistal widths in mm (FDI)
BOLTON_STANDARDS: dict[int, float] = {
    # Maxillary
    11: 8.5, 12: 6.6, 13: 7.6, 14: 7.0, 15: 6.5, 16: 10.0, 17: 9.5,
    21: 8.5, 22: 6.6, 23: 7.6, 24: 7.0, 25: 6.5, 26: 10.0, 27: 9.5,
    # Mandibular
    31: 5.0, 32: 5.8, 33: 6.5, 34: 7.0, 35: 7.0, 36: 11.0, 37: 10.5,
    41: 5.0, 42: 5.8, 43: 6.5, 44: 7.0, 45: 7.0, 46: 11.0, 47: 10.5,
}

ARCH_TEETH = {
    'upper': (11, 12, 13, 14, 15, 16, 17, 21, 22, 23, 24, 25, 26, 27),
    'lower': (31, 32, 33, 34, 35, 36, 37, 41, 42, 43, 44, 45, 46, 47),
}


class TreatmentRecommendation(str, Enum):
    EXTRACTION = "Extraction"
    EXPANSION = "Expansion"
    IPR = "IPR"
    NONE = "None"


SEVERITY_NOTES = {
    TreatmentRecommendation.EXTRACTION: "Severe crowding (>4mm) detected",
    TreatmentRecommendation.EXPANSION: "Moderate crowding (2-4mm) detected",
    TreatmentRecommendation.IPR: "Mild crowding (<2mm) detected",
    TreatmentRecommendation.NONE: "Adequate space; consider maintaining existing spacing",
}


@dataclass(frozen=True)
class ToothMeasurement:
    tooth_number: int
    mesiodistal_width: float  # mm


def default_arch(arch: str, overrides: Optional[Mapping[int, float]] = None) -> list[ToothMeasurement]:
    """
    Seed an arch from the Bolton standards.

    Args:
        arch: 'upper' or 'lower'
        overrides: Tooth -> measured width replacing the standard value

    Returns:
        Tooth measurements, second molar to second molar
    """
    overrides = overrides or {}
    return [
        ToothMeasurement(tooth, overrides.get(tooth, BOLTON_STANDARDS.get(tooth, 0.0)))
        for tooth in ARCH_TEETH[arch]
    ]


def describe_discrepancy(discrepancy: float) -> str:
    if discrepancy < 0:
        return f"{abs(discrepancy)} mm crowding"
    return f"{discrepancy} mm spacing"


@dataclass(frozen=True)
class ALDCalculation:
    """Arch-length discrepancy result (mm, negative = crowding)."""
    upper_arch_required: float
    upper_arch_available: float
    lower_arch_required: float
    lower_arch_available: float
    upper_discrepancy: float
    lower_discrepancy: float
    recommendation: TreatmentRecommendation
    notes: str = ""

    @property
    def worst_discrepancy(self) -> float:
        return min(self.upper_discrepancy, self.lower_discrepancy)

    def to_dict(self) -> dict:
        return {
            'upper_arch_required': self.upper_arch_required,
            'upper_arch_available': self.upper_arch_available,
            'lower_arch_required': self.lower_arch_required,
            'lower_arch_available': self.lower_arch_available,
            'upper_discrepancy': self.upper_discrepancy,
            'lower_discrepancy': self.lower_discrepancy,
            'upper_description': describe_discrepancy(self.upper_discrepancy),
            'lower_description': describe_discrepancy(self.lower_discrepancy),
            'recommendation': self.recommendation.value,
            'notes': self.notes,
        }


class ALDCalculator:
    """Arch-length discrepancy calculator."""

    def __init__(self, thresholds: Optional[ALDThresholds] = None):
        self.thresholds = thresholds or get_config().clinical.ald

    def calculate(
        self,
        upper_teeth: Iterable[ToothMeasurement],
        lower_teeth: Iterable[ToothMeasurement],
        upper_arch_available: float,
        lower_arch_available: float,
    ) -> ALDCalculation:
        """
        Calculate per-arch discrepancy and a treatment recommendation.

        The recommendation follows the more severe (more negative) arch.
        """
        upper_required = round(sum(t.mesiodistal_width for t in upper_teeth), 1)
        lower_required = round(sum(t.mesiodistal_width for t in lower_teeth), 1)

        upper_discrepancy = round(upper_arch_available - upper_required, 1)
        lower_discrepancy = round(lower_arch_available - lower_required, 1)

        worst = min(upper_discrepancy, lower_discrepancy)
        recommendation = self.recommend(worst)
        logger.debug("ALD upper=%.1f lower=%.1f -> %s", upper_discrepancy, lower_discrepancy, recommendation.value)

        return ALDCalculation(
            upper_arch_required=upper_required,
            upper_arch_available=upper_arch_available,
            lower_arch_required=lower_required,
            lower_arch_available=lower_arch_available,
            upper_discrepancy=upper_discrepancy,
            lower_discrepancy=lower_discrepancy,
            recommendation=recommendation,
            notes=SEVERITY_NOTES[recommendation],
        )

    def recommend(self, discrepancy: float) -> TreatmentRecommendation:
        t = self.thresholds
        if discrepancy < t.extraction_below:
            return TreatmentRecommendation.EXTRACTION
        if discrepancy < t.expansion_below:
            return TreatmentRecommendation.EXPANSION
        if discrepancy < t.ipr_below:
            return TreatmentRecommendation.IPR
        return TreatmentRecommendation.NONE


def calculate_ald(
    upper_teeth: Iterable[ToothMeasurement],
    lower_teeth: Iterable[ToothMeasurement],
    upper_arch_available: float,
    lower_arch_available: float,
) -> ALDCalculation:
    """Calculate arch-length discrepancy with the configured cut points."""
    return ALDCalculator().calculate(upper_teeth, lower_teeth, upper_arch_available, lower_arch_available)
