"""
Smoking index risk assessment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from dental_scope.config import SmokingThresholds, get_config


class SmokingRisk(str, Enum):
    """Smoking index risk tiers."""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


RISK_TEXT = {
    SmokingRisk.LOW: (
        "Baseline tobacco-related periodontal risk",
        "Baseline risk - routine annual screening",
    ),
    SmokingRisk.MODERATE: (
        "2x increased risk of periodontitis",
        "Elevated risk - annual screening",
    ),
    SmokingRisk.HIGH: (
        "4x increased risk, aggressive periodontitis likely",
        "High risk - biannual screening mandatory",
    ),
    SmokingRisk.VERY_HIGH: (
        "6x+ risk, periodontal treatment prognosis guarded",
        "CRITICAL - immediate biopsy for any suspicious lesion",
    ),
}

MANDATORY_ACTIONS = [
    "Refer to Tobacco Cessation Program",
    "Comprehensive oral cancer screening",
    "Aggressive periodontal therapy",
    "3-month recall interval mandatory",
]


@dataclass(frozen=True)
class SmokingIndexResult:
    """Smoking index result."""
    cigarettes_per_day: float
    years_of_smoking: float
    smoking_index: float
    risk_level: SmokingRisk
    perio_risk: str
    oral_cancer_risk: str
    mandatory_actions: list[str] = field(default_factory=list)

    @property
    def requires_immediate_action(self) -> bool:
        return bool(self.mandatory_actions)

    def to_dict(self) -> dict:
        return {
            'cigarettes_per_day': self.cigarettes_per_day,
            'years_of_smoking': self.years_of_smoking,
            'smoking_index': self.smoking_index,
            'risk_level': self.risk_level.value,
            'perio_risk': self.perio_risk,
            'oral_cancer_risk': self.oral_cancer_risk,
            'requires_immediate_action': self.requires_immediate_action,
            'mandatory_actions': list(self.mandatory_actions),
        }


class SmokingIndexCalculator:
    """Cigarettes/day x years smoking index."""

    def __init__(self, thresholds: Optional[SmokingThresholds] = None):
        self.thresholds = thresholds or get_config().clinical.smoking

    def calculate(self, cigarettes_per_day: float, years_of_smoking: float) -> SmokingIndexResult:
        index = cigarettes_per_day * years_of_smoking
        risk = self.classify(index)
        perio_risk, cancer_risk = RISK_TEXT[risk]

        actions = list(MANDATORY_ACTIONS) if index >= self.thresholds.high_min else []

        return SmokingIndexResult(
            cigarettes_per_day=cigarettes_per_day,
            years_of_smoking=years_of_smoking,
            smoking_index=index,
            risk_level=risk,
            perio_risk=perio_risk,
            oral_cancer_risk=cancer_risk,
            mandatory_actions=actions,
        )

    def classify(self, index: float) -> SmokingRisk:
        t = self.thresholds
        if index > t.very_high_above:
            return SmokingRisk.VERY_HIGH
        if index >= t.high_min:
            return SmokingRisk.HIGH
        if index >= t.moderate_min:
            return SmokingRisk.MODERATE
        return SmokingRisk.LOW


def calculate_smoking_index(cigarettes_per_day: float, years_of_smoking: float) -> SmokingIndexResult:
    """Calculate the smoking index with the configured risk tiers."""
    return SmokingIndexCalculator().calculate(cigarettes_per_day, years_of_smoking)
