"""
Cairo gingival recession classification (replaces Miller's).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CairoRT(str, Enum):
    """Cairo recession types."""
    RT1 = "RT1"  # No interproximal attachment loss
    RT2 = "RT2"  # Interproximal CAL <= buccal CAL
    RT3 = "RT3"  # Interproximal CAL > buccal CAL


CAIRO_DETAILS = {
    CairoRT.RT1: {
        'description': "No interproximal attachment loss",
        'prognosis': "Excellent - 100% root coverage possible",
        'suggested_treatment': "Connective tissue graft or coronally advanced flap",
    },
    CairoRT.RT2: {
        'description': "Interproximal CAL less than or equal to buccal CAL",
        'prognosis': "Good - partial root coverage expected",
        'suggested_treatment': "CTG + CAF, manage expectations",
    },
    CairoRT.RT3: {
        'description': "Interproximal CAL greater than buccal CAL",
        'prognosis': "Limited - minimal or no root coverage possible",
        'suggested_treatment': "Consider restorative option (GIC), periodontal referral",
    },
}


@dataclass(frozen=True)
class CairoRecessionResult:
    """Classified recession site."""
    tooth_number: int
    classification: CairoRT
    description: str
    prognosis: str
    suggested_treatment: str

    def to_dict(self) -> dict:
        return {
            'tooth_number': self.tooth_number,
            'classification': self.classification.value,
            'description': self.description,
            'prognosis': self.prognosis,
            'suggested_treatment': self.suggested_treatment,
        }


def classify_cairo_recession(has_interdental_loss: bool, extends_to_mgj: bool) -> CairoRT:
    """Classify a recession defect; the MGJ flag only matters with interdental loss."""
    if not has_interdental_loss:
        return CairoRT.RT1
    if extends_to_mgj:
        return CairoRT.RT3
    return CairoRT.RT2


def get_cairo_recession_details(tooth_number: int, classification: CairoRT) -> CairoRecessionResult:
    return CairoRecessionResult(
        tooth_number=tooth_number,
        classification=CairoRT(classification),
        **CAIRO_DETAILS[CairoRT(classification)],
    )
