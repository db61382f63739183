"""
Oral submucous fibrosis (OSMF) staging by mouth opening.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dental_scope.config import OSMFThresholds, get_config


class OSMFStage(str, Enum):
    I = "I"
    II = "II"
    III = "III"
    IVA = "IVA"
    IVB = "IVB"


# stage -> (description, mouth opening range, management, malignancy risk)
OSMF_DETAILS = {
    OSMFStage.I: (
        "Early/Minimal fibrosis", ">35mm",
        "Cessation of habit, intralesional steroids, physiotherapy", "Low (1-2%)",
    ),
    OSMFStage.II: (
        "Moderate fibrosis, palpable bands", "25-35mm",
        "Habit cessation, steroids, physiotherapy, antioxidants", "Moderate (3-7%)",
    ),
    OSMFStage.III: (
        "Severe fibrosis, restricted opening", "15-25mm",
        "Refer for surgical release, aggressive physiotherapy", "High (7-13%)",
    ),
    OSMFStage.IVA: (
        "Very severe fibrosis", "5-15mm",
        "Urgent surgical intervention, nutritional support", "Very High (>13%)",
    ),
    OSMFStage.IVB: (
        "Critical trismus", "<5mm",
        "Emergency surgical release, NGT feeding if needed", "Critical - immediate biopsy required",
    ),
}


@dataclass(frozen=True)
class OSMFResult:
    mouth_opening_mm: float
    stage: OSMFStage
    description: str
    mouth_opening_range: str
    suggested_management: str
    malignancy_risk: str

    def to_dict(self) -> dict:
        return {
            'mouth_opening_mm': self.mouth_opening_mm,
            'stage': self.stage.value,
            'description': self.description,
            'mouth_opening_range': self.mouth_opening_range,
            'suggested_management': self.suggested_management,
            'malignancy_risk': self.malignancy_risk,
        }


class OSMFStager:
    """Stages OSMF from inter-incisal mouth opening."""

    def __init__(self, thresholds: Optional[OSMFThresholds] = None):
        self.thresholds = thresholds or get_config().clinical.osmf

    def stage(self, mouth_opening_mm: float) -> OSMFResult:
        stage = self.classify(mouth_opening_mm)
        description, opening_range, management, risk = OSMF_DETAILS[stage]
        return OSMFResult(
            mouth_opening_mm=mouth_opening_mm,
            stage=stage,
            description=description,
            mouth_opening_range=opening_range,
            suggested_management=management,
            malignancy_risk=risk,
        )

    def classify(self, mouth_opening_mm: float) -> OSMFStage:
        t = self.thresholds
        if mouth_opening_mm >= t.stage_i_min:
            return OSMFStage.I
        if mouth_opening_mm >= t.stage_ii_min:
            return OSMFStage.II
        if mouth_opening_mm >= t.stage_iii_min:
            return OSMFStage.III
        if mouth_opening_mm >= t.stage_iva_min:
            return OSMFStage.IVA
        return OSMFStage.IVB


def stage_osmf(mouth_opening_mm: float) -> OSMFResult:
    """Stage OSMF with the configured mouth-opening bands."""
    return OSMFStager().stage(mouth_opening_mm)
