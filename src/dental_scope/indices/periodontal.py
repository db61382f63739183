"""
Periodontal charting and AAP 2017 staging/grading.

Summarises six-site probing charts, raises tooth-level alerts and
classifies periodontitis by stage (severity) and grade (progression).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence

from dental_scope.config import PeriodontalThresholds, get_config
from dental_scope.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

SITE_NAMES: tuple[str, ...] = (
    'buccal_mesial', 'buccal_mid', 'buccal_distal',
    'lingual_mesial', 'lingual_mid', 'lingual_distal',
)


class AAPStage(str, Enum):
    """AAP/EFP 2017 periodontitis stage."""
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"


class AAPGrade(str, Enum):
    """AAP/EFP 2017 periodontitis grade."""
    A = "A"
    B = "B"
    C = "C"


STAGE_DESCRIPTIONS = {
    AAPStage.I: "Initial periodontitis",
    AAPStage.II: "Moderate periodontitis",
    AAPStage.III: "Severe periodontitis with potential for tooth loss",
    AAPStage.IV: "Advanced periodontitis with potential for loss of dentition",
}

GRADE_DESCRIPTIONS = {
    AAPGrade.A: "Slow rate of progression",
    AAPGrade.B: "Moderate rate of progression",
    AAPGrade.C: "Rapid rate of progression",
}

_GRADE_ORDER = (AAPGrade.A, AAPGrade.B, AAPGrade.C)


class AlertType(str, Enum):
    PD_CRITICAL = "PD_CRITICAL"
    MOBILITY_III = "MOBILITY_III"
    FURCATION_III = "FURCATION_III"


class AlertSeverity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class ProbingSite:
    """One probing site."""
    depth: int  # mm, 0 = not recorded
    bop: bool = False
    cal: Optional[float] = None
    recession: Optional[float] = None


@dataclass(frozen=True)
class ToothProbing:
    """Six-site probing record for one tooth, sites in SITE_NAMES order."""
    tooth_number: int
    sites: tuple[ProbingSite, ...]
    mobility: int = 0
    furcation: int = 0
    plaque: bool = False
    calculus: bool = False
    suppuration: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'sites', tuple(self.sites))
        if len(self.sites) != len(SITE_NAMES):
            raise InvalidInputError(
                f"Tooth {self.tooth_number}: expected {len(SITE_NAMES)} probing sites, got {len(self.sites)}",
                fields=['sites'],
            )

    @property
    def max_depth(self) -> int:
        return max(site.depth for site in self.sites)


@dataclass(frozen=True)
class AAPClassification:
    """Stage and grade with their drivers."""
    stage: AAPStage
    grade: AAPGrade
    max_cal: float
    bone_loss_percent: Optional[float] = None
    bone_loss_per_year: Optional[float] = None
    risk_factors: list[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"Stage {self.stage.value}, Grade {self.grade.value}"

    def to_dict(self) -> dict:
        return {
            'stage': self.stage.value,
            'grade': self.grade.value,
            'label': self.label,
            'stage_description': STAGE_DESCRIPTIONS[self.stage],
            'grade_description': GRADE_DESCRIPTIONS[self.grade],
            'max_cal': self.max_cal,
            'bone_loss_percent': self.bone_loss_percent,
            'bone_loss_per_year': self.bone_loss_per_year,
            'risk_factors': list(self.risk_factors),
        }


@dataclass(frozen=True)
class PerioChartSummary:
    total_sites: int
    sites_pd4_plus: int
    sites_pd5_plus: int
    bop_count: int
    bop_percentage: int
    is_active: bool
    max_probing_depth: int

    def to_dict(self) -> dict:
        return {
            'total_sites': self.total_sites,
            'sites_pd4_plus': self.sites_pd4_plus,
            'sites_pd5_plus': self.sites_pd5_plus,
            'bop_count': self.bop_count,
            'bop_percentage': self.bop_percentage,
            'is_active': self.is_active,
            'max_probing_depth': self.max_probing_depth,
        }


@dataclass(frozen=True)
class PerioAlert:
    type: AlertType
    tooth_number: int
    message: str
    suggested_action: str
    severity: AlertSeverity

    def to_dict(self) -> dict:
        return {
            'type': self.type.value,
            'tooth_number': self.tooth_number,
            'message': self.message,
            'suggested_action': self.suggested_action,
            'severity': self.severity.value,
        }


class PeriodontalCalculator:
    """
    AAP staging/grading and probing-chart analysis.

    Attributes:
        thresholds: Stage CAL bands, grade progression rates and charting cut points
    """

    def __init__(self, thresholds: Optional[PeriodontalThresholds] = None):
        self.thresholds = thresholds or get_config().clinical.periodontal

    def stage(self, max_cal: float, bone_loss_percent: Optional[float] = None) -> AAPStage:
        """
        Stage from worst interdental CAL.

        Beyond the Stage III CAL band, radiographic bone loss below the
        Stage IV cut keeps the case at Stage III; unknown bone loss does not.
        """
        t = self.thresholds
        if max_cal <= t.stage_i_max_cal:
            return AAPStage.I
        if max_cal <= t.stage_ii_max_cal:
            return AAPStage.II
        if max_cal <= t.stage_iii_max_cal:
            return AAPStage.III
        if bone_loss_percent is not None and bone_loss_percent < t.stage_iv_bone_loss_percent:
            return AAPStage.III
        return AAPStage.IV

    def grade(
        self,
        bone_loss_per_year: Optional[float] = None,
        diabetes: bool = False,
        smoker: bool = False,
    ) -> AAPGrade:
        """Worst of the progression-rate grade and the risk-factor modifiers."""
        t = self.thresholds
        grade = AAPGrade.A
        if bone_loss_per_year is not None:
            if bone_loss_per_year > t.grade_c_rate_above:
                grade = AAPGrade.C
            elif bone_loss_per_year > t.grade_b_rate_above:
                grade = AAPGrade.B
        if diabetes:
            grade = max(grade, AAPGrade.B, key=_GRADE_ORDER.index)
        if smoker:
            grade = AAPGrade.C
        return grade

    def classify(
        self,
        max_cal: float,
        bone_loss_percent: Optional[float] = None,
        bone_loss_per_year: Optional[float] = None,
        diabetes: bool = False,
        smoker: bool = False,
    ) -> AAPClassification:
        risk_factors = [name for name, present in (('diabetes', diabetes), ('smoking', smoker)) if present]
        return AAPClassification(
            stage=self.stage(max_cal, bone_loss_percent),
            grade=self.grade(bone_loss_per_year, diabetes, smoker),
            max_cal=max_cal,
            bone_loss_percent=bone_loss_percent,
            bone_loss_per_year=bone_loss_per_year,
            risk_factors=risk_factors,
        )

    def summarize(self, teeth: Iterable[ToothProbing]) -> PerioChartSummary:
        """Site counts over recorded sites (depth > 0) and bleeding percentage."""
        recorded = [site for tooth in teeth for site in tooth.sites if site.depth > 0]
        total = len(recorded)
        bop_count = sum(1 for site in recorded if site.bop)
        bop_percentage = round(bop_count / total * 100) if total else 0

        return PerioChartSummary(
            total_sites=total,
            sites_pd4_plus=sum(1 for site in recorded if site.depth >= 4),
            sites_pd5_plus=sum(1 for site in recorded if site.depth >= 5),
            bop_count=bop_count,
            bop_percentage=bop_percentage,
            is_active=bop_percentage > self.thresholds.active_bop_percent_above,
            max_probing_depth=max((site.depth for site in recorded), default=0),
        )

    def alerts(self, teeth: Sequence[ToothProbing]) -> list[PerioAlert]:
        """Deep pocket, Class III mobility and Class III furcation alerts, per tooth."""
        t = self.thresholds
        alerts = []
        for tooth in teeth:
            depth = tooth.max_depth
            if depth >= t.deep_pocket_mm:
                surgical = depth >= t.surgical_pocket_mm
                alerts.append(PerioAlert(
                    type=AlertType.PD_CRITICAL,
                    tooth_number=tooth.tooth_number,
                    message=f"Tooth #{tooth.tooth_number}: PD {depth}mm",
                    suggested_action="Flap Surgery recommended" if surgical else "Deep Scaling / SRP required",
                    severity=AlertSeverity.CRITICAL if surgical else AlertSeverity.WARNING,
                ))
            if tooth.mobility >= 3:
                alerts.append(PerioAlert(
                    type=AlertType.MOBILITY_III,
                    tooth_number=tooth.tooth_number,
                    message=f"Tooth #{tooth.tooth_number}: Class III Mobility",
                    suggested_action="Consider Extraction or Splinting",
                    severity=AlertSeverity.CRITICAL,
                ))
            if tooth.furcation >= 3:
                alerts.append(PerioAlert(
                    type=AlertType.FURCATION_III,
                    tooth_number=tooth.tooth_number,
                    message=f"Tooth #{tooth.tooth_number}: Class III Furcation",
                    suggested_action="Hemisection, Root Amputation, or Extraction",
                    severity=AlertSeverity.CRITICAL,
                ))

        logger.debug("Generated %d periodontal alerts", len(alerts))
        return alerts


def classify_periodontitis(
    max_cal: float,
    bone_loss_percent: Optional[float] = None,
    bone_loss_per_year: Optional[float] = None,
    diabetes: bool = False,
    smoker: bool = False,
) -> AAPClassification:
    """AAP stage and grade with the configured cut points."""
    return PeriodontalCalculator().classify(max_cal, bone_loss_percent, bone_loss_per_year, diabetes, smoker)


def calculate_chart_summary(teeth: Iterable[ToothProbing]) -> PerioChartSummary:
    return PeriodontalCalculator().summarize(teeth)


def generate_perio_alerts(teeth: Sequence[ToothProbing]) -> list[PerioAlert]:
    return PeriodontalCalculator().alerts(teeth)
