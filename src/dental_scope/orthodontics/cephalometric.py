"""
Cephalometric angle analysis.

Computes SNA, SNB, ANB and FMA from a lateral cephalogram tracing and
derives the skeletal class and vertical growth pattern.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Mapping, Optional

from dental_scope.config import SkeletalNorms, get_config
from dental_scope.exceptions import InvalidInputError
from dental_scope.orthodontics.geometry import Landmark2D, angle_at_vertex, angle_between_lines

logger = logging.getLogger(__name__)

REQUIRED_LANDMARKS: tuple[str, ...] = ('S', 'N', 'A', 'B', 'Or', 'Po', 'Go', 'Gn')

LANDMARK_DESCRIPTIONS = {
    'S': "Sella: Center of sella turcica",
    'N': "Nasion: Most anterior point of frontonasal suture",
    'A': "A-Point: Deepest point on maxillary base between ANS and prosthion",
    'B': "B-Point: Deepest point on mandibular symphysis",
    'Or': "Orbitale: Lowest point on inferior margin of orbit",
    'Po': "Porion: Uppermost point of external auditory meatus",
    'Go': "Gonion: Most posterior-inferior point on angle of mandible",
    'Gn': "Gnathion: Most anterior-inferior point on mandibular symphysis",
}

# Display reference only; classification uses SkeletalNorms / ProfileNorms.
NORMAL_RANGES = {
    'SNA': {'min': 80.0, 'max': 84.0, 'unit': '°', 'description': "Anteroposterior position of maxilla"},
    'SNB': {'min': 78.0, 'max': 82.0, 'unit': '°', 'description': "Anteroposterior position of mandible"},
    'ANB': {'min': 2.0, 'max': 4.0, 'unit': '°', 'description': "Skeletal relationship (Class I/II/III)"},
    'FMA': {'min': 20.0, 'max': 30.0, 'unit': '°', 'description': "Vertical growth pattern"},
    'nasolabial_angle': {'min': 94.0, 'max': 110.0, 'unit': '°', 'description': "Upper lip inclination"},
    'e_line_upper_lip': {'min': -4.0, 'max': 0.0, 'unit': 'mm', 'description': "Upper lip to E-Line"},
    'e_line_lower_lip': {'min': -2.0, 'max': 0.0, 'unit': 'mm', 'description': "Lower lip to E-Line"},
}


class SkeletalClass(str, Enum):
    """Skeletal sagittal relationship."""
    CLASS_I = "Class I"
    CLASS_II = "Class II"
    CLASS_III = "Class III"


class VerticalPattern(str, Enum):
    """Vertical growth pattern."""
    HYPODIVERGENT = "Hypodivergent"
    NORMODIVERGENT = "Normodivergent"
    HYPERDIVERGENT = "Hyperdivergent"


class RangeStatus(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


def range_status(name: str, value: float) -> RangeStatus:
    """Compare a measurement against NORMAL_RANGES (inclusive)."""
    normal = NORMAL_RANGES[name]
    if value < normal['min']:
        return RangeStatus.LOW
    if value > normal['max']:
        return RangeStatus.HIGH
    return RangeStatus.NORMAL


@dataclass(frozen=True)
class LandmarkValidation:
    valid: bool
    missing: list[str]


def validate_landmarks(landmarks: Mapping[str, object]) -> LandmarkValidation:
    """Check that every landmark needed for the angle analysis is present."""
    missing = [name for name in REQUIRED_LANDMARKS if landmarks.get(name) is None]
    return LandmarkValidation(valid=not missing, missing=missing)


@dataclass(frozen=True)
class CephalometricLandmarks:
    """Complete cephalometric tracing."""
    S: Landmark2D
    N: Landmark2D
    A: Landmark2D
    B: Landmark2D
    Or: Landmark2D
    Po: Landmark2D
    Go: Landmark2D
    Gn: Landmark2D

    @classmethod
    def from_mapping(cls, landmarks: Mapping[str, object]) -> CephalometricLandmarks:
        """
        Build a tracing from a name -> point mapping.

        Raises:
            InvalidInputError: if any required landmark is absent
        """
        validation = validate_landmarks(landmarks)
        if not validation.valid:
            raise InvalidInputError(
                f"Missing cephalometric landmarks: {', '.join(validation.missing)}",
                fields=validation.missing,
            )
        return cls(**{f.name: Landmark2D.coerce(landmarks[f.name]) for f in fields(cls)})


@dataclass(frozen=True)
class CephalometricAngles:
    """Cephalometric analysis result (degrees)."""
    sna: float
    snb: float
    anb: float
    fma: float
    skeletal_class: SkeletalClass
    vertical_pattern: VerticalPattern

    def range_flags(self) -> dict[str, RangeStatus]:
        """Per-angle highlighting against NORMAL_RANGES."""
        return {
            'SNA': range_status('SNA', self.sna),
            'SNB': range_status('SNB', self.snb),
            'ANB': range_status('ANB', self.anb),
            'FMA': range_status('FMA', self.fma),
        }

    def to_dict(self) -> dict:
        return {
            'SNA': self.sna,
            'SNB': self.snb,
            'ANB': round(self.anb, 1),
            'FMA': self.fma,
            'skeletal_class': self.skeletal_class.value,
            'vertical_pattern': self.vertical_pattern.value,
            'range_flags': {k: v.value for k, v in self.range_flags().items()},
        }


class CephalometricAnalyzer:
    """
    Lateral cephalogram angle analyzer.

    Attributes:
        norms: Skeletal class and vertical pattern bands
    """

    def __init__(self, norms: Optional[SkeletalNorms] = None):
        self.norms = norms or get_config().clinical.skeletal

    def analyze(self, landmarks: CephalometricLandmarks) -> CephalometricAngles:
        """
        Calculate all angles for a complete tracing.

        Args:
            landmarks: Fully populated cephalometric landmarks

        Returns:
            CephalometricAngles with classifications
        """
        lm = landmarks
        sna = angle_at_vertex(lm.S, lm.N, lm.A)
        snb = angle_at_vertex(lm.S, lm.N, lm.B)
        # Composed from the rounded angles so SNA - SNB == ANB
        anb = sna - snb
        # Both planes directed posterior -> anterior
        fma = angle_between_lines(lm.Po, lm.Or, lm.Go, lm.Gn)

        logger.debug("SNA=%.1f SNB=%.1f ANB=%.1f FMA=%.1f", sna, snb, anb, fma)

        return CephalometricAngles(
            sna=sna,
            snb=snb,
            anb=anb,
            fma=fma,
            skeletal_class=self.classify_skeletal(anb),
            vertical_pattern=self.classify_vertical(fma),
        )

    def classify_skeletal(self, anb: float) -> SkeletalClass:
        anb = round(anb, 1)
        if anb < self.norms.class_i_min:
            return SkeletalClass.CLASS_III
        if anb > self.norms.class_i_max:
            return SkeletalClass.CLASS_II
        return SkeletalClass.CLASS_I

    def classify_vertical(self, fma: float) -> VerticalPattern:
        if fma < self.norms.fma_normal_min:
            return VerticalPattern.HYPODIVERGENT
        if fma > self.norms.fma_normal_max:
            return VerticalPattern.HYPERDIVERGENT
        return VerticalPattern.NORMODIVERGENT


def calculate_all_angles(landmarks: CephalometricLandmarks) -> CephalometricAngles:
    """Calculate SNA, SNB, ANB and FMA with the configured norms."""
    return CephalometricAnalyzer().analyze(landmarks)
