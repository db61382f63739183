"""
Soft-tissue profile analysis (nasolabial angle, Ricketts E-line).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Mapping, Optional

from dental_scope.config import ProfileNorms, get_config
from dental_scope.exceptions import InvalidInputError
from dental_scope.orthodontics.cephalometric import LandmarkValidation, RangeStatus, range_status
from dental_scope.orthodontics.geometry import Landmark2D, angle_at_vertex, signed_distance_to_line

PROFILE_LANDMARKS: tuple[str, ...] = (
    'nose_tip', 'pronasale', 'upper_lip', 'lower_lip', 'soft_tissue_pogonion',
)

# camelCase names used by charting front-ends
_ALIASES = {
    'noseTip': 'nose_tip',
    'upperLip': 'upper_lip',
    'lowerLip': 'lower_lip',
    'softTissuePogonion': 'soft_tissue_pogonion',
}


class ProfileType(str, Enum):
    CONVEX = "Convex"
    STRAIGHT = "Straight"
    CONCAVE = "Concave"


def _normalise(landmarks: Mapping[str, object]) -> dict[str, object]:
    return {_ALIASES.get(name, name): point for name, point in landmarks.items()}


def validate_profile_landmarks(landmarks: Mapping[str, object]) -> LandmarkValidation:
    named = _normalise(landmarks)
    missing = [name for name in PROFILE_LANDMARKS if named.get(name) is None]
    return LandmarkValidation(valid=not missing, missing=missing)


@dataclass(frozen=True)
class ProfileLandmarks:
    """Complete soft-tissue profile tracing."""
    nose_tip: Landmark2D
    pronasale: Landmark2D
    upper_lip: Landmark2D
    lower_lip: Landmark2D
    soft_tissue_pogonion: Landmark2D

    @classmethod
    def from_mapping(cls, landmarks: Mapping[str, object]) -> ProfileLandmarks:
        validation = validate_profile_landmarks(landmarks)
        if not validation.valid:
            raise InvalidInputError(
                f"Missing profile landmarks: {', '.join(validation.missing)}",
                fields=validation.missing,
            )
        named = _normalise(landmarks)
        return cls(**{f.name: Landmark2D.coerce(named[f.name]) for f in fields(cls)})


@dataclass(frozen=True)
class ProfileAnalysis:
    nasolabial_angle: float
    e_line_upper_lip: float  # positive = protrusive
    e_line_lower_lip: float
    profile_type: ProfileType

    def range_flags(self) -> dict[str, RangeStatus]:
        return {
            'nasolabial_angle': range_status('nasolabial_angle', self.nasolabial_angle),
            'e_line_upper_lip': range_status('e_line_upper_lip', self.e_line_upper_lip),
            'e_line_lower_lip': range_status('e_line_lower_lip', self.e_line_lower_lip),
        }

    def to_dict(self) -> dict:
        return {
            'nasolabial_angle': self.nasolabial_angle,
            'e_line_upper_lip': self.e_line_upper_lip,
            'e_line_lower_lip': self.e_line_lower_lip,
            'profile_type': self.profile_type.value,
            'range_flags': {k: v.value for k, v in self.range_flags().items()},
        }


class ProfileAnalyzer:
    """Soft-tissue profile analyzer."""

    def __init__(self, norms: Optional[ProfileNorms] = None):
        self.norms = norms or get_config().clinical.profile

    def analyze(self, landmarks: ProfileLandmarks) -> ProfileAnalysis:
        lm = landmarks
        nasolabial = angle_at_vertex(lm.nose_tip, lm.pronasale, lm.upper_lip)
        upper = signed_distance_to_line(lm.upper_lip, lm.nose_tip, lm.soft_tissue_pogonion)
        lower = signed_distance_to_line(lm.lower_lip, lm.nose_tip, lm.soft_tissue_pogonion)

        return ProfileAnalysis(
            nasolabial_angle=nasolabial,
            e_line_upper_lip=upper,
            e_line_lower_lip=lower,
            profile_type=self.classify(nasolabial),
        )

    def classify(self, nasolabial_angle: float) -> ProfileType:
        if nasolabial_angle < self.norms.convex_below:
            return ProfileType.CONVEX
        if nasolabial_angle > self.norms.concave_above:
            return ProfileType.CONCAVE
        return ProfileType.STRAIGHT


def analyze_profile(landmarks: ProfileLandmarks) -> ProfileAnalysis:
    """Analyze a soft-tissue profile with the configured cut points."""
    return ProfileAnalyzer().analyze(landmarks)
