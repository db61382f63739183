"""
WAR surgical-difficulty scoring for impacted third molars.

Sums Winter's angulation, arch (ramus) relationship and radiographic
depth points into a 3-10 score.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from dental_scope.config import WARThresholds, get_config
from dental_scope.exceptions import InvalidInputError


class WinterClass(str, Enum):
    """Winter's angulation."""
    VERTICAL = "VERTICAL"
    MESIOANGULAR = "MESIOANGULAR"
    HORIZONTAL = "HORIZONTAL"
    DISTOANGULAR = "DISTOANGULAR"


class ArchClass(str, Enum):
    """Pell & Gregory ramus relationship."""
    CLASS_I = "CLASS_I"  # Adequate space
    CLASS_II = "CLASS_II"  # Reduced space
    CLASS_III = "CLASS_III"  # No space


class RadioDepth(str, Enum):
    """Pell & Gregory depth."""
    POSITION_A = "POSITION_A"  # Above occlusal plane
    POSITION_B = "POSITION_B"  # At occlusal plane
    POSITION_C = "POSITION_C"  # Below occlusal plane


class Difficulty(str, Enum):
    EASY = "EASY"
    MODERATE = "MODERATE"
    DIFFICULT = "DIFFICULT"


WINTER_POINTS = {
    WinterClass.VERTICAL: 1,
    WinterClass.MESIOANGULAR: 2,
    WinterClass.HORIZONTAL: 3,
    WinterClass.DISTOANGULAR: 4,
}
ARCH_POINTS = {ArchClass.CLASS_I: 1, ArchClass.CLASS_II: 2, ArchClass.CLASS_III: 3}
DEPTH_POINTS = {RadioDepth.POSITION_A: 1, RadioDepth.POSITION_B: 2, RadioDepth.POSITION_C: 3}

DIFFICULTY_DETAILS = {
    Difficulty.EASY: ("15-20 min", "Low risk, simple extraction"),
    Difficulty.MODERATE: ("25-35 min", "Moderate risk, sectioning likely required"),
    Difficulty.DIFFICULT: ("45-60 min", "High risk of nerve injury, bone removal required"),
}


def _parse(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidInputError(
            f"Invalid {field_name} {value!r}; expected one of {allowed}",
            fields=[field_name],
        ) from e


@dataclass(frozen=True)
class WARAssessment:
    score: int
    difficulty: Difficulty
    surgical_time: str
    complications: str
    winter_class: WinterClass
    arch_class: ArchClass
    radio_depth: RadioDepth
    tooth_number: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            'tooth_number': self.tooth_number,
            'score': self.score,
            'difficulty': self.difficulty.value,
            'surgical_time': self.surgical_time,
            'complications': self.complications,
            'winter_class': self.winter_class.value,
            'arch_class': self.arch_class.value,
            'radio_depth': self.radio_depth.value,
        }


class WARScorer:
    """WAR extraction difficulty scorer."""

    def __init__(self, thresholds: Optional[WARThresholds] = None):
        self.thresholds = thresholds or get_config().clinical.war

    def assess(
        self,
        winter_class: Union[WinterClass, str],
        arch_class: Union[ArchClass, str],
        radio_depth: Union[RadioDepth, str],
        tooth_number: Optional[int] = None,
    ) -> WARAssessment:
        """
        Score an impacted tooth.

        Raises:
            InvalidInputError: for an unknown classification label
        """
        winter = _parse(WinterClass, winter_class, "winter_class")
        arch = _parse(ArchClass, arch_class, "arch_class")
        depth = _parse(RadioDepth, radio_depth, "radio_depth")

        score = WINTER_POINTS[winter] + ARCH_POINTS[arch] + DEPTH_POINTS[depth]
        difficulty = self.classify(score)
        surgical_time, complications = DIFFICULTY_DETAILS[difficulty]

        return WARAssessment(
            score=score,
            difficulty=difficulty,
            surgical_time=surgical_time,
            complications=complications,
            winter_class=winter,
            arch_class=arch,
            radio_depth=depth,
            tooth_number=tooth_number,
        )

    def classify(self, score: int) -> Difficulty:
        if score >= self.thresholds.difficult_min:
            return Difficulty.DIFFICULT
        if score >= self.thresholds.moderate_min:
            return Difficulty.MODERATE
        return Difficulty.EASY


def calculate_war_score(
    winter_class: Union[WinterClass, str],
    arch_class: Union[ArchClass, str],
    radio_depth: Union[RadioDepth, str],
    tooth_number: Optional[int] = None,
) -> WARAssessment:
    """Score extraction difficulty with the configured cut points."""
    return WARScorer().assess(winter_class, arch_class, radio_depth, tooth_number)
