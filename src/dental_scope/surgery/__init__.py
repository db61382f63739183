"""Oral surgery scoring module for DentalScope."""

from dental_scope.surgery.war import (
    ArchClass,
    Difficulty,
    RadioDepth,
    WARAssessment,
    WARScorer,
    WinterClass,
    calculate_war_score,
)

__all__ = [
    "ArchClass",
    "Difficulty",
    "RadioDepth",
    "WARAssessment",
    "WARScorer",
    "WinterClass",
    "calculate_war_score",
]
