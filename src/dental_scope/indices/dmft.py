"""
DMFT caries experience index (decayed, missing, filled permanent teeth).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from dental_scope.config import DMFTThresholds, get_config

logger = logging.getLogger(__name__)

THIRD_MOLARS = frozenset({18, 28, 38, 48})


class DMFTSeverity(str, Enum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


@dataclass(frozen=True)
class DMFTResult:
    decayed: int
    missing: int
    filled: int
    total: int
    severity: DMFTSeverity
    excluded_teeth: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'decayed': self.decayed,
            'missing': self.missing,
            'filled': self.filled,
            'total': self.total,
            'severity': self.severity.value,
            'excluded_teeth': list(self.excluded_teeth),
        }


class DMFTCalculator:
    """DMFT calculator; third molars are excluded."""

    def __init__(self, thresholds: Optional[DMFTThresholds] = None):
        self.thresholds = thresholds or get_config().clinical.dmft

    def calculate(
        self,
        decayed_teeth: Iterable[int],
        missing_teeth: Iterable[int],
        filled_teeth: Iterable[int],
    ) -> DMFTResult:
        """
        Count each tooth once.

        A tooth listed in more than one component counts as missing first,
        then decayed (a filled tooth with recurrent caries is D).
        """
        decayed, missing, filled = set(decayed_teeth), set(missing_teeth), set(filled_teeth)
        excluded = sorted((decayed | missing | filled) & THIRD_MOLARS)

        missing -= THIRD_MOLARS
        decayed = decayed - THIRD_MOLARS - missing
        filled = filled - THIRD_MOLARS - missing - decayed

        total = len(decayed) + len(missing) + len(filled)
        logger.debug("DMFT D=%d M=%d F=%d", len(decayed), len(missing), len(filled))

        return DMFTResult(
            decayed=len(decayed),
            missing=len(missing),
            filled=len(filled),
            total=total,
            severity=self.classify(total),
            excluded_teeth=excluded,
        )

    def classify(self, total: int) -> DMFTSeverity:
        t = self.thresholds
        if total <= t.very_low_max:
            return DMFTSeverity.VERY_LOW
        if total <= t.low_max:
            return DMFTSeverity.LOW
        if total <= t.moderate_max:
            return DMFTSeverity.MODERATE
        if total <= t.high_max:
            return DMFTSeverity.HIGH
        return DMFTSeverity.VERY_HIGH


def calculate_dmft(
    decayed_teeth: Iterable[int],
    missing_teeth: Iterable[int],
    filled_teeth: Iterable[int],
) -> DMFTResult:
    """Calculate DMFT with the configured severity bands."""
    return DMFTCalculator().calculate(decayed_teeth, missing_teeth, filled_teeth)
