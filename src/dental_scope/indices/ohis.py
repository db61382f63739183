"""
Simplified Oral Hygiene Index (OHI-S, Greene & Vermillion).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from dental_scope.config import OHISThresholds, get_config

logger = logging.getLogger(__name__)

# Buccal: 16, 11, 26, 31; Lingual: 36, 46
OHI_INDEX_TEETH: tuple[int, ...] = (16, 11, 26, 36, 31, 46)

SCORE_DESCRIPTIONS = {
    0: {'debris': 'No debris/stain', 'calculus': 'No calculus'},
    1: {'debris': '<1/3 covered', 'calculus': 'Supragingival <1/3'},
    2: {'debris': '1/3 to 2/3 covered', 'calculus': 'Supragingival 1/3-2/3'},
    3: {'debris': '>2/3 covered', 'calculus': 'Band of calculus >1mm'},
}


class HygieneRating(str, Enum):
    """OHI-S interpretation."""
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


RECOMMENDATIONS = {
    HygieneRating.GOOD: "6-monthly recall, continue current hygiene routine",
    HygieneRating.FAIR: "Scaling, OHI reinforcement, 3-month recall",
    HygieneRating.POOR: "Urgent scaling and root planing referral, intensive OHI, monthly follow-up",
}


@dataclass(frozen=True)
class OHISResult:
    """OHI-S calculation result."""
    debris_scores: dict[int, int]
    calculus_scores: dict[int, int]
    debris_index: float
    calculus_index: float
    total: float
    interpretation: HygieneRating
    recommendation: str = ""
    ignored_teeth: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'debris_scores': dict(self.debris_scores),
            'calculus_scores': dict(self.calculus_scores),
            'debris_index': self.debris_index,
            'calculus_index': self.calculus_index,
            'total': self.total,
            'interpretation': self.interpretation.value,
            'recommendation': self.recommendation,
            'ignored_teeth': list(self.ignored_teeth),
        }


class OHISCalculator:
    """OHI-S calculator over the six index teeth."""

    def __init__(self, thresholds: Optional[OHISThresholds] = None):
        self.thresholds = thresholds or get_config().clinical.ohis

    def calculate(
        self,
        debris_scores: Mapping[int, int],
        calculus_scores: Mapping[int, int],
    ) -> OHISResult:
        """
        Calculate DI-S, CI-S and the OHI-S total.

        Args:
            debris_scores: Index tooth -> debris score (0-3)
            calculus_scores: Index tooth -> calculus score (0-3)

        Returns:
            OHISResult with interpretation and recommendation
        """
        debris = self._complete(debris_scores)
        calculus = self._complete(calculus_scores)
        ignored = sorted(
            {t for t in (*debris_scores, *calculus_scores) if t not in OHI_INDEX_TEETH}
        )
        if ignored:
            logger.debug("Ignoring non-index teeth %s", ignored)

        debris_index = round(sum(debris.values()) / len(OHI_INDEX_TEETH), 1)
        calculus_index = round(sum(calculus.values()) / len(OHI_INDEX_TEETH), 1)
        total = round(debris_index + calculus_index, 1)

        rating = self.interpret(total)
        return OHISResult(
            debris_scores=debris,
            calculus_scores=calculus,
            debris_index=debris_index,
            calculus_index=calculus_index,
            total=total,
            interpretation=rating,
            recommendation=RECOMMENDATIONS[rating],
            ignored_teeth=ignored,
        )

    def interpret(self, total: float) -> HygieneRating:
        if total <= self.thresholds.good_max:
            return HygieneRating.GOOD
        if total <= self.thresholds.fair_max:
            return HygieneRating.FAIR
        return HygieneRating.POOR

    @staticmethod
    def _complete(scores: Mapping[int, int]) -> dict[int, int]:
        # Missing index teeth score 0
        return {tooth: scores.get(tooth, 0) for tooth in OHI_INDEX_TEETH}


def calculate_ohis(
    debris_scores: Mapping[int, int],
    calculus_scores: Mapping[int, int],
) -> OHISResult:
    """Calculate OHI-S with the configured interpretation bands."""
    return OHISCalculator().calculate(debris_scores, calculus_scores)
