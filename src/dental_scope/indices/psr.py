"""
Periodontal Screening and Recording (PSR / CPITN / BPE).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from dental_scope.exceptions import InvalidInputError

SEXTANTS: tuple[str, ...] = (
    "Upper right posterior",
    "Upper anterior",
    "Upper left posterior",
    "Lower right posterior",
    "Lower anterior",
    "Lower left posterior",
)

# code -> (assessment, treatment)
PSR_CODES = {
    0: ("Healthy periodontium", "Preventive care only"),
    1: ("Bleeding on probing", "OHI + Prophylaxis"),
    2: ("Calculus/Plaque retentive factors", "Scaling + OHI"),
    3: ("Shallow pockets (3.5-5.5mm)", "Full periodontal charting + SRP"),
    4: ("Deep pockets (>5.5mm)", "Comprehensive perio exam + Complex therapy"),
}


@dataclass(frozen=True)
class PSRResult:
    sextant_codes: tuple[int, ...]
    max_code: int
    overall_assessment: str
    suggested_treatment: str

    @property
    def requires_full_charting(self) -> bool:
        return self.max_code >= 3

    def to_dict(self) -> dict:
        return {
            'sextant_codes': list(self.sextant_codes),
            'max_code': self.max_code,
            'overall_assessment': self.overall_assessment,
            'suggested_treatment': self.suggested_treatment,
            'requires_full_charting': self.requires_full_charting,
        }


def interpret_psr(codes: Sequence[int]) -> PSRResult:
    """
    Interpret six sextant codes by the worst (highest) code.

    Raises:
        InvalidInputError: if there are not six codes or a code is outside 0-4
    """
    if len(codes) != len(SEXTANTS):
        raise InvalidInputError(
            f"Expected {len(SEXTANTS)} sextant codes, got {len(codes)}",
            fields=['sextant_codes'],
        )
    unknown = [c for c in codes if c not in PSR_CODES]
    if unknown:
        raise InvalidInputError(f"Invalid PSR codes {unknown}; expected 0-4", fields=['sextant_codes'])

    max_code = max(codes)
    assessment, treatment = PSR_CODES[max_code]
    return PSRResult(
        sextant_codes=tuple(codes),
        max_code=max_code,
        overall_assessment=assessment,
        suggested_treatment=treatment,
    )
