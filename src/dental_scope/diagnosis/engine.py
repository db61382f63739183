"""
Provisional diagnosis engine for DentalScope.

Ranks knowledge-base diagnoses by weighted overlap between the
presenting symptoms, clinical findings and vital signs and each rule's
expected keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from dental_scope.config import DiagnosisWeights, get_config
from dental_scope.diagnosis.knowledge_base import DIAGNOSTIC_KNOWLEDGE_BASE, DiagnosticRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagnosisCandidate:
    """Ranked provisional diagnosis."""
    diagnosis: str
    icd_code: str
    category: str
    confidence: float
    matched_symptoms: int
    matched_findings: int
    matched_vital_signs: int = 0

    def to_dict(self) -> dict:
        return {
            'diagnosis': self.diagnosis,
            'icd_code': self.icd_code,
            'category': self.category,
            'confidence': self.confidence,
            'matched_symptoms': self.matched_symptoms,
            'matched_findings': self.matched_findings,
            'matched_vital_signs': self.matched_vital_signs,
        }


def _normalise(keys: Optional[Iterable[str]]) -> frozenset[str]:
    return frozenset(k.strip().lower() for k in keys or () if k and k.strip())


def _ratio(matched: int, expected: int) -> float:
    return matched / expected if expected else 0.0


class ProvisionalDiagnosisEngine:
    """
    Weighted-overlap diagnosis ranker.

    Clinical findings weigh more than reported symptoms; vital signs add
    a smaller contribution and only count for rules that define them,
    when the presentation includes any.

    Attributes:
        weights: Confidence weighting and output limits
        knowledge_base: Ordered diagnostic rules
    """

    def __init__(
        self,
        weights: Optional[DiagnosisWeights] = None,
        knowledge_base: Sequence[DiagnosticRule] = DIAGNOSTIC_KNOWLEDGE_BASE,
    ):
        self.weights = weights or get_config().clinical.diagnosis
        self.knowledge_base = tuple(knowledge_base)

    def rank(
        self,
        symptoms: Iterable[str],
        clinical_findings: Iterable[str],
        vital_signs: Optional[Iterable[str]] = None,
    ) -> list[DiagnosisCandidate]:
        """
        Rank candidate diagnoses.

        Args:
            symptoms: Reported symptom keys
            clinical_findings: Examination finding keys
            vital_signs: Optional vital-sign keys

        Returns:
            Candidates with at least one matched symptom or finding, by
            confidence, then matched findings, then matched symptoms,
            then knowledge-base order
        """
        symptom_set = _normalise(symptoms)
        finding_set = _normalise(clinical_findings)
        vital_set = _normalise(vital_signs)

        scored = []
        for order, rule in enumerate(self.knowledge_base):
            candidate = self._score(rule, symptom_set, finding_set, vital_set)
            if candidate is None:
                continue
            if candidate.confidence < self.weights.min_confidence:
                continue
            scored.append((order, candidate))

        scored.sort(key=lambda item: (
            -item[1].confidence,
            -item[1].matched_findings,
            -item[1].matched_symptoms,
            item[0],
        ))
        ranked = [candidate for _, candidate in scored]
        if self.weights.limit is not None:
            ranked = ranked[:self.weights.limit]

        logger.debug("Ranked %d of %d diagnoses", len(ranked), len(self.knowledge_base))
        return ranked

    def _score(
        self,
        rule: DiagnosticRule,
        symptoms: frozenset[str],
        findings: frozenset[str],
        vital_signs: frozenset[str],
    ) -> Optional[DiagnosisCandidate]:
        matched_symptoms = len(symptoms & rule.symptoms)
        matched_findings = len(findings & rule.clinical_findings)
        if matched_symptoms == 0 and matched_findings == 0:
            return None
        matched_vitals = len(vital_signs & rule.vital_signs)

        w = self.weights
        weighted = (
            w.symptoms * _ratio(matched_symptoms, len(rule.symptoms))
            + w.findings * _ratio(matched_findings, len(rule.clinical_findings))
        )
        total_weight = w.symptoms + w.findings
        # Vitals join the average only when both the rule and the caller have them
        if rule.vital_signs and vital_signs:
            weighted += w.vital_signs * _ratio(matched_vitals, len(rule.vital_signs))
            total_weight += w.vital_signs

        overlap = weighted / total_weight if total_weight else 0.0
        confidence = min(max(overlap * rule.differential_score, 0.0), w.max_confidence, 1.0)

        return DiagnosisCandidate(
            diagnosis=rule.diagnosis,
            icd_code=rule.icd10_code,
            category=rule.category,
            confidence=round(confidence, 4),
            matched_symptoms=matched_symptoms,
            matched_findings=matched_findings,
            matched_vital_signs=matched_vitals,
        )


def rank_diagnoses(
    symptoms: Iterable[str],
    clinical_findings: Iterable[str],
    vital_signs: Optional[Iterable[str]] = None,
) -> list[DiagnosisCandidate]:
    """Rank provisional diagnoses with the configured weights."""
    return ProvisionalDiagnosisEngine().rank(symptoms, clinical_findings, vital_signs)
