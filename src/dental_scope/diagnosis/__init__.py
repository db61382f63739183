"""Provisional diagnosis module for DentalScope."""

from dental_scope.diagnosis.knowledge_base import (
    DIAGNOSTIC_KNOWLEDGE_BASE,
    DiagnosticRule,
    get_by_icd10,
    search_by_symptom,
)
from dental_scope.diagnosis.engine import (
    DiagnosisCandidate,
    ProvisionalDiagnosisEngine,
    rank_diagnoses,
)

__all__ = [
    "DIAGNOSTIC_KNOWLEDGE_BASE",
    "DiagnosticRule",
    "get_by_icd10",
    "search_by_symptom",
    "DiagnosisCandidate",
    "ProvisionalDiagnosisEngine",
    "rank_diagnoses",
]
