"""
Diagnostic knowledge base for oral medicine.

Each rule lists the symptom, clinical-finding and vital-sign keys that
support a diagnosis, plus its ICD-10 code and a base differential score.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DiagnosticRule:
    diagnosis: str
    icd10_code: str
    category: str
    symptoms: frozenset[str]
    clinical_findings: frozenset[str]
    vital_signs: frozenset[str] = frozenset()
    differential_score: float = 1.0  # base confidence multiplier

    def to_dict(self) -> dict:
        return {
            'diagnosis': self.diagnosis,
            'icd10_code': self.icd10_code,
            'category': self.category,
            'symptoms': sorted(self.symptoms),
            'clinical_findings': sorted(self.clinical_findings),
            'vital_signs': sorted(self.vital_signs),
            'differential_score': self.differential_score,
        }


def _rule(diagnosis, icd10_code, category, symptoms, findings, differential, vital_signs=()):
    return DiagnosticRule(
        diagnosis=diagnosis,
        icd10_code=icd10_code,
        category=category,
        symptoms=frozenset(symptoms),
        clinical_findings=frozenset(findings),
        vital_signs=frozenset(vital_signs),
        differential_score=differential,
    )


DIAGNOSTIC_KNOWLEDGE_BASE: tuple[DiagnosticRule, ...] = (
    # Pulpal
    _rule("Reversible Pulpitis", "K04.01", "Pulpal",
          ['sharp_pain', 'localized_pain', 'thermal_sensitivity', 'pain_with_cold', 'pain_with_sweet'],
          ['pain_subsides_instantly', 'stimulus_responsive', 'no_spontaneous_pain'], 0.85),
    _rule("Irreversible Pulpitis", "K04.02", "Pulpal",
          ['spontaneous_pain', 'throbbing_pain', 'radiating_pain', 'nocturnal_pain', 'lingering_pain'],
          ['pain_worse_lying_down', 'lingering_cold_pain', 'severe_pain'], 0.90),
    _rule("Pulp Necrosis", "K04.1", "Pulpal",
          ['no_pain', 'history_severe_pain', 'asymptomatic'],
          ['no_cold_response', 'negative_ept', 'discoloration'], 0.95),

    # Periapical
    _rule("Acute Apical Periodontitis", "K04.4", "Periapical",
          ['severe_pain_biting', 'pain_on_touch', 'high_tooth_sensation'],
          ['tender_to_percussion', 'no_swelling', 'localized_pain'], 0.88),
    _rule("Periapical Abscess (Acute)", "K04.7", "Periapical",
          ['severe_throbbing', 'swelling', 'pus_discharge', 'fever'],
          ['fluctuant_swelling', 'tender_to_percussion'], 0.92,
          vital_signs=['elevated_temperature']),
    _rule("Chronic Apical Abscess", "K04.6", "Periapical",
          ['painless_pimple', 'draining_sinus', 'mild_discomfort'],
          ['sinus_tract', 'periapical_radiolucency', 'no_acute_symptoms'], 0.87),

    # Periodontal
    _rule("Pericoronitis", "K05.22", "Periodontal",
          ['pain_wisdom_tooth', 'difficulty_opening_mouth', 'swelling_gums'],
          ['inflamed_operculum', 'partially_erupted_tooth', 'trismus'], 0.90),
    _rule("Alveolar Osteitis (Dry Socket)", "K10.3", "Post-Surgical",
          ['intense_boring_pain', 'pain_3_days_post_extraction', 'severe_pain'],
          ['empty_socket', 'exposed_bone', 'foul_odor', 'no_clot'], 0.93),
    _rule("Gingivitis", "K05.10", "Periodontal",
          ['bleeding_gums', 'red_gums', 'swollen_gums'],
          ['inflammation', 'no_pocket_depth', 'no_bone_loss'], 0.80),
    _rule("Chronic Periodontitis", "K05.30", "Periodontal",
          ['bleeding_gums', 'loose_teeth', 'bad_breath'],
          ['pocket_depth', 'bone_loss', 'tooth_mobility', 'calculus'], 0.85),

    # Hard tissue
    _rule("Dental Caries", "K02.9", "Hard Tissue",
          ['sensitivity', 'pain_with_sweet', 'pain_with_cold'],
          ['cavity', 'decay', 'brown_lesion', 'softened_dentin'], 0.82),
    _rule("Dentin Hypersensitivity", "K03.8", "Hard Tissue",
          ['sharp_pain', 'thermal_sensitivity', 'pain_with_cold'],
          ['exposed_dentin', 'gingival_recession', 'no_cavity'], 0.78),
)


def search_by_symptom(term: str) -> list[DiagnosticRule]:
    """Rules whose symptom or finding keys contain `term` (case-insensitive)."""
    needle = term.strip().lower()
    if not needle:
        return []
    return [
        rule for rule in DIAGNOSTIC_KNOWLEDGE_BASE
        if any(needle in key for key in rule.symptoms | rule.clinical_findings)
    ]


def get_by_icd10(code: str) -> Optional[DiagnosticRule]:
    """First rule carrying the given ICD-10 code, if any."""
    code = code.strip().upper()
    return next((rule for rule in DIAGNOSTIC_KNOWLEDGE_BASE if rule.icd10_code == code), None)
