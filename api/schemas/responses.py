"""Response schemas for API."""

from pydantic import BaseModel, Field
from typing import Optional


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    calculators: list[str] = Field(default=[], description="Available calculators")


class OHISResponse(BaseModel):
    debris_scores: dict[int, int]
    calculus_scores: dict[int, int]
    debris_index: float = Field(..., description="DI-S (0-3)")
    calculus_index: float = Field(..., description="CI-S (0-3)")
    total: float = Field(..., description="OHI-S (0-6)")
    interpretation: str
    recommendation: str
    ignored_teeth: list[int] = []


class SmokingIndexResponse(BaseModel):
    cigarettes_per_day: float
    years_of_smoking: float
    smoking_index: float
    risk_level: str
    perio_risk: str
    oral_cancer_risk: str
    requires_immediate_action: bool
    mandatory_actions: list[str] = []


class CairoResponse(BaseModel):
    tooth_number: int
    classification: str
    description: str
    prognosis: str
    suggested_treatment: str


class VMIResponse(BaseModel):
    measurements: dict[int, float]
    total_score: float
    severity: str
    recommendation: str


class CephalometricResponse(BaseModel):
    SNA: float
    SNB: float
    ANB: float
    FMA: float
    skeletal_class: str
    vertical_pattern: str
    range_flags: dict[str, str]


class ProfileResponse(BaseModel):
    nasolabial_angle: float
    e_line_upper_lip: float = Field(..., description="Positive = protrusive")
    e_line_lower_lip: float
    profile_type: str
    range_flags: dict[str, str]


class ALDResponse(BaseModel):
    upper_arch_required: float
    upper_arch_available: float
    lower_arch_required: float
    lower_arch_available: float
    upper_discrepancy: float = Field(..., description="mm, negative = crowding")
    lower_discrepancy: float
    upper_description: str
    lower_description: str
    recommendation: str
    notes: str


class WARResponse(BaseModel):
    tooth_number: Optional[int] = None
    score: int
    difficulty: str
    surgical_time: str
    complications: str
    winter_class: str
    arch_class: str
    radio_depth: str


class DiagnosisCandidateResponse(BaseModel):
    diagnosis: str
    icd_code: str
    category: str
    confidence: float
    matched_symptoms: int
    matched_findings: int
    matched_vital_signs: int = 0


class DiagnosticRuleResponse(BaseModel):
    diagnosis: str
    icd10_code: str
    category: str
    symptoms: list[str]
    clinical_findings: list[str]
    vital_signs: list[str] = []
    differential_score: float


class AAPResponse(BaseModel):
    stage: str
    grade: str
    label: str
    stage_description: str
    grade_description: str
    max_cal: float
    bone_loss_percent: Optional[float] = None
    bone_loss_per_year: Optional[float] = None
    risk_factors: list[str] = []


class PerioChartSummaryResponse(BaseModel):
    total_sites: int
    sites_pd4_plus: int
    sites_pd5_plus: int
    bop_count: int
    bop_percentage: int
    is_active: bool = Field(..., description="BOP above the activity threshold")
    max_probing_depth: int


class PerioAlertResponse(BaseModel):
    type: str
    tooth_number: int
    message: str
    suggested_action: str
    severity: str


class PerioChartResponse(BaseModel):
    summary: PerioChartSummaryResponse
    alerts: list[PerioAlertResponse] = []


class PSRResponse(BaseModel):
    sextant_codes: list[int]
    max_code: int
    overall_assessment: str
    suggested_treatment: str
    requires_full_charting: bool


class DMFTResponse(BaseModel):
    decayed: int
    missing: int
    filled: int
    total: int
    severity: str
    excluded_teeth: list[int] = []


class OSMFResponse(BaseModel):
    mouth_opening_mm: float
    stage: str
    description: str
    mouth_opening_range: str
    suggested_management: str
    malignancy_risk: str
