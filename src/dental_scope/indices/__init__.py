"""Hygiene, tobacco and periodontal indices for DentalScope."""

from dental_scope.indices.ohis import (
    OHI_INDEX_TEETH,
    HygieneRating,
    OHISCalculator,
    OHISResult,
    calculate_ohis,
)
from dental_scope.indices.smoking import (
    SmokingIndexCalculator,
    SmokingIndexResult,
    SmokingRisk,
    calculate_smoking_index,
)
from dental_scope.indices.recession import (
    CairoRT,
    CairoRecessionResult,
    classify_cairo_recession,
    get_cairo_recession_details,
)
from dental_scope.indices.vmi import (
    VMI_INDEX_TEETH,
    CalculusSeverity,
    VMIResult,
    calculate_vmi,
)
from dental_scope.indices.periodontal import (
    AAPClassification,
    AAPGrade,
    AAPStage,
    PerioAlert,
    PerioChartSummary,
    PeriodontalCalculator,
    ProbingSite,
    ToothProbing,
    calculate_chart_summary,
    classify_periodontitis,
    generate_perio_alerts,
)
from dental_scope.indices.psr import PSRResult, interpret_psr
from dental_scope.indices.dmft import DMFTCalculator, DMFTResult, DMFTSeverity, calculate_dmft
from dental_scope.indices.osmf import OSMFResult, OSMFStage, OSMFStager, stage_osmf

__all__ = [
    # OHI-S
    "OHI_INDEX_TEETH",
    "HygieneRating",
    "OHISCalculator",
    "OHISResult",
    "calculate_ohis",
    # Smoking
    "SmokingIndexCalculator",
    "SmokingIndexResult",
    "SmokingRisk",
    "calculate_smoking_index",
    # Cairo
    "CairoRT",
    "CairoRecessionResult",
    "classify_cairo_recession",
    "get_cairo_recession_details",
    # VMI
    "VMI_INDEX_TEETH",
    "CalculusSeverity",
    "VMIResult",
    "calculate_vmi",
    # Periodontal
    "AAPClassification",
    "AAPGrade",
    "AAPStage",
    "PerioAlert",
    "PerioChartSummary",
    "PeriodontalCalculator",
    "ProbingSite",
    "ToothProbing",
    "calculate_chart_summary",
    "classify_periodontitis",
    "generate_perio_alerts",
    # PSR
    "PSRResult",
    "interpret_psr",
    # DMFT
    "DMFTCalculator",
    "DMFTResult",
    "DMFTSeverity",
    "calculate_dmft",
    # OSMF
    "OSMFResult",
    "OSMFStage",
    "OSMFStager",
    "stage_osmf",
]
