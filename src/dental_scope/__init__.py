"""
DentalScope: Clinical Scoring Engine

Stateless calculators that turn dental clinical measurements into
classifications and treatment guidance: hygiene and tobacco indices,
recession classification, periodontal staging and charting, PSR, DMFT and
OSMF staging, cephalometric and profile analysis, arch-length
discrepancy, surgical difficulty and provisional diagnosis.
"""

__version__ = "0.1.0"
__author__ = "DentalScope Team"

from dental_scope.config import Config, get_config
from dental_scope.exceptions import InvalidInputError
from dental_scope.indices import (
    ProbingSite,
    ToothProbing,
    calculate_chart_summary,
    calculate_dmft,
    calculate_ohis,
    calculate_smoking_index,
    calculate_vmi,
    classify_cairo_recession,
    classify_periodontitis,
    generate_perio_alerts,
    get_cairo_recession_details,
    interpret_psr,
    stage_osmf,
)
from dental_scope.orthodontics import (
    CephalometricLandmarks,
    Landmark2D,
    ProfileLandmarks,
    ToothMeasurement,
    analyze_profile,
    calculate_ald,
    calculate_all_angles,
    default_arch,
    validate_landmarks,
    validate_profile_landmarks,
)
from dental_scope.surgery import calculate_war_score
from dental_scope.diagnosis import rank_diagnoses


def get_client():
    """Get the HTTP SDK client class."""
    from dental_scope.sdk.client import DentalScopeClient
    return DentalScopeClient


__all__ = [
    "Config",
    "get_config",
    "InvalidInputError",
    "calculate_ohis",
    "calculate_smoking_index",
    "calculate_vmi",
    "classify_cairo_recession",
    "get_cairo_recession_details",
    "ProbingSite",
    "ToothProbing",
    "calculate_chart_summary",
    "calculate_dmft",
    "classify_periodontitis",
    "generate_perio_alerts",
    "interpret_psr",
    "stage_osmf",
    "CephalometricLandmarks",
    "Landmark2D",
    "ProfileLandmarks",
    "ToothMeasurement",
    "analyze_profile",
    "calculate_ald",
    "calculate_all_angles",
    "default_arch",
    "validate_landmarks",
    "validate_profile_landmarks",
    "calculate_war_score",
    "rank_diagnoses",
    "get_client",
    "__version__",
]
