"""Orthodontic analysis module for DentalScope."""

from dental_scope.orthodontics.geometry import (
    Landmark2D,
    angle_at_vertex,
    angle_between_lines,
    signed_distance_to_line,
)
from dental_scope.orthodontics.cephalometric import (
    NORMAL_RANGES,
    CephalometricAnalyzer,
    CephalometricAngles,
    CephalometricLandmarks,
    SkeletalClass,
    VerticalPattern,
    calculate_all_angles,
    validate_landmarks,
)
from dental_scope.orthodontics.profile import (
    ProfileAnalysis,
    ProfileAnalyzer,
    ProfileLandmarks,
    ProfileType,
    analyze_profile,
    validate_profile_landmarks,
)
from dental_scope.orthodontics.ald import (
    BOLTON_STANDARDS,
    ALDCalculation,
    ALDCalculator,
    ToothMeasurement,
    TreatmentRecommendation,
    calculate_ald,
    default_arch,
)

__all__ = [
    # Geometry
    "Landmark2D",
    "angle_at_vertex",
    "angle_between_lines",
    "signed_distance_to_line",
    # Cephalometric
    "NORMAL_RANGES",
    "CephalometricAnalyzer",
    "CephalometricAngles",
    "CephalometricLandmarks",
    "SkeletalClass",
    "VerticalPattern",
    "calculate_all_angles",
    "validate_landmarks",
    # Profile
    "ProfileAnalysis",
    "ProfileAnalyzer",
    "ProfileLandmarks",
    "ProfileType",
    "analyze_profile",
    "validate_profile_landmarks",
    # ALD
    "BOLTON_STANDARDS",
    "ALDCalculation",
    "ALDCalculator",
    "ToothMeasurement",
    "TreatmentRecommendation",
    "calculate_ald",
    "default_arch",
]
