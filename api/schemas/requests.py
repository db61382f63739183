"""Request schemas for API."""

from pydantic import BaseModel, Field
from typing import Optional

from dental_scope.surgery.war import ArchClass, RadioDepth, WinterClass


class Point(BaseModel):
    """Landmark in image-pixel space."""
    x: float
    y: float


class OHISRequest(BaseModel):
    """OHI-S scores per index tooth."""
    debris_scores: dict[int, int] = Field(default_factory=dict, description="Index tooth -> debris score 0-3")
    calculus_scores: dict[int, int] = Field(default_factory=dict, description="Index tooth -> calculus score 0-3")


class SmokingIndexRequest(BaseModel):
    cigarettes_per_day: float = Field(..., description="Cigarettes smoked per day")
    years_of_smoking: float = Field(..., description="Years of smoking")


class CairoRequest(BaseModel):
    tooth_number: int = Field(..., description="FDI tooth number")
    has_interdental_loss: bool = Field(..., description="Interproximal attachment loss present")
    extends_to_mgj: bool = Field(default=False, description="Recession extends to/beyond the MGJ")


class VMIRequest(BaseModel):
    measurements: dict[int, float] = Field(..., description="Lower incisor -> lingual calculus (mm)")


class CephalometricRequest(BaseModel):
    landmarks: dict[str, Point] = Field(..., description="S, N, A, B, Or, Po, Go, Gn")


class ProfileRequest(BaseModel):
    landmarks: dict[str, Point] = Field(
        ..., description="nose_tip, pronasale, upper_lip, lower_lip, soft_tissue_pogonion",
    )


class ToothWidth(BaseModel):
    tooth_number: int
    mesiodistal_width: float = Field(..., description="Width in mm")


class ALDRequest(BaseModel):
    """Omitted arches are seeded from the Bolton standards."""
    upper_teeth: Optional[list[ToothWidth]] = None
    lower_teeth: Optional[list[ToothWidth]] = None
    upper_arch_available: float = Field(..., description="Upper arch perimeter (mm)")
    lower_arch_available: float = Field(..., description="Lower arch perimeter (mm)")


class WARRequest(BaseModel):
    tooth_number: Optional[int] = Field(default=None, description="Impacted tooth (18, 28, 38, 48)")
    winter_class: WinterClass
    arch_class: ArchClass
    radio_depth: RadioDepth


class DiagnosisRequest(BaseModel):
    symptoms: list[str] = Field(default_factory=list)
    clinical_findings: list[str] = Field(default_factory=list)
    vital_signs: Optional[list[str]] = None


class AAPRequest(BaseModel):
    max_cal: float = Field(..., description="Worst interdental CAL (mm)")
    bone_loss_percent: Optional[float] = Field(default=None, description="Radiographic bone loss (% root length)")
    bone_loss_per_year: Optional[float] = Field(default=None, description="Bone loss progression (mm/year)")
    diabetes: bool = False
    smoker: bool = False


class ProbingSiteModel(BaseModel):
    depth: int = Field(..., ge=0, description="Probing depth (mm), 0 = not recorded")
    bop: bool = False
    cal: Optional[float] = None
    recession: Optional[float] = None


class ToothProbingModel(BaseModel):
    tooth_number: int
    sites: list[ProbingSiteModel] = Field(..., description="MB, B, DB, ML, L, DL")
    mobility: int = Field(default=0, ge=0, le=3)
    furcation: int = Field(default=0, ge=0, le=3)
    plaque: bool = False
    calculus: bool = False
    suppuration: bool = False


class PerioChartRequest(BaseModel):
    teeth: list[ToothProbingModel]


class PSRRequest(BaseModel):
    sextant_codes: list[int] = Field(..., description="Six sextant codes 0-4, UR/UA/UL/LR/LA/LL")


class DMFTRequest(BaseModel):
    decayed_teeth: list[int] = Field(default_factory=list)
    missing_teeth: list[int] = Field(default_factory=list)
    filled_teeth: list[int] = Field(default_factory=list)


class OSMFRequest(BaseModel):
    mouth_opening_mm: float = Field(..., description="Inter-incisal mouth opening (mm)")
