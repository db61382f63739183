"""
Configuration management for DentalScope.

Handles environment variables, defaults, and the clinical threshold
tables every calculator classifies against.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


@dataclass
class APIConfig:
    """API server configuration."""
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 4
    debug: bool = True
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])

    @classmethod
    def from_env(cls) -> APIConfig:
        """Create configuration from environment variables."""
        cors = os.getenv("CORS_ORIGINS", "http://localhost:3000")
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            workers=int(os.getenv("API_WORKERS", "4")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            cors_origins=[o.strip() for o in cors.split(",")],
        )


@dataclass
class OHISThresholds:
    """OHI-S interpretation bands (upper bounds, inclusive)."""
    good_max: float = 1.2
    fair_max: float = 3.0

    @classmethod
    def from_env(cls) -> OHISThresholds:
        return cls(
            good_max=_env_float("OHIS_GOOD_MAX", 1.2),
            fair_max=_env_float("OHIS_FAIR_MAX", 3.0),
        )


@dataclass
class SmokingThresholds:
    """Smoking index risk tiers (cigarettes/day x years)."""
    moderate_min: float = 100
    high_min: float = 200
    very_high_above: float = 400

    @classmethod
    def from_env(cls) -> SmokingThresholds:
        return cls(
            moderate_min=_env_float("SMOKING_MODERATE_MIN", 100),
            high_min=_env_float("SMOKING_HIGH_MIN", 200),
            very_high_above=_env_float("SMOKING_VERY_HIGH_ABOVE", 400),
        )


@dataclass
class PeriodontalThresholds:
    """AAP 2017 staging/grading and charting cut points."""
    # Max interdental CAL (mm), upper bounds inclusive
    stage_i_max_cal: float = 2.0
    stage_ii_max_cal: float = 4.0
    stage_iii_max_cal: float = 5.0
    stage_iv_bone_loss_percent: float = 50.0

    # Bone loss (mm/year), lower bounds exclusive
    grade_b_rate_above: float = 0.5
    grade_c_rate_above: float = 2.0

    deep_pocket_mm: int = 5
    surgical_pocket_mm: int = 7
    active_bop_percent_above: float = 10.0

    @classmethod
    def from_env(cls) -> PeriodontalThresholds:
        return cls(
            stage_i_max_cal=_env_float("AAP_STAGE_I_MAX_CAL", 2.0),
            stage_ii_max_cal=_env_float("AAP_STAGE_II_MAX_CAL", 4.0),
            stage_iii_max_cal=_env_float("AAP_STAGE_III_MAX_CAL", 5.0),
            stage_iv_bone_loss_percent=_env_float("AAP_STAGE_IV_BONE_LOSS_PERCENT", 50.0),
            grade_b_rate_above=_env_float("AAP_GRADE_B_RATE_ABOVE", 0.5),
            grade_c_rate_above=_env_float("AAP_GRADE_C_RATE_ABOVE", 2.0),
            deep_pocket_mm=int(os.getenv("PERIO_DEEP_POCKET_MM", "5")),
            surgical_pocket_mm=int(os.getenv("PERIO_SURGICAL_POCKET_MM", "7")),
            active_bop_percent_above=_env_float("PERIO_ACTIVE_BOP_PERCENT_ABOVE", 10.0),
        )


@dataclass
class DMFTThresholds:
    """DMFT severity bands (upper bounds, inclusive)."""
    very_low_max: int = 1
    low_max: int = 4
    moderate_max: int = 8
    high_max: int = 13

    @classmethod
    def from_env(cls) -> DMFTThresholds:
        return cls(
            very_low_max=int(os.getenv("DMFT_VERY_LOW_MAX", "1")),
            low_max=int(os.getenv("DMFT_LOW_MAX", "4")),
            moderate_max=int(os.getenv("DMFT_MODERATE_MAX", "8")),
            high_max=int(os.getenv("DMFT_HIGH_MAX", "13")),
        )


@dataclass
class OSMFThresholds:
    """OSMF staging by inter-incisal mouth opening (mm, lower bounds inclusive)."""
    stage_i_min: float = 35.0
    stage_ii_min: float = 25.0
    stage_iii_min: float = 15.0
    stage_iva_min: float = 5.0

    @classmethod
    def from_env(cls) -> OSMFThresholds:
        return cls(
            stage_i_min=_env_float("OSMF_STAGE_I_MIN", 35.0),
            stage_ii_min=_env_float("OSMF_STAGE_II_MIN", 25.0),
            stage_iii_min=_env_float("OSMF_STAGE_III_MIN", 15.0),
            stage_iva_min=_env_float("OSMF_STAGE_IVA_MIN", 5.0),
        )


@dataclass
class SkeletalNorms:
    """Cephalometric classification bands in degrees (inclusive)."""
    # ANB
    class_i_min: float = 2.0
    class_i_max: float = 4.0

    # FMA
    fma_normal_min: float = 20.0
    fma_normal_max: float = 30.0

    @classmethod
    def from_env(cls) -> SkeletalNorms:
        return cls(
            class_i_min=_env_float("ANB_CLASS_I_MIN", 2.0),
            class_i_max=_env_float("ANB_CLASS_I_MAX", 4.0),
            fma_normal_min=_env_float("FMA_NORMAL_MIN", 20.0),
            fma_normal_max=_env_float("FMA_NORMAL_MAX", 30.0),
        )


@dataclass
class ProfileNorms:
    """Nasolabial angle cut points for profile typing (degrees)."""
    convex_below: float = 90.0
    concave_above: float = 110.0

    @classmethod
    def from_env(cls) -> ProfileNorms:
        return cls(
            convex_below=_env_float("NASOLABIAL_CONVEX_BELOW", 90.0),
            concave_above=_env_float("NASOLABIAL_CONCAVE_ABOVE", 110.0),
        )


@dataclass
class ALDThresholds:
    """Arch-length discrepancy treatment cut points (mm, negative = crowding)."""
    extraction_below: float = -4.0
    expansion_below: float = -2.0
    ipr_below: float = 0.0

    @classmethod
    def from_env(cls) -> ALDThresholds:
        return cls(
            extraction_below=_env_float("ALD_EXTRACTION_BELOW", -4.0),
            expansion_below=_env_float("ALD_EXPANSION_BELOW", -2.0),
            ipr_below=_env_float("ALD_IPR_BELOW", 0.0),
        )


@dataclass
class WARThresholds:
    """WAR score difficulty cut points."""
    difficult_min: int = 7
    moderate_min: int = 4

    @classmethod
    def from_env(cls) -> WARThresholds:
        return cls(
            difficult_min=int(os.getenv("WAR_DIFFICULT_MIN", "7")),
            moderate_min=int(os.getenv("WAR_MODERATE_MIN", "4")),
        )


@dataclass
class DiagnosisWeights:
    """Provisional diagnosis confidence weighting."""
    symptoms: float = 0.35
    findings: float = 0.50
    vital_signs: float = 0.15
    max_confidence: float = 0.98
    min_confidence: float = 0.0
    limit: Optional[int] = None

    @classmethod
    def from_env(cls) -> DiagnosisWeights:
        limit = os.getenv("DIAGNOSIS_LIMIT")
        return cls(
            symptoms=_env_float("DIAGNOSIS_WEIGHT_SYMPTOMS", 0.35),
            findings=_env_float("DIAGNOSIS_WEIGHT_FINDINGS", 0.50),
            vital_signs=_env_float("DIAGNOSIS_WEIGHT_VITAL_SIGNS", 0.15),
            max_confidence=_env_float("DIAGNOSIS_MAX_CONFIDENCE", 0.98),
            min_confidence=_env_float("DIAGNOSIS_MIN_CONFIDENCE", 0.0),
            limit=int(limit) if limit else None,
        )


@dataclass
class ClinicalThresholds:
    """All calculator threshold tables."""
    ohis: OHISThresholds = field(default_factory=OHISThresholds)
    smoking: SmokingThresholds = field(default_factory=SmokingThresholds)
    periodontal: PeriodontalThresholds = field(default_factory=PeriodontalThresholds)
    dmft: DMFTThresholds = field(default_factory=DMFTThresholds)
    osmf: OSMFThresholds = field(default_factory=OSMFThresholds)
    skeletal: SkeletalNorms = field(default_factory=SkeletalNorms)
    profile: ProfileNorms = field(default_factory=ProfileNorms)
    ald: ALDThresholds = field(default_factory=ALDThresholds)
    war: WARThresholds = field(default_factory=WARThresholds)
    diagnosis: DiagnosisWeights = field(default_factory=DiagnosisWeights)

    @classmethod
    def from_env(cls) -> ClinicalThresholds:
        """Create configuration from environment variables."""
        return cls(
            ohis=OHISThresholds.from_env(),
            smoking=SmokingThresholds.from_env(),
            periodontal=PeriodontalThresholds.from_env(),
            dmft=DMFTThresholds.from_env(),
            osmf=OSMFThresholds.from_env(),
            skeletal=SkeletalNorms.from_env(),
            profile=ProfileNorms.from_env(),
            ald=ALDThresholds.from_env(),
            war=WARThresholds.from_env(),
            diagnosis=DiagnosisWeights.from_env(),
        )


@dataclass
class Config:
    """Main configuration container."""
    api: APIConfig = field(default_factory=APIConfig)
    clinical: ClinicalThresholds = field(default_factory=ClinicalThresholds)

    # Logging
    log_level: str = "INFO"
    log_file_path: Optional[Path] = None

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> Config:
        """
        Create configuration from environment variables.

        Args:
            env_file: Optional path to .env file

        Returns:
            Config instance with all settings
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        log_path = os.getenv("LOG_FILE_PATH")

        return cls(
            api=APIConfig.from_env(),
            clinical=ClinicalThresholds.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file_path=Path(log_path) if log_path else None,
        )


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Set the global configuration instance (None forces a reload)."""
    global _config
    _config = config
