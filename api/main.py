"""
FastAPI application for DentalScope.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dental_scope import __version__
from dental_scope.config import Config, get_config
from dental_scope.exceptions import InvalidInputError
from dental_scope.indices import (
    DMFTCalculator,
    OHISCalculator,
    OSMFStager,
    PeriodontalCalculator,
    ProbingSite,
    SmokingIndexCalculator,
    ToothProbing,
    calculate_vmi,
    classify_cairo_recession,
    get_cairo_recession_details,
    interpret_psr,
)
from dental_scope.orthodontics import (
    BOLTON_STANDARDS,
    ALDCalculator,
    CephalometricAnalyzer,
    CephalometricLandmarks,
    ProfileAnalyzer,
    ProfileLandmarks,
    ToothMeasurement,
    default_arch,
)
from dental_scope.surgery import WARScorer
from dental_scope.diagnosis import ProvisionalDiagnosisEngine, get_by_icd10, search_by_symptom

from api.schemas.requests import (
    AAPRequest,
    ALDRequest,
    CairoRequest,
    CephalometricRequest,
    DiagnosisRequest,
    DMFTRequest,
    OHISRequest,
    OSMFRequest,
    PerioChartRequest,
    ProfileRequest,
    PSRRequest,
    SmokingIndexRequest,
    VMIRequest,
    WARRequest,
)
from api.schemas.responses import (
    AAPResponse,
    ALDResponse,
    CairoResponse,
    CephalometricResponse,
    DiagnosisCandidateResponse,
    DiagnosticRuleResponse,
    DMFTResponse,
    HealthResponse,
    OHISResponse,
    OSMFResponse,
    PerioChartResponse,
    ProfileResponse,
    PSRResponse,
    SmokingIndexResponse,
    VMIResponse,
    WARResponse,
)

logger = logging.getLogger(__name__)

CALCULATORS = [
    "ohis", "smoking", "cairo", "vmi",
    "aap", "perio_chart", "psr", "dmft", "osmf",
    "cephalometric", "profile", "ald",
    "war", "diagnosis",
]

# Calculator instances, built once from configuration
ohis_calculator: Optional[OHISCalculator] = None
smoking_calculator: Optional[SmokingIndexCalculator] = None
periodontal_calculator: Optional[PeriodontalCalculator] = None
dmft_calculator: Optional[DMFTCalculator] = None
osmf_stager: Optional[OSMFStager] = None
cephalometric_analyzer: Optional[CephalometricAnalyzer] = None
profile_analyzer: Optional[ProfileAnalyzer] = None
ald_calculator: Optional[ALDCalculator] = None
war_scorer: Optional[WARScorer] = None
diagnosis_engine: Optional[ProvisionalDiagnosisEngine] = None


def configure_logging(config: Config) -> None:
    """Attach console (and optional file) handlers at the configured level."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file_path:
        config.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file_path))
    logging.basicConfig(
        level=config.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    global ohis_calculator, smoking_calculator, cephalometric_analyzer
    global periodontal_calculator, dmft_calculator, osmf_stager
    global profile_analyzer, ald_calculator, war_scorer, diagnosis_engine

    config = get_config()
    configure_logging(config)

    clinical = config.clinical
    ohis_calculator = OHISCalculator(clinical.ohis)
    smoking_calculator = SmokingIndexCalculator(clinical.smoking)
    periodontal_calculator = PeriodontalCalculator(clinical.periodontal)
    dmft_calculator = DMFTCalculator(clinical.dmft)
    osmf_stager = OSMFStager(clinical.osmf)
    cephalometric_analyzer = CephalometricAnalyzer(clinical.skeletal)
    profile_analyzer = ProfileAnalyzer(clinical.profile)
    ald_calculator = ALDCalculator(clinical.ald)
    war_scorer = WARScorer(clinical.war)
    diagnosis_engine = ProvisionalDiagnosisEngine(clinical.diagnosis)

    logger.info("Scoring engine ready (%d calculators)", len(CALCULATORS))

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="DentalScope API",
    description="Clinical scoring engine for dental practice management",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
config = get_config()
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc), "fields": exc.fields})


def _require(calculator):
    if calculator is None:
        raise HTTPException(status_code=503, detail="Scoring engine not initialised")
    return calculator


@app.get("/", response_model=HealthResponse)
async def root():
    """Root endpoint with API info."""
    return HealthResponse(status="healthy", version=__version__, calculators=CALCULATORS)


@app.get("/api/v1/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__, calculators=CALCULATORS)


@app.post("/api/v1/indices/ohis", response_model=OHISResponse)
async def score_ohis(request: OHISRequest):
    """Simplified Oral Hygiene Index."""
    result = _require(ohis_calculator).calculate(request.debris_scores, request.calculus_scores)
    return result.to_dict()


@app.post("/api/v1/indices/smoking", response_model=SmokingIndexResponse)
async def score_smoking(request: SmokingIndexRequest):
    """Smoking index risk tier."""
    result = _require(smoking_calculator).calculate(request.cigarettes_per_day, request.years_of_smoking)
    return result.to_dict()


@app.post("/api/v1/indices/cairo", response_model=CairoResponse)
async def classify_recession(request: CairoRequest):
    """Cairo recession classification."""
    rt = classify_cairo_recession(request.has_interdental_loss, request.extends_to_mgj)
    return get_cairo_recession_details(request.tooth_number, rt).to_dict()


@app.post("/api/v1/indices/vmi", response_model=VMIResponse)
async def score_vmi(request: VMIRequest):
    """Volpe-Manhold calculus index."""
    return calculate_vmi(request.measurements).to_dict()


@app.post("/api/v1/indices/aap", response_model=AAPResponse)
async def classify_aap(request: AAPRequest):
    """AAP 2017 periodontitis stage and grade."""
    result = _require(periodontal_calculator).classify(
        request.max_cal,
        bone_loss_percent=request.bone_loss_percent,
        bone_loss_per_year=request.bone_loss_per_year,
        diabetes=request.diabetes,
        smoker=request.smoker,
    )
    return result.to_dict()


@app.post("/api/v1/indices/perio-chart", response_model=PerioChartResponse)
async def analyze_perio_chart(request: PerioChartRequest):
    """Probing chart summary and tooth-level alerts."""
    calculator = _require(periodontal_calculator)
    teeth = [
        ToothProbing(
            tooth_number=tooth.tooth_number,
            sites=tuple(ProbingSite(**site.model_dump()) for site in tooth.sites),
            mobility=tooth.mobility,
            furcation=tooth.furcation,
            plaque=tooth.plaque,
            calculus=tooth.calculus,
            suppuration=tooth.suppuration,
        )
        for tooth in request.teeth
    ]
    return {
        "summary": calculator.summarize(teeth).to_dict(),
        "alerts": [alert.to_dict() for alert in calculator.alerts(teeth)],
    }


@app.post("/api/v1/indices/psr", response_model=PSRResponse)
async def score_psr(request: PSRRequest):
    """PSR/CPITN sextant screening."""
    return interpret_psr(request.sextant_codes).to_dict()


@app.post("/api/v1/indices/dmft", response_model=DMFTResponse)
async def score_dmft(request: DMFTRequest):
    """DMFT caries experience."""
    result = _require(dmft_calculator).calculate(
        request.decayed_teeth, request.missing_teeth, request.filled_teeth,
    )
    return result.to_dict()


@app.post("/api/v1/indices/osmf", response_model=OSMFResponse)
async def score_osmf(request: OSMFRequest):
    """OSMF staging from mouth opening."""
    return _require(osmf_stager).stage(request.mouth_opening_mm).to_dict()


@app.post("/api/v1/ortho/cephalometric", response_model=CephalometricResponse)
async def analyze_cephalometric(request: CephalometricRequest):
    """Cephalometric angle analysis."""
    landmarks = CephalometricLandmarks.from_mapping(
        {name: point.model_dump() for name, point in request.landmarks.items()}
    )
    return _require(cephalometric_analyzer).analyze(landmarks).to_dict()


@app.post("/api/v1/ortho/profile", response_model=ProfileResponse)
async def analyze_soft_tissue_profile(request: ProfileRequest):
    """Soft-tissue profile analysis."""
    landmarks = ProfileLandmarks.from_mapping(
        {name: point.model_dump() for name, point in request.landmarks.items()}
    )
    return _require(profile_analyzer).analyze(landmarks).to_dict()


@app.get("/api/v1/ortho/bolton")
async def bolton_standards():
    """Bolton standard mesiodistal widths by FDI tooth number."""
    return {str(tooth): width for tooth, width in BOLTON_STANDARDS.items()}


@app.post("/api/v1/ortho/ald", response_model=ALDResponse)
async def analyze_arch_length(request: ALDRequest):
    """Arch-length discrepancy."""
    def arch(teeth, name):
        if teeth is None:
            return default_arch(name)
        return [ToothMeasurement(t.tooth_number, t.mesiodistal_width) for t in teeth]

    calculator = _require(ald_calculator)
    try:
        result = calculator.calculate(
            arch(request.upper_teeth, 'upper'),
            arch(request.lower_teeth, 'lower'),
            request.upper_arch_available,
            request.lower_arch_available,
        )
    except Exception as e:
        logger.exception("ALD analysis failed")
        raise HTTPException(status_code=500, detail=str(e))
    return result.to_dict()


@app.post("/api/v1/surgery/war", response_model=WARResponse)
async def score_war(request: WARRequest):
    """WAR extraction difficulty."""
    result = _require(war_scorer).assess(
        request.winter_class,
        request.arch_class,
        request.radio_depth,
        tooth_number=request.tooth_number,
    )
    return result.to_dict()


@app.post("/api/v1/diagnosis/provisional", response_model=list[DiagnosisCandidateResponse])
async def provisional_diagnosis(request: DiagnosisRequest):
    """Ranked provisional diagnoses."""
    engine = _require(diagnosis_engine)
    try:
        candidates = engine.rank(
            request.symptoms,
            request.clinical_findings,
            request.vital_signs,
        )
    except Exception as e:
        logger.exception("Diagnosis ranking failed")
        raise HTTPException(status_code=500, detail=str(e))
    return [c.to_dict() for c in candidates]


@app.get("/api/v1/diagnosis/icd10/{code}", response_model=DiagnosticRuleResponse)
async def diagnosis_by_icd10(code: str):
    """Knowledge-base rule for an ICD-10 code."""
    rule = get_by_icd10(code)
    if rule is None:
        raise HTTPException(status_code=404, detail=f"No diagnosis for ICD-10 code {code}")
    return rule.to_dict()


@app.get("/api/v1/diagnosis/search", response_model=list[DiagnosticRuleResponse])
async def diagnosis_search(q: str):
    """Knowledge-base rules mentioning a symptom or finding key."""
    return [rule.to_dict() for rule in search_by_symptom(q)]


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.api.host, port=config.api.port)
