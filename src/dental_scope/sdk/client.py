"""
DentalScope Python SDK Client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import httpx

logger = logging.getLogger(__name__)


@dataclass
class ScoreResult:
    """Response from a scoring endpoint."""
    calculator: str
    data: dict

    @property
    def label(self) -> Optional[str]:
        """Headline classification of the result, if the calculator has one."""
        for key in ("label", "interpretation", "risk_level", "classification", "severity",
                    "stage", "overall_assessment", "skeletal_class", "profile_type",
                    "recommendation", "difficulty"):
            if key in self.data:
                return self.data[key]
        return None

    def __getitem__(self, key: str):
        return self.data[key]


class DentalScopeClient:
    """
    Python SDK client for the DentalScope API.

    Usage:
        client = DentalScopeClient(api_url="http://localhost:8000")
        result = client.war_score("HORIZONTAL", "CLASS_III", "POSITION_C")
        print(f"WAR: {result['score']} ({result.label})")
    """

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        api_key: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            api_url: Base URL of the API
            timeout: Request timeout in seconds
            api_key: Optional API key for authentication
            transport: Optional httpx transport (e.g. for testing)
        """
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport
        self.headers = {}
        if api_key:
            self.headers["Authorization"] = f"Bearer {api_key}"

    def _request(self, method: str, endpoint: str, **kwargs):
        """Make HTTP request."""
        url = f"{self.api_url}{endpoint}"
        logger.debug("%s %s", method, url)

        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.request(method, url, headers=self.headers, **kwargs)
            response.raise_for_status()
            return response.json()

    def _score(self, calculator: str, endpoint: str, payload: dict) -> ScoreResult:
        return ScoreResult(calculator=calculator, data=self._request("POST", endpoint, json=payload))

    def health_check(self) -> dict:
        """Check API health."""
        return self._request("GET", "/api/v1/health")

    def ohis(self, debris_scores: Mapping[int, int], calculus_scores: Mapping[int, int]) -> ScoreResult:
        return self._score("ohis", "/api/v1/indices/ohis", {
            "debris_scores": {str(k): v for k, v in debris_scores.items()},
            "calculus_scores": {str(k): v for k, v in calculus_scores.items()},
        })

    def smoking_index(self, cigarettes_per_day: float, years_of_smoking: float) -> ScoreResult:
        return self._score("smoking", "/api/v1/indices/smoking", {
            "cigarettes_per_day": cigarettes_per_day,
            "years_of_smoking": years_of_smoking,
        })

    def cairo_recession(self, tooth_number: int, has_interdental_loss: bool, extends_to_mgj: bool = False) -> ScoreResult:
        return self._score("cairo", "/api/v1/indices/cairo", {
            "tooth_number": tooth_number,
            "has_interdental_loss": has_interdental_loss,
            "extends_to_mgj": extends_to_mgj,
        })

    def vmi(self, measurements: Mapping[int, float]) -> ScoreResult:
        return self._score("vmi", "/api/v1/indices/vmi", {
            "measurements": {str(k): v for k, v in measurements.items()},
        })

    def aap_classification(
        self,
        max_cal: float,
        bone_loss_percent: Optional[float] = None,
        bone_loss_per_year: Optional[float] = None,
        diabetes: bool = False,
        smoker: bool = False,
    ) -> ScoreResult:
        return self._score("aap", "/api/v1/indices/aap", {
            "max_cal": max_cal,
            "bone_loss_percent": bone_loss_percent,
            "bone_loss_per_year": bone_loss_per_year,
            "diabetes": diabetes,
            "smoker": smoker,
        })

    def perio_chart(self, teeth: Sequence[Mapping]) -> dict:
        """
        Summarise a probing chart.

        Args:
            teeth: Dicts with tooth_number, six sites ({depth, bop}) and
                optional mobility/furcation grades

        Returns:
            {"summary": {...}, "alerts": [...]}
        """
        return self._request("POST", "/api/v1/indices/perio-chart", json={"teeth": list(teeth)})

    def psr(self, sextant_codes: Sequence[int]) -> ScoreResult:
        return self._score("psr", "/api/v1/indices/psr", {"sextant_codes": list(sextant_codes)})

    def dmft(
        self,
        decayed_teeth: Sequence[int] = (),
        missing_teeth: Sequence[int] = (),
        filled_teeth: Sequence[int] = (),
    ) -> ScoreResult:
        return self._score("dmft", "/api/v1/indices/dmft", {
            "decayed_teeth": list(decayed_teeth),
            "missing_teeth": list(missing_teeth),
            "filled_teeth": list(filled_teeth),
        })

    def osmf(self, mouth_opening_mm: float) -> ScoreResult:
        return self._score("osmf", "/api/v1/indices/osmf", {"mouth_opening_mm": mouth_opening_mm})

    def cephalometric(self, landmarks: Mapping[str, Mapping[str, float]]) -> ScoreResult:
        """
        Run the cephalometric analysis.

        Args:
            landmarks: Name -> {"x", "y"} for S, N, A, B, Or, Po, Go, Gn
        """
        return self._score("cephalometric", "/api/v1/ortho/cephalometric", {"landmarks": dict(landmarks)})

    def profile(self, landmarks: Mapping[str, Mapping[str, float]]) -> ScoreResult:
        return self._score("profile", "/api/v1/ortho/profile", {"landmarks": dict(landmarks)})

    def bolton_standards(self) -> dict[int, float]:
        """Bolton standard mesiodistal widths (mm) keyed by FDI tooth number."""
        data = self._request("GET", "/api/v1/ortho/bolton")
        return {int(tooth): width for tooth, width in data.items()}

    def ald(
        self,
        upper_arch_available: float,
        lower_arch_available: float,
        upper_teeth: Optional[Mapping[int, float]] = None,
        lower_teeth: Optional[Mapping[int, float]] = None,
    ) -> ScoreResult:
        """
        Arch-length discrepancy; omitted arches use the Bolton standards.

        Args:
            upper_arch_available: Upper arch perimeter in mm
            lower_arch_available: Lower arch perimeter in mm
            upper_teeth: Optional tooth -> width (mm) for the upper arch
            lower_teeth: Optional tooth -> width (mm) for the lower arch
        """
        def widths(teeth):
            if teeth is None:
                return None
            return [{"tooth_number": t, "mesiodistal_width": w} for t, w in teeth.items()]

        return self._score("ald", "/api/v1/ortho/ald", {
            "upper_arch_available": upper_arch_available,
            "lower_arch_available": lower_arch_available,
            "upper_teeth": widths(upper_teeth),
            "lower_teeth": widths(lower_teeth),
        })

    def war_score(
        self,
        winter_class: str,
        arch_class: str,
        radio_depth: str,
        tooth_number: Optional[int] = None,
    ) -> ScoreResult:
        return self._score("war", "/api/v1/surgery/war", {
            "winter_class": winter_class,
            "arch_class": arch_class,
            "radio_depth": radio_depth,
            "tooth_number": tooth_number,
        })

    def provisional_diagnosis(
        self,
        symptoms: Sequence[str],
        clinical_findings: Sequence[str] = (),
        vital_signs: Optional[Sequence[str]] = None,
    ) -> list[dict]:
        """
        Ranked provisional diagnoses.

        Returns:
            Candidate dicts ordered by descending confidence
        """
        return self._request("POST", "/api/v1/diagnosis/provisional", json={
            "symptoms": list(symptoms),
            "clinical_findings": list(clinical_findings),
            "vital_signs": list(vital_signs) if vital_signs is not None else None,
        })

    def diagnosis_by_icd10(self, code: str) -> dict:
        return self._request("GET", f"/api/v1/diagnosis/icd10/{code}")

    def diagnosis_search(self, q: str) -> list[dict]:
        """Knowledge-base rules whose symptom or finding keys contain `q`."""
        return self._request("GET", "/api/v1/diagnosis/search", params={"q": q})
