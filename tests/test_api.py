"""Tests for FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from api.main import app

    # Context manager runs the lifespan handler that builds the calculators
    with TestClient(app) as test_client:
        yield test_client


CEPH_LANDMARKS = {
    'S': {'x': -60.0, 'y': 0.0},
    'N': {'x': 0.0, 'y': 0.0},
    'A': {'x': -6.96, 'y': 49.51},
    'B': {'x': -13.36, 'y': 68.71},
    'Po': {'x': -70.0, 'y': 20.0},
    'Or': {'x': -5.0, 'y': 20.0},
    'Go': {'x': -50.0, 'y': 60.0},
    'Gn': {'x': 4.38, 'y': 85.36},
}


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "war" in data["calculators"]


class TestIndexEndpoints:
    """Tests for index endpoints."""

    def test_ohis(self, client):
        response = client.post("/api/v1/indices/ohis", json={
            "debris_scores": {"16": 1, "11": 1, "26": 1, "36": 1, "31": 1, "46": 1},
            "calculus_scores": {"16": 1},
        })
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1.2
        assert data["interpretation"] == "Good"

    def test_smoking(self, client):
        response = client.post("/api/v1/indices/smoking", json={
            "cigarettes_per_day": 20, "years_of_smoking": 10,
        })
        data = response.json()
        assert data["smoking_index"] == 200
        assert data["risk_level"] == "High"
        assert data["requires_immediate_action"] is True

    def test_cairo(self, client):
        response = client.post("/api/v1/indices/cairo", json={
            "tooth_number": 41, "has_interdental_loss": True, "extends_to_mgj": True,
        })
        assert response.json()["classification"] == "RT3"

    def test_vmi(self, client):
        response = client.post("/api/v1/indices/vmi", json={"measurements": {"31": 1.5, "41": 1.0}})
        data = response.json()
        assert data["total_score"] == 2.5
        assert data["severity"] == "Mild"


class TestOrthoEndpoints:
    """Tests for orthodontic endpoints."""

    def test_cephalometric(self, client):
        response = client.post("/api/v1/ortho/cephalometric", json={"landmarks": CEPH_LANDMARKS})
        assert response.status_code == 200
        data = response.json()
        assert data["skeletal_class"] == "Class I"
        assert data["vertical_pattern"] == "Normodivergent"
        assert data["ANB"] == pytest.approx(data["SNA"] - data["SNB"], abs=0.05)

    def test_cephalometric_missing_landmark(self, client):
        landmarks = {k: v for k, v in CEPH_LANDMARKS.items() if k != 'Gn'}
        response = client.post("/api/v1/ortho/cephalometric", json={"landmarks": landmarks})
        assert response.status_code == 422
        assert response.json()["fields"] == ["Gn"]

    def test_profile(self, client):
        response = client.post("/api/v1/ortho/profile", json={"landmarks": {
            "noseTip": {"x": 10, "y": 0},
            "pronasale": {"x": 0, "y": 0},
            "upperLip": {"x": 8, "y": 10},
            "lowerLip": {"x": 12, "y": 20},
            "softTissuePogonion": {"x": 10, "y": 40},
        }})
        data = response.json()
        assert data["e_line_upper_lip"] == 2.0
        assert data["profile_type"] == "Convex"

    def test_bolton(self, client):
        data = client.get("/api/v1/ortho/bolton").json()
        assert data["11"] == 8.5
        assert len(data) == 28

    def test_ald_defaults(self, client):
        response = client.post("/api/v1/ortho/ald", json={
            "upper_arch_available": 111.4, "lower_arch_available": 100.0,
        })
        data = response.json()
        assert data["upper_discrepancy"] == 0.0
        assert data["lower_discrepancy"] == -5.6
        assert data["recommendation"] == "Extraction"

    def test_ald_measured(self, client):
        response = client.post("/api/v1/ortho/ald", json={
            "upper_teeth": [{"tooth_number": 16, "mesiodistal_width": 36.5}],
            "lower_teeth": [{"tooth_number": 36, "mesiodistal_width": 35.0}],
            "upper_arch_available": 34.0,
            "lower_arch_available": 35.0,
        })
        assert response.json()["recommendation"] == "Expansion"


class TestSurgeryAndDiagnosisEndpoints:
    """Tests for WAR and diagnosis endpoints."""

    def test_war(self, client):
        response = client.post("/api/v1/surgery/war", json={
            "winter_class": "HORIZONTAL", "arch_class": "CLASS_III", "radio_depth": "POSITION_C",
        })
        data = response.json()
        assert data["score"] == 9
        assert data["difficulty"] == "DIFFICULT"

    def test_war_invalid_label(self, client):
        response = client.post("/api/v1/surgery/war", json={
            "winter_class": "SIDEWAYS", "arch_class": "CLASS_I", "radio_depth": "POSITION_A",
        })
        assert response.status_code == 422

    def test_provisional_diagnosis(self, client):
        response = client.post("/api/v1/diagnosis/provisional", json={
            "symptoms": ["bleeding_gums"], "clinical_findings": ["pocket_depth", "bone_loss"],
        })
        data = response.json()
        assert data[0]["diagnosis"] == "Chronic Periodontitis"
        confidences = [c["confidence"] for c in data]
        assert confidences == sorted(confidences, reverse=True)

    def test_icd10_lookup(self, client):
        assert client.get("/api/v1/diagnosis/icd10/K05.10").json()["diagnosis"] == "Gingivitis"
        assert client.get("/api/v1/diagnosis/icd10/Z99").status_code == 404

    def test_search(self, client):
        data = client.get("/api/v1/diagnosis/search", params={"q": "sinus"}).json()
        assert [r["icd10_code"] for r in data] == ["K04.6"]


class TestPeriodontalEndpoints:
    """Tests for periodontal and caries endpoints."""

    def test_aap(self, client):
        response = client.post("/api/v1/indices/aap", json={"max_cal": 6, "bone_loss_per_year": 1.0})
        data = response.json()
        assert data["stage"] == "IV"
        assert data["grade"] == "B"

    def test_perio_chart(self, client):
        sites = [{"depth": 6, "bop": True}] + [{"depth": 3}] * 5
        response = client.post("/api/v1/indices/perio-chart", json={"teeth": [
            {"tooth_number": 46, "sites": sites, "furcation": 3},
        ]})
        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["total_sites"] == 6
        assert data["summary"]["bop_percentage"] == 17
        assert [a["type"] for a in data["alerts"]] == ["PD_CRITICAL", "FURCATION_III"]

    def test_perio_chart_wrong_site_count(self, client):
        response = client.post("/api/v1/indices/perio-chart", json={"teeth": [
            {"tooth_number": 46, "sites": [{"depth": 3}] * 4},
        ]})
        assert response.status_code == 422
        assert response.json()["fields"] == ["sites"]

    def test_psr(self, client):
        response = client.post("/api/v1/indices/psr", json={"sextant_codes": [0, 1, 4, 0, 2, 0]})
        assert response.json()["max_code"] == 4

    def test_psr_invalid(self, client):
        response = client.post("/api/v1/indices/psr", json={"sextant_codes": [0, 1]})
        assert response.status_code == 422

    def test_dmft(self, client):
        response = client.post("/api/v1/indices/dmft", json={
            "decayed_teeth": [16, 17, 26], "missing_teeth": [36, 46], "filled_teeth": [11],
        })
        data = response.json()
        assert data["total"] == 6
        assert data["severity"] == "Moderate"

    def test_osmf(self, client):
        response = client.post("/api/v1/indices/osmf", json={"mouth_opening_mm": 18})
        assert response.json()["stage"] == "III"
