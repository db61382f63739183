"""Tests for hygiene, tobacco, recession, PSR, DMFT and OSMF indices."""

import pytest

from dental_scope.config import OHISThresholds, OSMFThresholds
from dental_scope.exceptions import InvalidInputError
from dental_scope.indices.ohis import OHI_INDEX_TEETH, HygieneRating, OHISCalculator, calculate_ohis
from dental_scope.indices.smoking import SmokingIndexCalculator, SmokingRisk, calculate_smoking_index
from dental_scope.indices.recession import CairoRT, classify_cairo_recession, get_cairo_recession_details
from dental_scope.indices.vmi import CalculusSeverity, calculate_vmi
from dental_scope.indices.psr import interpret_psr
from dental_scope.indices.dmft import DMFTCalculator, DMFTSeverity, calculate_dmft
from dental_scope.indices.osmf import OSMFStage, OSMFStager, stage_osmf


def scores(total: int) -> dict[int, int]:
    """Spread a score sum over the index teeth, 3 at most per tooth."""
    result = {}
    for tooth in OHI_INDEX_TEETH:
        result[tooth] = min(3, total)
        total -= result[tooth]
    return result


class TestOHIS:
    """Tests for OHI-S calculator."""

    @pytest.fixture
    def calculator(self):
        return OHISCalculator()

    def test_perfect_hygiene(self, calculator):
        result = calculator.calculate(scores(0), scores(0))
        assert result.debris_index == 0.0
        assert result.calculus_index == 0.0
        assert result.total == 0.0
        assert result.interpretation == HygieneRating.GOOD

    def test_worst_hygiene(self, calculator):
        result = calculator.calculate(scores(18), scores(18))
        assert result.debris_index == 3.0
        assert result.calculus_index == 3.0
        assert result.total == 6.0
        assert result.interpretation == HygieneRating.POOR
        assert "scaling" in result.recommendation.lower()

    @pytest.mark.parametrize("debris_sum,calculus_sum,total,rating", [
        (6, 1, 1.2, HygieneRating.GOOD),
        (6, 2, 1.3, HygieneRating.FAIR),
        (12, 6, 3.0, HygieneRating.FAIR),
        (11, 8, 3.1, HygieneRating.POOR),
    ])
    def test_band_boundaries(self, calculator, debris_sum, calculus_sum, total, rating):
        result = calculator.calculate(scores(debris_sum), scores(calculus_sum))
        assert result.total == pytest.approx(total)
        assert result.interpretation == rating

    def test_interpret_edges(self, calculator):
        assert calculator.interpret(1.2) == HygieneRating.GOOD
        assert calculator.interpret(1.3) == HygieneRating.FAIR
        assert calculator.interpret(3.0) == HygieneRating.FAIR
        assert calculator.interpret(3.1) == HygieneRating.POOR

    def test_total_is_sum_of_indices(self, calculator):
        for d in range(0, 19, 5):
            for c in range(0, 19, 4):
                result = calculator.calculate(scores(d), scores(c))
                assert 0 <= result.debris_index <= 3
                assert 0 <= result.calculus_index <= 3
                assert result.total == pytest.approx(result.debris_index + result.calculus_index)

    def test_missing_teeth_score_zero(self, calculator):
        result = calculator.calculate({16: 3}, {})
        assert result.debris_index == 0.5
        assert result.calculus_index == 0.0
        assert result.debris_scores[46] == 0
        assert len(result.calculus_scores) == 6

    def test_non_index_teeth_ignored(self, calculator):
        result = calculator.calculate({17: 3, 16: 0}, {})
        assert result.debris_index == 0.0
        assert result.ignored_teeth == [17]

    def test_custom_thresholds(self):
        calculator = OHISCalculator(OHISThresholds(good_max=0.5, fair_max=1.0))
        assert calculator.interpret(0.7) == HygieneRating.FAIR

    def test_idempotent(self):
        assert calculate_ohis(scores(7), scores(3)) == calculate_ohis(scores(7), scores(3))


class TestSmokingIndex:
    """Tests for smoking index calculator."""

    @pytest.fixture
    def calculator(self):
        return SmokingIndexCalculator()

    def test_index_is_product(self, calculator):
        assert calculator.calculate(7, 13).smoking_index == 91

    def test_moderate_at_100(self, calculator):
        result = calculator.calculate(10, 10)
        assert result.smoking_index == 100
        assert result.risk_level == SmokingRisk.MODERATE
        assert not result.requires_immediate_action

    def test_high_at_200(self, calculator):
        result = calculator.calculate(20, 10)
        assert result.smoking_index == 200
        assert result.risk_level == SmokingRisk.HIGH
        assert result.requires_immediate_action
        assert len(result.mandatory_actions) == 4
        assert any("Cessation" in a for a in result.mandatory_actions)

    def test_high_band_inclusive_at_400(self, calculator):
        assert calculator.calculate(20, 20).risk_level == SmokingRisk.HIGH
        assert calculator.calculate(21, 20).risk_level == SmokingRisk.VERY_HIGH

    def test_non_smoker(self, calculator):
        result = calculator.calculate(0, 30)
        assert result.smoking_index == 0
        assert result.risk_level == SmokingRisk.LOW
        assert result.mandatory_actions == []

    def test_just_below_moderate(self, calculator):
        assert calculator.calculate(9.9, 10).risk_level == SmokingRisk.LOW

    def test_negative_input_not_rejected(self, calculator):
        assert calculator.calculate(-5, 10).smoking_index == -50

    def test_idempotent(self, calculator):
        assert calculator.calculate(20, 15) == calculator.calculate(20, 15)
        assert calculate_smoking_index(3, 4) == calculate_smoking_index(3, 4)

    def test_to_dict(self):
        data = calculate_smoking_index(25, 20).to_dict()
        assert data['risk_level'] == "Very High"
        assert data['requires_immediate_action'] is True


class TestCairoRecession:
    """Tests for Cairo recession classification."""

    def test_mgj_ignored_without_interdental_loss(self):
        assert classify_cairo_recession(False, True) == CairoRT.RT1
        assert classify_cairo_recession(False, False) == CairoRT.RT1

    def test_rt2(self):
        assert classify_cairo_recession(True, False) == CairoRT.RT2

    def test_rt3(self):
        assert classify_cairo_recession(True, True) == CairoRT.RT3

    def test_details(self):
        details = get_cairo_recession_details(31, CairoRT.RT1)
        assert details.tooth_number == 31
        assert "100%" in details.prognosis

        rt3 = get_cairo_recession_details(41, "RT3")
        assert rt3.classification == CairoRT.RT3
        assert rt3.prognosis.startswith("Limited")

    def test_idempotent(self):
        for loss in (False, True):
            for mgj in (False, True):
                assert classify_cairo_recession(loss, mgj) == classify_cairo_recession(loss, mgj)
        assert get_cairo_recession_details(31, CairoRT.RT2) == get_cairo_recession_details(31, CairoRT.RT2)


class TestVMI:
    """Tests for Volpe-Manhold index."""

    def test_minimal(self):
        result = calculate_vmi({31: 0.5, 41: 0.5})
        assert result.total_score == 1.0
        assert result.severity == CalculusSeverity.MINIMAL

    def test_heavy(self):
        result = calculate_vmi({31: 2.0, 32: 2.0, 41: 2.0, 42: 1.5})
        assert result.total_score == 7.5
        assert result.severity == CalculusSeverity.HEAVY

    def test_non_index_teeth_ignored(self):
        result = calculate_vmi({31: 1.0, 36: 5.0})
        assert result.total_score == 1.0
        assert 36 not in result.measurements

    def test_idempotent(self):
        measurements = {31: 0.7, 32: 1.1, 41: 0.4, 42: 2.3}
        assert calculate_vmi(measurements) == calculate_vmi(measurements)


class TestPSR:
    """Tests for PSR interpretation."""

    def test_worst_sextant_drives_result(self):
        result = interpret_psr([0, 1, 2, 0, 3, 1])
        assert result.max_code == 3
        assert result.requires_full_charting
        assert result.suggested_treatment == "Full periodontal charting + SRP"

    def test_healthy(self):
        result = interpret_psr([0] * 6)
        assert result.overall_assessment == "Healthy periodontium"
        assert not result.requires_full_charting

    def test_invalid_codes(self):
        with pytest.raises(InvalidInputError):
            interpret_psr([0, 1, 2, 3, 4])
        with pytest.raises(InvalidInputError):
            interpret_psr([0, 0, 0, 0, 0, 5])

    def test_idempotent(self):
        assert interpret_psr([2, 2, 1, 0, 4, 1]) == interpret_psr([2, 2, 1, 0, 4, 1])


class TestDMFT:
    """Tests for DMFT calculator."""

    @pytest.fixture
    def calculator(self):
        return DMFTCalculator()

    def test_components(self, calculator):
        result = calculator.calculate([16, 26, 18], [36], [11, 16])
        assert (result.decayed, result.missing, result.filled) == (2, 1, 1)
        assert result.total == 4
        assert result.severity == DMFTSeverity.LOW
        assert result.excluded_teeth == [18]

    def test_missing_takes_precedence(self, calculator):
        result = calculator.calculate([46], [46], [])
        assert (result.decayed, result.missing) == (0, 1)

    def test_caries_free(self):
        result = calculate_dmft([], [], [])
        assert result.total == 0
        assert result.severity == DMFTSeverity.VERY_LOW

    @pytest.mark.parametrize("total,severity", [
        (1, DMFTSeverity.VERY_LOW),
        (2, DMFTSeverity.LOW),
        (5, DMFTSeverity.MODERATE),
        (8, DMFTSeverity.MODERATE),
        (13, DMFTSeverity.HIGH),
        (14, DMFTSeverity.VERY_HIGH),
    ])
    def test_bands(self, calculator, total, severity):
        assert calculator.classify(total) == severity

    def test_idempotent(self, calculator):
        assert calculator.calculate([14, 15], [46], [21]) == calculator.calculate([14, 15], [46], [21])


class TestOSMF:
    """Tests for OSMF staging."""

    @pytest.mark.parametrize("opening,stage", [
        (40, OSMFStage.I),
        (35, OSMFStage.I),
        (34.9, OSMFStage.II),
        (25, OSMFStage.II),
        (20, OSMFStage.III),
        (15, OSMFStage.III),
        (10, OSMFStage.IVA),
        (5, OSMFStage.IVA),
        (4, OSMFStage.IVB),
    ])
    def test_stages(self, opening, stage):
        assert stage_osmf(opening).stage == stage

    def test_details(self):
        data = stage_osmf(3).to_dict()
        assert data['stage'] == "IVB"
        assert data['malignancy_risk'].startswith("Critical")

    def test_custom_thresholds(self):
        stager = OSMFStager(OSMFThresholds(stage_i_min=40.0))
        assert stager.classify(38) == OSMFStage.II

    def test_idempotent(self):
        assert stage_osmf(22.5) == stage_osmf(22.5)
