"""Tests for orthodontic geometry, cephalometric, profile and ALD analysis."""

import math

import pytest

from dental_scope.config import SkeletalNorms
from dental_scope.exceptions import InvalidInputError
from dental_scope.orthodontics.geometry import (
    Landmark2D,
    angle_at_vertex,
    angle_between_lines,
    signed_distance_to_line,
)
from dental_scope.orthodontics.cephalometric import (
    CephalometricAnalyzer,
    CephalometricLandmarks,
    RangeStatus,
    SkeletalClass,
    VerticalPattern,
    calculate_all_angles,
    validate_landmarks,
)
from dental_scope.orthodontics.profile import (
    ProfileLandmarks,
    ProfileType,
    analyze_profile,
    validate_profile_landmarks,
)
from dental_scope.orthodontics.ald import (
    ALDCalculator,
    ToothMeasurement,
    TreatmentRecommendation,
    calculate_ald,
    default_arch,
)


def ray(origin: Landmark2D, degrees: float, length: float = 50.0) -> Landmark2D:
    """Point at `length` from origin along the given direction."""
    theta = math.radians(degrees)
    return Landmark2D(origin.x + length * math.cos(theta), origin.y + length * math.sin(theta))


def tracing(sna: float = 82.0, snb: float = 79.0, fma: float = 25.0) -> dict:
    """Synthetic tracing with the requested angles; S lies on the -x axis from N."""
    n = Landmark2D(0.0, 0.0)
    go = Landmark2D(-50.0, 60.0)
    return {
        'S': Landmark2D(-60.0, 0.0),
        'N': n,
        'A': ray(n, 180.0 - sna),
        'B': ray(n, 180.0 - snb, 70.0),
        'Po': Landmark2D(-70.0, 20.0),
        'Or': Landmark2D(-5.0, 20.0),
        'Go': go,
        'Gn': ray(go, fma, 60.0),
    }


class TestGeometry:
    """Tests for planar geometry helpers."""

    def test_right_angle(self):
        assert angle_at_vertex(Landmark2D(1, 0), Landmark2D(0, 0), Landmark2D(0, 1)) == 90.0

    def test_collinear_opposite(self):
        assert angle_at_vertex(Landmark2D(0, 0), Landmark2D(1, 0), Landmark2D(2, 0)) == 180.0

    def test_collinear_same_side(self):
        assert angle_at_vertex(Landmark2D(2, 0), Landmark2D(0, 0), Landmark2D(1, 0)) == 0.0

    def test_zero_length_ray(self):
        v = Landmark2D(3, 4)
        assert angle_at_vertex(v, v, Landmark2D(5, 5)) == 0.0

    def test_angle_between_lines(self):
        angle = angle_between_lines(
            Landmark2D(0, 0), Landmark2D(10, 0),
            Landmark2D(0, 0), ray(Landmark2D(0, 0), 25.0),
        )
        assert angle == 25.0

    def test_signed_distance(self):
        start, end = Landmark2D(10, 0), Landmark2D(10, 40)
        assert signed_distance_to_line(Landmark2D(8, 20), start, end) == 2.0
        assert signed_distance_to_line(Landmark2D(12, 20), start, end) == -2.0
        assert signed_distance_to_line(Landmark2D(10, 20), start, end) == 0.0

    def test_degenerate_line(self):
        p = Landmark2D(0, 0)
        assert signed_distance_to_line(Landmark2D(3, 4), p, p) == 5.0

    def test_coerce(self):
        assert Landmark2D.coerce({'x': 1, 'y': 2}) == Landmark2D(1.0, 2.0)
        assert Landmark2D.coerce((3, 4)) == Landmark2D(3.0, 4.0)


class TestCephalometric:
    """Tests for cephalometric analyzer."""

    @pytest.fixture
    def analyzer(self):
        return CephalometricAnalyzer()

    def test_class_i_normodivergent(self, analyzer):
        angles = analyzer.analyze(CephalometricLandmarks.from_mapping(tracing()))
        assert angles.sna == 82.0
        assert angles.snb == 79.0
        assert angles.anb == pytest.approx(3.0)
        assert angles.fma == 25.0
        assert angles.skeletal_class == SkeletalClass.CLASS_I
        assert angles.vertical_pattern == VerticalPattern.NORMODIVERGENT

    def test_anb_identity(self, analyzer):
        for sna, snb in [(82.3, 77.1), (79.6, 80.4), (85.05, 80.0)]:
            angles = analyzer.analyze(CephalometricLandmarks.from_mapping(tracing(sna, snb)))
            assert angles.anb == angles.sna - angles.snb

    def test_class_ii(self, analyzer):
        angles = analyzer.analyze(CephalometricLandmarks.from_mapping(tracing(84.0, 78.0)))
        assert angles.skeletal_class == SkeletalClass.CLASS_II

    def test_class_iii(self, analyzer):
        angles = analyzer.analyze(CephalometricLandmarks.from_mapping(tracing(80.0, 81.0)))
        assert angles.skeletal_class == SkeletalClass.CLASS_III

    def test_class_boundaries_inclusive(self, analyzer):
        assert analyzer.classify_skeletal(2.0) == SkeletalClass.CLASS_I
        assert analyzer.classify_skeletal(4.0) == SkeletalClass.CLASS_I
        assert analyzer.classify_skeletal(4.1) == SkeletalClass.CLASS_II
        assert analyzer.classify_skeletal(1.9) == SkeletalClass.CLASS_III

    def test_vertical_patterns(self, analyzer):
        high = analyzer.analyze(CephalometricLandmarks.from_mapping(tracing(fma=35.0)))
        low = analyzer.analyze(CephalometricLandmarks.from_mapping(tracing(fma=15.0)))
        assert high.vertical_pattern == VerticalPattern.HYPERDIVERGENT
        assert low.vertical_pattern == VerticalPattern.HYPODIVERGENT

    def test_custom_norms(self):
        analyzer = CephalometricAnalyzer(SkeletalNorms(fma_normal_min=22.0, fma_normal_max=28.0))
        assert analyzer.classify_vertical(21.0) == VerticalPattern.HYPODIVERGENT
        assert analyzer.classify_vertical(29.0) == VerticalPattern.HYPERDIVERGENT

    def test_range_flags(self):
        angles = calculate_all_angles(CephalometricLandmarks.from_mapping(tracing(86.0, 79.0)))
        flags = angles.range_flags()
        assert flags['SNA'] == RangeStatus.HIGH
        assert flags['SNB'] == RangeStatus.NORMAL
        assert angles.to_dict()['range_flags']['ANB'] == "high"

    def test_validate_landmarks(self):
        points = tracing()
        assert validate_landmarks(points).valid

        del points['Go']
        points['Gn'] = None
        result = validate_landmarks(points)
        assert not result.valid
        assert result.missing == ['Go', 'Gn']

    def test_missing_landmarks_raise(self):
        points = tracing()
        del points['A']
        with pytest.raises(InvalidInputError) as exc:
            CephalometricLandmarks.from_mapping(points)
        assert exc.value.fields == ['A']

    def test_idempotent(self, analyzer):
        landmarks = CephalometricLandmarks.from_mapping(tracing(81.2, 78.7, 27.3))
        assert analyzer.analyze(landmarks) == analyzer.analyze(landmarks)


class TestProfile:
    """Tests for soft-tissue profile analysis."""

    @staticmethod
    def profile(nasolabial: float) -> ProfileLandmarks:
        pronasale = Landmark2D(0.0, 0.0)
        return ProfileLandmarks(
            nose_tip=Landmark2D(10.0, 0.0),
            pronasale=pronasale,
            upper_lip=ray(pronasale, nasolabial, 10.0),
            lower_lip=Landmark2D(12.0, 20.0),
            soft_tissue_pogonion=Landmark2D(10.0, 40.0),
        )

    @pytest.mark.parametrize("angle,expected", [
        (80.0, ProfileType.CONVEX),
        (90.0, ProfileType.STRAIGHT),
        (100.0, ProfileType.STRAIGHT),
        (110.0, ProfileType.STRAIGHT),
        (120.0, ProfileType.CONCAVE),
    ])
    def test_profile_type(self, angle, expected):
        analysis = analyze_profile(self.profile(angle))
        assert analysis.nasolabial_angle == angle
        assert analysis.profile_type == expected

    def test_e_line_signs(self):
        landmarks = ProfileLandmarks.from_mapping({
            'noseTip': {'x': 10, 'y': 0},
            'pronasale': {'x': 0, 'y': 0},
            'upperLip': {'x': 8, 'y': 10},
            'lowerLip': {'x': 12, 'y': 20},
            'softTissuePogonion': {'x': 10, 'y': 40},
        })
        analysis = analyze_profile(landmarks)
        assert analysis.e_line_upper_lip == 2.0
        assert analysis.e_line_lower_lip == -2.0

    def test_missing_profile_landmarks(self):
        result = validate_profile_landmarks({'nose_tip': (0, 0), 'upper_lip': (1, 1)})
        assert not result.valid
        assert 'soft_tissue_pogonion' in result.missing

        with pytest.raises(InvalidInputError):
            ProfileLandmarks.from_mapping({'nose_tip': (0, 0)})

    def test_idempotent(self):
        landmarks = self.profile(97.3)
        assert analyze_profile(landmarks) == analyze_profile(landmarks)


class TestALD:
    """Tests for arch-length discrepancy calculator."""

    @pytest.fixture
    def calculator(self):
        return ALDCalculator()

    def test_default_arches(self):
        upper = default_arch('upper')
        lower = default_arch('lower')
        assert len(upper) == 14
        assert round(sum(t.mesiodistal_width for t in upper), 1) == 111.4
        assert round(sum(t.mesiodistal_width for t in lower), 1) == 105.6

    def test_default_arch_overrides(self):
        upper = default_arch('upper', {11: 9.0})
        assert round(sum(t.mesiodistal_width for t in upper), 1) == 111.9

    def test_worse_arch_drives_recommendation(self, calculator):
        result = calculator.calculate(
            [ToothMeasurement(16, 36.5)], [ToothMeasurement(36, 35.0)], 34.0, 35.0,
        )
        assert result.upper_discrepancy == -2.5
        assert result.lower_discrepancy == 0.0
        assert result.worst_discrepancy == -2.5
        assert result.recommendation == TreatmentRecommendation.EXPANSION

    @pytest.mark.parametrize("discrepancy,expected", [
        (-4.1, TreatmentRecommendation.EXTRACTION),
        (-4.0, TreatmentRecommendation.EXPANSION),
        (-2.0, TreatmentRecommendation.IPR),
        (-0.1, TreatmentRecommendation.IPR),
        (0.0, TreatmentRecommendation.NONE),
        (3.0, TreatmentRecommendation.NONE),
    ])
    def test_recommendation_bands(self, calculator, discrepancy, expected):
        assert calculator.recommend(discrepancy) == expected

    def test_duplicates_counted(self):
        teeth = [ToothMeasurement(11, 8.5), ToothMeasurement(11, 8.5)]
        result = calculate_ald(teeth, [], 17.0, 0.0)
        assert result.upper_arch_required == 17.0

    def test_idempotent(self, calculator):
        upper, lower = default_arch('upper'), default_arch('lower', {31: 5.4})
        assert calculator.calculate(upper, lower, 108.0, 104.2) == calculator.calculate(upper, lower, 108.0, 104.2)

    def test_spacing_description(self):
        data = calculate_ald([ToothMeasurement(11, 8.0)], [ToothMeasurement(31, 10.0)], 10.0, 5.0).to_dict()
        assert data['upper_description'] == "2.0 mm spacing"
        assert data['lower_description'] == "5.0 mm crowding"
        assert data['recommendation'] == "Extraction"
