"""
Unit tests for the difficulty curve.
"""
import pytest
from termsweeper import bomb_probability, clamp_level, MIN_LEVEL, MAX_LEVEL


class TestBombProbability:
    """Test the logistic bomb probability curve."""

    def test_midpoint_is_half_of_maximum(self) -> None:
        """Level 5 sits in the middle of the curve."""
        assert bomb_probability(5) == pytest.approx(0.3)

    def test_curve_increases_with_level(self) -> None:
        """Higher levels place more bombs."""
        values = [bomb_probability(level) for level in range(MIN_LEVEL, MAX_LEVEL + 1)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    @pytest.mark.parametrize("level", range(MIN_LEVEL, MAX_LEVEL + 1))
    def test_probability_stays_within_bounds(self, level: int) -> None:
        """Probability lies strictly between 0 and 0.6."""
        assert 0.0 < bomb_probability(level) < 0.6

    def test_known_endpoints(self) -> None:
        """Endpoints follow 0.6 / (1 + e^-(level - 5))."""
        assert bomb_probability(1) == pytest.approx(0.6 / (1 + 54.598150033), rel=1e-6)
        assert bomb_probability(9) == pytest.approx(0.6 / (1 + 0.018315639), rel=1e-6)


class TestClampLevel:
    """Test level clamping."""

    @pytest.mark.parametrize("level,expected", [
        (0, 1), (1, 1), (5, 5), (9, 9), (10, 9), (-3, 1),
    ])
    def test_clamp(self, level: int, expected: int) -> None:
        """Levels outside 1..9 are pulled back in."""
        assert clamp_level(level) == expected
