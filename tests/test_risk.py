"""
Tests for risk classification.
"""

import math

import pytest

from flood_watch.flood.models import RiskLevel
from flood_watch.flood.risk import classify, is_elevated, risk_weight


class TestClassify:
    """Threshold behaviour of classify()."""

    @pytest.mark.parametrize(
        "discharge, expected",
        [
            (0.0, RiskLevel.LOW),
            (499.999, RiskLevel.LOW),
            (500.0, RiskLevel.MODERATE),
            (1499.999, RiskLevel.MODERATE),
            (1500.0, RiskLevel.HIGH),
            (2999.999, RiskLevel.HIGH),
            (3000.0, RiskLevel.EXTREME),
            (125000.0, RiskLevel.EXTREME),
        ],
    )
    def test_boundaries(self, discharge, expected):
        assert classify(discharge) == expected

    def test_negative_is_low(self):
        assert classify(-1.0) == RiskLevel.LOW

    def test_nan_is_low(self):
        assert classify(math.nan) == RiskLevel.LOW

    def test_infinity_is_extreme(self):
        assert classify(math.inf) == RiskLevel.EXTREME


class TestRiskHelpers:
    def test_weights_increase_with_tier(self):
        weights = [risk_weight(level) for level in RiskLevel]
        assert weights == sorted(weights)
        assert risk_weight(RiskLevel.EXTREME) == 1.0
        assert risk_weight(RiskLevel.LOW) == 0.25

    def test_elevated_tiers(self):
        assert is_elevated(RiskLevel.HIGH)
        assert is_elevated(RiskLevel.EXTREME)
        assert not is_elevated(RiskLevel.MODERATE)
        assert not is_elevated(RiskLevel.LOW)
