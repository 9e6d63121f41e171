"""Risk classification from peak river discharge."""

import math
from typing import Dict

from flood_watch.flood.models import RiskLevel

# Lower bounds in m³/s, lower-inclusive
MODERATE_THRESHOLD = 500.0
HIGH_THRESHOLD = 1500.0
EXTREME_THRESHOLD = 3000.0

RISK_WEIGHTS: Dict[RiskLevel, float] = {
    RiskLevel.LOW: 0.25,
    RiskLevel.MODERATE: 0.5,
    RiskLevel.HIGH: 0.75,
    RiskLevel.EXTREME: 1.0,
}

ELEVATED_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.EXTREME})


def classify(max_discharge: float) -> RiskLevel:
    """Map a peak discharge value to a risk tier.

    Negative and NaN inputs classify as low.

    Args:
        max_discharge: Peak daily discharge in m³/s

    Returns:
        RiskLevel for the discharge
    """
    if math.isnan(max_discharge) or max_discharge < MODERATE_THRESHOLD:
        return RiskLevel.LOW
    if max_discharge < HIGH_THRESHOLD:
        return RiskLevel.MODERATE
    if max_discharge < EXTREME_THRESHOLD:
        return RiskLevel.HIGH
    return RiskLevel.EXTREME


def risk_weight(level: RiskLevel) -> float:
    """Map overlay intensity for a risk tier."""
    return RISK_WEIGHTS[level]


def is_elevated(level: RiskLevel) -> bool:
    return level in ELEVATED_LEVELS
