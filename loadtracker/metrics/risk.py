"""
ACWR risk classification.

Fixed thresholds::

    danger   acwr < 0.70  or  acwr >= 1.50
    caution  0.70 <= acwr < 0.80  or  1.30 < acwr < 1.50
    optimal  0.80 <= acwr <= 1.30

0.70 itself is caution; 1.50 itself is danger.
"""

from loadtracker.schemas.metrics import RiskStatus

DANGER_LOW = 0.70
CAUTION_LOW = 0.80
CAUTION_HIGH = 1.30
DANGER_HIGH = 1.50


def classify_acwr(acwr: float) -> RiskStatus:
    """Map an ACWR value to its :class:`RiskStatus`."""
    if acwr < DANGER_LOW or acwr >= DANGER_HIGH:
        return RiskStatus.DANGER
    if acwr < CAUTION_LOW or acwr > CAUTION_HIGH:
        return RiskStatus.CAUTION
    return RiskStatus.OPTIMAL
