"""
Weight unit conversion.

Weights are stored in pounds.  Conversion to the caller's preferred unit is
applied only when building API responses.
"""

from typing import Literal

WeightUnit = Literal["lbs", "kg"]

LBS_PER_KG = 2.20462
STORED_UNIT: WeightUnit = "lbs"


def convert_weight(value: float, to_unit: WeightUnit = STORED_UNIT) -> float:
    """Convert a stored (lbs) weight or volume to *to_unit*."""
    if to_unit == "kg":
        return value / LBS_PER_KG
    return value

