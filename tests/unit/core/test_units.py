"""Tests for weight unit conversion."""

import pytest

from app.core.units import LBS_PER_KG, convert_weight


class TestConvertWeight:
    def test_pounds_unchanged(self):
        assert convert_weight(225.0, "lbs") == 225.0

    def test_default_is_stored_unit(self):
        assert convert_weight(135.0) == 135.0

    @pytest.mark.parametrize("lbs, kg", [(0.0, 0.0), (LBS_PER_KG, 1.0), (220.462, 100.0)])
    def test_kilograms(self, lbs, kg):
        assert convert_weight(lbs, "kg") == pytest.approx(kg)
