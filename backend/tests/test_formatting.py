"""
Tests for display formatting — fixed-point balances, progress, rarity names.

Tests: format_balance, animation_progress, rarity_name
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
from services.formatting import animation_progress, format_balance, rarity_name

WEI = 10**18


class TestFormatBalance:
    """Tests for format_balance()."""

    @pytest.mark.unit
    def test_zero(self):
        assert format_balance(0) == "0"

    @pytest.mark.unit
    def test_truncates_not_rounds(self):
        """1.999…e18 renders as 1, not 2."""
        assert format_balance(1999999999999999999) == "1"

    @pytest.mark.unit
    def test_below_one_token(self):
        assert format_balance(WEI - 1) == "0"

    @pytest.mark.unit
    def test_default_threshold(self):
        assert format_balance(50_000 * WEI) == "50000"

    @pytest.mark.unit
    def test_beyond_uint128_keeps_precision(self):
        """Values past float precision stay exact."""
        value = 123456789012345678901234567 * WEI + 999
        assert format_balance(value) == "123456789012345678901234567"


class TestAnimationProgress:
    """Tests for animation_progress()."""

    @pytest.mark.unit
    def test_zero_balance(self):
        assert animation_progress(0, 50_000 * WEI) == 0

    @pytest.mark.unit
    def test_half_way(self):
        assert animation_progress(25_000 * WEI, 50_000 * WEI) == 50

    @pytest.mark.unit
    def test_floors_fractional_percent(self):
        """49.999…% floors to 49."""
        assert animation_progress(25_000 * WEI - 1, 50_000 * WEI) == 49

    @pytest.mark.unit
    def test_over_threshold_exceeds_100(self):
        assert animation_progress(75_000 * WEI, 50_000 * WEI) == 150

    @pytest.mark.unit
    def test_zero_threshold(self):
        assert animation_progress(1, 0) == 100
        assert animation_progress(0, 0) == 0


class TestRarityName:
    """Tests for rarity_name()."""

    @pytest.mark.unit
    @pytest.mark.parametrize("index,name", [
        (0, "Common"),
        (1, "Uncommon"),
        (2, "Rare"),
        (3, "Mythic"),
    ])
    def test_known_indices(self, index, name):
        assert rarity_name(index) == name

    @pytest.mark.unit
    def test_out_of_range_is_common(self):
        assert rarity_name(7) == "Common"
        assert rarity_name(255) == "Common"

    @pytest.mark.unit
    def test_negative_is_common(self):
        assert rarity_name(-1) == "Common"
