"""Tests for outcome entries."""

from fractions import Fraction

import pytest

from probability import Numeric, probability


class TestIdentity:
    """Entries are identified and ordered by value only."""

    def test_equal_values_different_chances_are_equal(self):
        """Test that chance is ignored by equality."""
        assert probability(3, 0.25) == probability(3, 0.75)

    def test_different_values_not_equal(self):
        assert probability(3, 0.5) != probability(4, 0.5)

    def test_ordering_by_value(self):
        """Test that sorting uses the value, not the chance."""
        entries = [probability(5, 0.1), probability(1, 0.9), probability(3, 0.0)]
        assert [p.value for p in sorted(entries)] == [1, 3, 5]

    def test_hash_matches_equality(self):
        assert len({probability(2, 0.1), probability(2, 0.9)}) == 1


class TestArithmetic:
    """Tests for the two entry operators."""

    def test_add_sums_values_multiplies_chances(self):
        result = probability(2, 0.5) + probability(3, 0.25)
        assert result.value == 5
        assert result.chance == pytest.approx(0.125)

    def test_mul_scales_chance_only(self):
        result = probability(4, 0.5) * 0.5
        assert result.value == 4
        assert result.chance == pytest.approx(0.25)

    def test_rmul(self):
        assert (0.5 * probability(4, 0.5)).chance == pytest.approx(0.25)

    def test_add_non_entry_not_supported(self):
        with pytest.raises(TypeError):
            probability(1, 1.0) + 1

    def test_unpacking(self):
        value, chance = probability(7, 0.2)
        assert (value, chance) == (7, 0.2)


class TestNumeric:
    """Tests for the value capability protocol."""

    @pytest.mark.parametrize("value", [1, 2.5, Fraction(1, 3)])
    def test_numbers_are_numeric(self, value):
        assert isinstance(value, Numeric)

    def test_strings_are_not_numeric(self):
        assert not isinstance("abc", Numeric)


class TestRendering:
    """Tests for the histogram line."""

    def test_line_layout(self):
        line = str(probability(7, 0.5))
        value, percent, bar = line.split(" : ")
        assert value == "         7"
        assert percent == "    50.000"
        assert bar == "#" * 25 + "-" * 25

    def test_bar_rounds_down(self):
        bar = str(probability(1, 0.039)).split(" : ")[2]
        assert bar.count("#") == 1
        assert len(bar) == 50

    def test_fraction_chance(self):
        """Test that exact chances render like floats."""
        line = str(probability(3, Fraction(1, 3)))
        value, percent, bar = line.split(" : ")
        assert percent == "    33.333"
        assert bar == "#" * 16 + "-" * 34

    def test_full_chance_fills_bar(self):
        bar = str(probability(1, 1.0)).split(" : ")[2]
        assert bar == "#" * 50
