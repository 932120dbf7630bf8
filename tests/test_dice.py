"""Tests for the public facade: shorthand, text output and plotting."""

from fractions import Fraction

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

import dice
from dice import d, details, plot, results
from die import die
from probability import probability


class TestShorthand:
    """Tests for d()."""

    def test_d(self):
        assert d(6) == die.new(6)

    def test_exports(self):
        for name in dice.__all__:
            assert hasattr(dice, name)


class TestResults:
    """Tests for the text histogram."""

    def test_one_line_per_value(self):
        lines = results(d(6) + d(6)).splitlines()
        assert len(lines) == 11

    def test_line_format(self):
        first = results(d(2)).splitlines()[0]
        assert first == "         1 :     50.000 : " + "#" * 25 + "-" * 25

    def test_neutral(self):
        assert results(die.empty()) == "         0 :    100.000 : " + "#" * 50

    def test_fraction_chances(self):
        half = Fraction(1, 2)
        coin = die.from_probabilities([probability(0, half), probability(1, half)])
        assert results(coin).splitlines()[1] == "         1 :     50.000 : " + "#" * 25 + "-" * 25


class TestDetails:
    """Tests for the statistics summary."""

    def test_d6(self):
        lines = details(d(6)).splitlines()
        expected = [
            ("Min", "1.000"),
            ("Max", "6.000"),
            ("Mean", "3.500"),
            ("Variance", "2.917"),
            ("Standard Deviation", "1.708"),
        ]
        assert lines == [f"{label:<20}{number:>10}" for label, number in expected]

    def test_line_width(self):
        for line in details(d(20) + 3).splitlines():
            assert len(line) == 30


class TestPlot:
    """Tests for plot()."""

    def teardown_method(self):
        plt.close("all")

    def test_returns_figure(self):
        fig = plot(d(6) + d(6))
        assert isinstance(fig, matplotlib.figure.Figure)
        assert fig.axes[0].get_title() == "Distribution of 1d6+1d6"

    def test_custom_name(self):
        fig = plot(d(20), "attack roll")
        assert fig.axes[0].get_title() == "Distribution of attack roll"

    @pytest.mark.parametrize("sides", [150, 1200])
    def test_large_distributions(self, sides):
        fig = plot(d(sides))
        assert len(fig.axes) == 2
