"""Tests for box sizing and text measurement."""

import math

import pytest

from jsonnode import DisplayLine, Font, LayoutConfig, MeasurementError, wcwidth_measure
from jsonnode.diagram_components.sizing import calculate_size


def stub_measure(text, font):
    return len(text) * 7


class TestCalculateSize:

    def test_width_uses_widest_line(self):
        lines = [DisplayLine("a", "1"), DisplayLine("long", '"value"')]
        width, height = calculate_size(lines, stub_measure, LayoutConfig())
        assert width == len('long: "value"') * 7 + 20
        assert height == 2 * 18 + 20

    def test_zero_lines_floor(self):
        assert calculate_size([], stub_measure, LayoutConfig()) == (20, 20)

    def test_padding_and_line_height_are_configurable(self):
        config = LayoutConfig(padding=4, line_height=10)
        width, height = calculate_size([DisplayLine("", "1")], stub_measure, config)
        assert width == 3 * 7 + 8
        assert height == 18

    def test_measure_receives_configured_font(self):
        seen = []

        def recording_measure(text, font):
            seen.append(font)
            return 0

        calculate_size([DisplayLine("", "x")], recording_measure, LayoutConfig(font_size=14, font_family="serif"))
        assert seen == [Font(family="serif", size_px=14)]


class TestMeasurementFailures:
    """Geometry is never computed from a missing measurement."""

    def test_missing_measure(self):
        with pytest.raises(MeasurementError):
            calculate_size([DisplayLine("", "1")], None, LayoutConfig())

    def test_measure_raises(self):
        def broken(text, font):
            raise RuntimeError("no canvas")

        with pytest.raises(MeasurementError) as excinfo:
            calculate_size([DisplayLine("", "1")], broken, LayoutConfig())
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    @pytest.mark.parametrize("bad", [None, "12", -1, math.nan, math.inf, True])
    def test_measure_returns_invalid_width(self, bad):
        with pytest.raises(MeasurementError):
            calculate_size([DisplayLine("", "1")], lambda text, font: bad, LayoutConfig())


class TestWcwidthMeasure:

    def test_ascii_cells(self):
        assert wcwidth_measure("abc", Font(size_px=12)) == pytest.approx(3 * 12 * 0.6)

    def test_wide_characters_take_two_cells(self):
        assert wcwidth_measure("漢", Font(size_px=10)) == pytest.approx(2 * 10 * 0.6)

    def test_empty_text(self):
        assert wcwidth_measure("", Font()) == 0
