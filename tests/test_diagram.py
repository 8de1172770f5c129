"""Tests for the JsonDiagram facade and the layout summary table."""

import pytest
from rich.console import Console

from jsonnode import DiagramError, JsonDiagram, LayoutConfig, layout_table


def _console_text(renderable):
    console = Console(record=True, width=120)
    console.print(renderable)
    return console.export_text()


class TestJsonDiagram:

    def test_overrides_apply_on_top_of_config(self, measure):
        base = LayoutConfig(padding=4)
        diagram = JsonDiagram({}, measure=measure, config=base, line_height=20)
        assert diagram.config.padding == 4
        assert diagram.config.line_height == 20
        assert base.line_height == 18

    def test_default_measure_is_wcwidth(self):
        layout = JsonDiagram({"a": 1}).layout()
        assert layout.root.width == pytest.approx(len("a: 1") * 12 * 0.6 + 20)

    def test_from_json(self, measure):
        diagram = JsonDiagram.from_json('{"a": [1, 2]}', measure=measure)
        assert len(diagram.layout().boxes) == 4

    def test_from_json_keeps_key_order(self, measure):
        diagram = JsonDiagram.from_json('{"z": 1, "a": 2}', measure=measure)
        assert [line.key for line in diagram.layout().root.lines] == ["z", "a"]

    def test_from_json_rejects_invalid_text(self):
        with pytest.raises(DiagramError):
            JsonDiagram.from_json("{not json")

    def test_layout_size_includes_margin(self, measure):
        layout = JsonDiagram({}, measure=measure, canvas_margin=10).layout()
        assert layout.width == layout.max_x + 10
        assert layout.height == layout.max_y + 10


class TestLayoutTable:

    def test_rows_list_boxes(self, layout_of):
        text = _console_text(layout_table(layout_of({"a": [1, 2, 3]})))
        assert "Array(3)" in text
        assert "a: Array(3)" in text
        assert "5 boxes, 4 edges" in text

    def test_markup_in_values_is_not_interpreted(self, layout_of):
        text = _console_text(layout_table(layout_of({"[bold]": "[red]x"})))
        assert '[bold]: "[red]x"' in text

    def test_facade_summary(self, measure):
        table = JsonDiagram({"a": {"b": 1}}, measure=measure).summary()
        text = _console_text(table)
        assert "b: 1" in text
