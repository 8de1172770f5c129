from dataclasses import dataclass
from html import escape
from typing import TYPE_CHECKING, List

from .content import DisplayLine
from .edge import Edge
from .node import Box

if TYPE_CHECKING:
    from .diagram import Layout


SVG_NS = "http://www.w3.org/2000/svg"


@dataclass(frozen=True)
class SvgStyle:

    box_fill: str = "#f6f8fa"
    box_stroke: str = "#475872"
    edge_stroke: str = "#475872"
    key_fill: str = "#8a2be2"
    value_fill: str = "#24292e"
    corner_radius: int = 5


def fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _marker(style: SvgStyle) -> str:
    return (
        "<defs>"
        '<marker id="arrowhead" markerWidth="10" markerHeight="7" refX="10" refY="3.5" orient="auto">'
        f'<polygon points="0 0, 10 3.5, 0 7" style="fill:{style.edge_stroke};" />'
        "</marker>"
        "</defs>"
    )


def edge_path(edge: Edge) -> str:
    (x0, y0), (x1, y1) = edge.from_anchor, edge.to_anchor
    (c1x, c1y), (c2x, c2y) = edge.control_points
    return (
        f"M{fmt(x0)},{fmt(y0)} "
        f"C{fmt(c1x)},{fmt(c1y)} {fmt(c2x)},{fmt(c2y)} {fmt(x1)},{fmt(y1)}"
    )


def _render_edge(edge: Edge, style: SvgStyle) -> str:
    return (
        f'<path class="edge" data-from="node-{edge.from_box_id}" data-to="node-{edge.to_box_id}" '
        f'd="{edge_path(edge)}" '
        f'style="fill:none;stroke:{style.edge_stroke};stroke-width:1;marker-end:url(#arrowhead);" />'
    )


def _render_line(line: DisplayLine, index: int, layout: "Layout", style: SvgStyle) -> str:
    config = layout.config
    y = config.padding + index * config.line_height + config.line_height / 2
    parts: List[str] = [
        f'<text x="{fmt(config.padding)}" y="{fmt(y)}" dominant-baseline="middle" xml:space="preserve">'
    ]
    if line.key:
        parts.append(
            f'<tspan class="json-key" fill="{style.key_fill}">{escape(line.key)}: </tspan>'
        )
    parts.append(f'<tspan class="json-value" fill="{style.value_fill}">{escape(line.label)}</tspan>')
    parts.append("</text>")
    return "".join(parts)


def _render_box(box: Box, layout: "Layout", style: SvgStyle) -> str:
    parts: List[str] = [
        f'<g id="node-{box.id}" class="node" transform="translate({fmt(box.x)}, {fmt(box.y)})">',
        f'<rect width="{fmt(box.width)}" height="{fmt(box.height)}" '
        f'rx="{style.corner_radius}" ry="{style.corner_radius}" '
        f'style="fill:{style.box_fill};stroke:{style.box_stroke};stroke-width:1" />',
    ]
    for index, line in enumerate(box.lines):
        parts.append(_render_line(line, index, layout, style))
    parts.append("</g>")
    return "".join(parts)


def render_svg(layout: "Layout", style: SvgStyle = SvgStyle()) -> str:
    config = layout.config
    lines: List[str] = [
        f'<svg xmlns="{SVG_NS}" width="{fmt(layout.width)}" height="{fmt(layout.height)}" '
        f'font-family="{escape(config.font_family)}" font-size="{config.font_size}">',
        _marker(style),
    ]
    lines.extend(_render_edge(edge, style) for edge in layout.edges)
    lines.extend(_render_box(box, layout, style) for box in layout.boxes)
    lines.append("</svg>")
    return "\n".join(lines)
