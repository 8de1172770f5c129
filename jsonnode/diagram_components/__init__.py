from .canvas import CanvasExtent
from .content import DisplayLine, extract_lines, literal_text
from .core import CollisionPolicy, Font, LayoutConfig
from .diagram import JsonDiagram, Layout, LayoutContext, build_layout, json_to_svg
from .edge import Edge
from .node import Box
from .placement import PlacementResolver
from .sizing import Measure, calculate_size, wcwidth_measure
from .summary import layout_table
from .svg import SvgStyle, render_svg

__all__ = [
    "Box",
    "CanvasExtent",
    "CollisionPolicy",
    "DisplayLine",
    "Edge",
    "Font",
    "JsonDiagram",
    "Layout",
    "LayoutConfig",
    "LayoutContext",
    "Measure",
    "PlacementResolver",
    "SvgStyle",
    "build_layout",
    "calculate_size",
    "extract_lines",
    "json_to_svg",
    "layout_table",
    "literal_text",
    "render_svg",
    "wcwidth_measure",
]
