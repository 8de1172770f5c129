from .diagram_components import (
    Box,
    CanvasExtent,
    CollisionPolicy,
    DisplayLine,
    Edge,
    Font,
    JsonDiagram,
    Layout,
    LayoutConfig,
    PlacementResolver,
    SvgStyle,
    build_layout,
    extract_lines,
    json_to_svg,
    layout_table,
    render_svg,
    wcwidth_measure,
)

__all__ = [
    "JsonDiagram",
    "Layout",
    "LayoutConfig",
    "CollisionPolicy",
    "Font",
    "Box",
    "Edge",
    "DisplayLine",
    "CanvasExtent",
    "PlacementResolver",
    "SvgStyle",
    "build_layout",
    "extract_lines",
    "json_to_svg",
    "layout_table",
    "render_svg",
    "wcwidth_measure",
]
